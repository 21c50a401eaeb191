"""Tests for date helpers."""

from freezegun import freeze_time

from dates import current_date
from tests.helpers import DATE_PATTERN


class TestCurrentDate:
    """Tests for current_date function."""

    def test_format_is_yyyy_mm_dd(self):
        """Test that the date matches YYYY-MM-DD."""
        assert DATE_PATTERN.match(current_date())

    def test_length_is_10(self):
        """Test that the date is exactly 10 characters."""
        assert len(current_date()) == 10

    def test_dashes_at_expected_positions(self):
        """Test that dashes separate year, month and day."""
        d = current_date()
        assert d[4] == "-"
        assert d[7] == "-"

    def test_month_and_day_in_range(self):
        """Test that month and day are valid calendar values."""
        d = current_date()
        assert 1 <= int(d[5:7]) <= 12
        assert 1 <= int(d[8:10]) <= 31

    def test_multiple_calls_still_valid(self):
        """Test that repeated calls keep returning well-formed dates."""
        for _ in range(10):
            assert DATE_PATTERN.match(current_date())

    @freeze_time("2026-03-05")
    def test_zero_pads_month_and_day(self):
        """Test that single-digit month and day are zero-padded."""
        assert current_date() == "2026-03-05"

    @freeze_time("2026-12-31 23:59:59")
    def test_end_of_year(self):
        """Test the last day of the year."""
        assert current_date() == "2026-12-31"
