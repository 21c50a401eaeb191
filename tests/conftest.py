"""Shared pytest fixtures for all tests."""

import pytest

from config import Config, get_seed_categories_path
from models.category import Category
from services.base import Services


@pytest.fixture
def default_categories():
    """The standard category set with a catch-all '其他' category.

    Returns:
        list[Category]: Categories in their canonical order.
    """
    return [
        Category(1, "餐饮", "饮食相关"),
        Category(2, "娱乐", "娱乐消费"),
        Category(3, "水电费", "生活缴费"),
        Category(4, "工资", "收入"),
        Category(5, "其他", "其他"),
    ]


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing at the bundled seed categories.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "account-book",
        log_level="DEBUG",
        log_dir=tmp_path / "account-book" / "logs",
        categories_file=get_seed_categories_path(),
        default_category_name="其他",
    )


@pytest.fixture
def services(test_config):
    """Create a Services container backed by the seed categories.

    Args:
        test_config: Test configuration fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config)
