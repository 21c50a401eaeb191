from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessedTransaction:
    date: str  # YYYY-MM-DD, or the caller's date verbatim
    category_id: int  # 0 when there were no categories
    note: str

    def to_dict(self) -> dict:
        """Convert the processed transaction to a dictionary for output."""
        return {
            "date": self.date,
            "category_id": self.category_id,
            "note": self.note,
        }
