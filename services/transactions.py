"""Transaction processing: date stamping plus categorization."""

from typing import Iterable
from categorization import CategoryRecognizer
from config import DEFAULT_CATEGORY_NAME
from dates import current_date
from models.category import Category
from models.transaction import ProcessedTransaction
from logger import get_logger

logger = get_logger()


def process_transaction(
    note: str,
    date_input: str,
    categories: Iterable[Category],
    default_category_name: str = DEFAULT_CATEGORY_NAME,
) -> ProcessedTransaction:
    """Build a processed transaction record from a note.

    Args:
        note: Free-text note of the transaction, kept verbatim.
        date_input: Date supplied by the caller. Used as-is without
                    validation; an empty string means today.
        categories: Categories the note is classified into.
        default_category_name: Name of the catch-all category.

    Returns:
        ProcessedTransaction with the resolved date and category id.
    """
    transaction_date = date_input if date_input else current_date()

    recognizer = CategoryRecognizer(categories, default_category_name)
    category_id = recognizer.recognize_category(note)

    return ProcessedTransaction(
        date=transaction_date,
        category_id=category_id,
        note=note,
    )


class TransactionService:
    """Service for processing transactions against the loaded categories."""

    def __init__(self, category_service, default_category_name: str = DEFAULT_CATEGORY_NAME):
        """Initialize the transaction service.

        Args:
            category_service: CategoryService providing the category list.
            default_category_name: Name of the catch-all category.
        """
        self.category_service = category_service
        self.default_category_name = default_category_name

    def process(self, note: str, date_input: str = "") -> ProcessedTransaction:
        """Process a note using the loaded categories.

        Args:
            note: Free-text note of the transaction.
            date_input: Optional explicit date; empty means today.

        Returns:
            ProcessedTransaction for the note.
        """
        transaction = process_transaction(
            note,
            date_input,
            self.category_service.find_all(),
            self.default_category_name,
        )
        logger.info(
            f"Processed note {note!r}: date={transaction.date}, "
            f"category_id={transaction.category_id}"
        )
        return transaction
