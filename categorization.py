"""Keyword categorization for transaction notes.

A note is classified by looking for category names inside it. Each category
name doubles as its keyword; the first name contained in the note wins.
Notes that contain no category name fall back to the catch-all category
(named "其他" unless configured otherwise), then to the first category
supplied, and finally to id 0 when there are no categories at all.
"""

from typing import Dict, Iterable, Optional, Tuple
from models.category import Category
from config import DEFAULT_CATEGORY_NAME
from logger import get_logger

logger = get_logger()

NO_CATEGORY_ID = 0


class CategoryRecognizer:
    """Recognizes the category of a transaction note by keyword containment."""

    def __init__(
        self,
        categories: Iterable[Category],
        default_category_name: str = DEFAULT_CATEGORY_NAME,
    ):
        """Initialize the recognizer.

        Args:
            categories: Categories to choose from. Their order matters for
                        the fallback rules.
            default_category_name: Name of the catch-all category returned
                                   when no keyword matches.
        """
        self.categories: Tuple[Category, ...] = tuple(categories)
        self.default_category_name = default_category_name

    def recognize(self, note: str) -> Optional[Category]:
        """Get the category a transaction note belongs to.

        Keywords are checked in name order, so when a note contains several
        category names the alphabetically first one is chosen, not the one
        supplied first. Matching is case-sensitive substring containment.

        Args:
            note: Free-text note of the transaction.

        Returns:
            The recognized Category, or None if there are no categories.
        """
        # Later categories overwrite earlier ones with the same name
        keyword_map: Dict[str, Category] = {c.name: c for c in self.categories}

        for name in sorted(keyword_map):
            if name in note:
                logger.debug(f"Note {note!r} matched keyword {name!r}")
                return keyword_map[name]

        for category in self.categories:
            if category.name == self.default_category_name:
                logger.debug(
                    f"Note {note!r} matched no keyword - using {category.name!r}"
                )
                return category

        if not self.categories:
            logger.debug("No categories available")
            return None

        logger.debug(
            f"No '{self.default_category_name}' category - "
            f"falling back to {self.categories[0].name!r}"
        )
        return self.categories[0]

    def recognize_category(self, note: str) -> int:
        """Get the category id for a transaction note.

        Returns:
            The id of the recognized category, or 0 if there are no categories.
        """
        category = self.recognize(note)
        return category.id if category else NO_CATEGORY_ID
