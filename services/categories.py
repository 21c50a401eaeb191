"""Category service for loading categories from a JSON file."""

import json
from pathlib import Path
from typing import List, Optional
from models.category import Category
from logger import get_logger

logger = get_logger()


class CategoryService:
    """Service for reading categories."""

    def __init__(self, categories_file: Path):
        """Initialize the category service.

        Args:
            categories_file: Path to a JSON array of category objects.
        """
        self.categories_file = Path(categories_file)
        self._categories: Optional[List[Category]] = None

    def find_all(self) -> List[Category]:
        """Get all categories.

        Returns:
            List of Category objects, in file order.
        """
        if self._categories is None:
            self._categories = self._load()
        return list(self._categories)

    def find(self, category_id: int) -> Optional[Category]:
        """Get a single category by ID.

        Args:
            category_id: The category ID to find.

        Returns:
            Category object if found, None otherwise.
        """
        for category in self.find_all():
            if category.id == category_id:
                return category
        return None

    def find_by_name(self, name: str) -> Optional[Category]:
        """Get a single category by name.

        Args:
            name: The category name to find (case-sensitive).

        Returns:
            Category object if found, None otherwise.
        """
        for category in self.find_all():
            if category.name == name:
                return category
        return None

    def _load(self) -> List[Category]:
        """Read and validate the categories file.

        Raises:
            FileNotFoundError: If the categories file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
            ValueError: If the file is not a list or an entry is malformed.
        """
        with open(self.categories_file, "r", encoding="utf-8") as f:
            categories_data = json.load(f)

        if not isinstance(categories_data, list):
            raise ValueError(
                f"Categories file must contain a JSON array: {self.categories_file}"
            )

        categories = []
        for index, category_data in enumerate(categories_data):
            if not isinstance(category_data, dict):
                raise ValueError(f"Category entry {index} is not an object")

            category_id = category_data.get("id")
            name = category_data.get("name")
            description = category_data.get("description") or ""

            # bool is an int subclass but never a valid id
            if not isinstance(category_id, int) or isinstance(category_id, bool):
                raise ValueError(f"Category entry {index} has no integer id")
            if not isinstance(name, str):
                raise ValueError(f"Category entry {index} has no name")

            categories.append(
                Category(id=category_id, name=name, description=description)
            )

        logger.info(
            f"Loaded {len(categories)} categories from {self.categories_file}"
        )
        return categories
