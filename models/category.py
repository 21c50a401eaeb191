"""Category model for transaction categorization."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """Represents a caller-defined transaction category.

    Attributes:
        id: Identifier assigned by the caller.
        name: Category name, also used as the matching keyword.
        description: Optional description of what belongs in this category.
    """

    id: int
    name: str
    description: str = ""
