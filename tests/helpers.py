"""Helper utilities for tests."""

from pathlib import Path
import json
import re

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def write_categories_file(path: Path, categories_data) -> Path:
    """Write category data as a JSON seed file.

    Args:
        path: File to write.
        categories_data: JSON-serializable category entries.

    Returns:
        The path that was written.
    """
    with open(path, "w", encoding="utf-8") as f:
        json.dump(categories_data, f, ensure_ascii=False)
    return path
