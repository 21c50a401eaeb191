#!/usr/bin/env python3

import sys
from categorization import CategoryRecognizer, NO_CATEGORY_ID
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all configured categories."""
    categories = services.categories.find_all()

    if not categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        logger.info(f"ID: {category.id}")
        logger.info(f"Name: {category.name}")
        if category.description:
            logger.info(f"Description: {category.description}")
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_recognize(args, services):
    """Recognize the category of a note and print it."""
    recognizer = CategoryRecognizer(
        services.categories.find_all(),
        services.config.default_category_name,
    )
    category = recognizer.recognize(args.note)

    if category:
        print(f"{category.id}\t{category.name}")
    else:
        print(f"{NO_CATEGORY_ID}\t(none)")


def cmd_show(args, services):
    """Show a single category by ID or name."""
    category_input = args.category

    # Look up category (try as ID first, then by name)
    try:
        category_id = int(category_input)
        category = services.categories.find(category_id)
    except ValueError:
        category = services.categories.find_by_name(category_input)

    if not category:
        logger.error(f"Category '{category_input}' not found.")
        logger.info("Use 'python -m cli categories list' to see available categories.")
        sys.exit(1)

    print(f"{category.id}\t{category.name}\t{category.description}")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Inspect categories",
        description="List categories and recognize the category of a note",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.set_defaults(func=cmd_list)

    # categories recognize
    recognize_parser = categories_subparsers.add_parser(
        "recognize", help="Recognize the category of a note"
    )
    recognize_parser.add_argument(
        "note",
        help="Free-text transaction note",
    )
    recognize_parser.set_defaults(func=cmd_recognize)

    # categories show
    show_parser = categories_subparsers.add_parser(
        "show", help="Show a category by ID or name"
    )
    show_parser.add_argument(
        "category",
        help="Category name or ID",
    )
    show_parser.set_defaults(func=cmd_show)
