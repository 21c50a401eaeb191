#!/usr/bin/env python3

import json
from dates import current_date


def cmd_process(args, services):
    """Process a transaction note and print the record as JSON."""
    transaction = services.transactions.process(args.note, args.date or "")
    print(json.dumps(transaction.to_dict(), ensure_ascii=False))


def cmd_today(args, services):
    """Print today's date."""
    print(current_date())


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Process transaction notes",
        description="Stamp and categorize transaction notes",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    # transactions process
    process_parser = transactions_subparsers.add_parser(
        "process",
        help="Categorize a note and stamp it with a date",
        epilog="""
Examples:
  python -m cli transactions process "餐饮 午饭"
  python -m cli transactions process "工资 发放" --date 2026-01-01
        """,
    )
    process_parser.add_argument(
        "note",
        help="Free-text transaction note",
    )
    process_parser.add_argument(
        "--date",
        default="",
        help="Transaction date (YYYY-MM-DD); defaults to today",
    )
    process_parser.set_defaults(func=cmd_process)

    # transactions today
    today_parser = transactions_subparsers.add_parser(
        "today", help="Print today's date"
    )
    today_parser.set_defaults(func=cmd_today)
