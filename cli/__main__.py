#!/usr/bin/env python3
"""
Account Book CLI - Command-line interface for categorizing transactions.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    categories   Inspect categories and recognize notes
    transactions Process transaction notes

Examples:
    python -m cli categories list
    python -m cli categories recognize "餐饮 午饭"
    python -m cli transactions process "工资 发放" --date 2026-01-01
    python -m cli transactions today
"""

import sys
import argparse
from cli import categories, transactions
from config import load_config
from services.base import Services
from logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Account Book - Personal transaction categorization",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    categories.setup_parser(subparsers)
    transactions.setup_parser(subparsers)

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            services = Services(config)
            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
