"""
cli_entry.py - CLI Entry Point

Renumbers the indexed files of the current directory
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core import scan_directory, plan_reindex, execute_plan, ReindexOptions
from ..logger_setup import configure_logging

logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    """argparse type for unsigned integers"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="reindex",
        description="Renumber <index>-<name> files in the current directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show what would be renamed
  reindex --dry-run

  # Renumber with at least three digits
  reindex -m 3

  # Open the graphical interface
  reindex --gui
"""
    )

    parser.add_argument("--dry-run", "-n", action="store_true", help="dry run mode")
    parser.add_argument("--min-width", "-m", type=non_negative_int, default=2,
                        help="minimal index width (default: 2)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug messages")

    return parser


def cmd_reindex(args, directory: Path = Path(".")) -> int:
    """Handle reindex run"""
    try:
        scan = scan_directory(directory)
    except OSError as e:
        print(f"An error occurred while reading the directory {directory}: {e}")
        return 1

    for err in scan.errors:
        print(err)

    options = ReindexOptions(dry_run=args.dry_run, min_width=args.min_width)
    plan = plan_reindex(scan.entries, options, directory)
    logger.debug(plan.summary())

    result = execute_plan(plan)
    for outcome in result.outcomes:
        print(outcome.describe())

    logger.debug(result.summary())
    return 0 if result.failed_count == 0 else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    return cmd_reindex(args)


if __name__ == "__main__":
    sys.exit(main())
