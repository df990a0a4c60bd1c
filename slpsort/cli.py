"""
Command line entry point for sorting Slippi replays.

Usage:
    slpsort                      # sort replays under the current directory
    slpsort ~/Slippi --dry-run   # preview only
    slpsort ~/Slippi --pause     # wait for Enter before exiting
"""

import argparse
import logging
import sys
from typing import List, Optional

from slpsort.config.sort_config import SortConfig
from slpsort.errors import RootDirectoryError
from slpsort.sorting.sorting_pipeline import SortingPipeline, print_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='slpsort',
        description="Sort Slippi replays into @cpu_games and @handwarmers folders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  slpsort
  slpsort ~/Slippi --dry-run
  slpsort ~/Slippi --pause
        """
    )

    parser.add_argument('root', nargs='?', default='.', help='Directory to scan (default: current directory)')
    parser.add_argument('--dry-run', action='store_true', help='Show what would be moved without moving anything')
    parser.add_argument('--pause', action='store_true', help='Wait for Enter before exiting')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        config = SortConfig.from_env()
        config.validate()
    except ValueError as e:
        print(f"✗ Invalid configuration: {e}")
        return 1

    pipeline = SortingPipeline(config=config, dry_run=args.dry_run)

    try:
        result = pipeline.sort_directory(args.root)
    except RootDirectoryError as e:
        print(f"✗ {e}")
        return 1

    print_summary(result, dry_run=args.dry_run)

    if args.pause:
        input("Press Enter to continue...")

    return 0


if __name__ == "__main__":
    sys.exit(main())
