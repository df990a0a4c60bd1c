"""
Script to sort all Slippi replays under a directory.
CPU games are moved to @cpu_games, handwarmers to @handwarmers; everything else stays put.

Usage:
    python scripts/sort_replays.py ~/Slippi --dry-run
"""

import sys

from slpsort.cli import main

if __name__ == "__main__":
    sys.exit(main())
