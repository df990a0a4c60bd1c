"""
slpsort - Slippi Replay Sorter

Sorts Slippi (.slp) replays into output folders: games with a CPU player go to
`@cpu_games`, low-damage games go to `@handwarmers`, everything else stays put.

Main interfaces:
    SortingPipeline: Sort every replay under a directory
    SortConfig: Output folder names and damage threshold
    collect_replay_paths: Find replays that still need sorting
"""

from slpsort.config.sort_config import SortConfig
from slpsort.collection.path_collector import collect_replay_paths
from slpsort.sorting.sorting_pipeline import SortingPipeline, SortResult

__all__ = [
    'SortConfig',
    'collect_replay_paths',
    'SortingPipeline',
    'SortResult',
]
