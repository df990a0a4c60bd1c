"""
slpsort Collection Module - replay discovery.

Walks a directory tree and collects the replay files that still need sorting.
Files already sitting in an output folder are never collected again.
"""

from slpsort.collection.path_collector import collect_replay_paths, is_in_sentinel_folder

__all__ = [
    'collect_replay_paths',
    'is_in_sentinel_folder',
]
