"""
Path collection for replay sorting.

Walks down the given directory (or the current directory) following symbolic
links, and collects every replay file that is not inside one of the output
folders.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from slpsort.config.sort_config import SortConfig
from slpsort.errors import RootDirectoryError

logger = logging.getLogger('slpsort.collection')


def is_in_sentinel_folder(path: Path, sentinel_folders: Iterable[str]) -> bool:
    """
    Check whether any component of a path is an output folder name.

    Components are compared as whole strings, so 'my@cpu_games' does not
    match '@cpu_games'.

    Example:
        >>> is_in_sentinel_folder(Path('a/@cpu_games/b.slp'), ['@cpu_games'])
        True
        >>> is_in_sentinel_folder(Path('a/x@cpu_games/b.slp'), ['@cpu_games'])
        False
    """
    sentinels = set(sentinel_folders)
    return any(part in sentinels for part in path.parts)


def collect_replay_paths(
    root: Optional[Union[str, Path]] = None,
    config: Optional[SortConfig] = None
) -> List[Path]:
    """
    Collect all replay file paths under a root directory.

    Args:
        root: Directory to walk (defaults to the current directory)
        config: SortConfig providing the extension and output folder names

    Returns:
        Sorted list of replay paths, each starting with root

    Raises:
        RootDirectoryError: If root does not exist or is not a directory
    """
    config = config or SortConfig()
    root = Path(root) if root is not None else Path('.')

    if not root.exists():
        raise RootDirectoryError(root, "directory does not exist")
    if not root.is_dir():
        raise RootDirectoryError(root, "not a directory")

    sentinels = config.sentinel_folders
    if is_in_sentinel_folder(root, sentinels):
        logger.debug(f"Root {root} is inside an output folder, nothing to collect")
        return []

    replay_paths = []

    for dirpath, dirnames, filenames in os.walk(root, followlinks=True, onerror=_skip_unreadable):
        current = Path(dirpath)

        # A symlink pointing back at one of its own ancestors would loop forever
        if _is_symlink_loop(current, root):
            logger.debug(f"Skipping symlink loop at {current}")
            dirnames[:] = []
            continue

        # Never descend into output folders
        dirnames[:] = sorted(d for d in dirnames if d not in sentinels)

        for filename in filenames:
            path = current / filename
            if path.suffix != config.replay_extension:
                continue
            try:
                if not path.is_file():
                    continue
            except OSError as e:
                logger.debug(f"Skipping {path}: {e}")
                continue
            replay_paths.append(path)

    replay_paths.sort()
    logger.info(f"Found {len(replay_paths)} replay files under {root}")
    return replay_paths


def _is_symlink_loop(directory: Path, root: Path) -> bool:
    """Check whether a walked directory resolves to one of its own ancestors."""
    if not directory.is_symlink():
        return False
    try:
        real_dir = os.path.realpath(directory)
        ancestors = [root / parent for parent in directory.relative_to(root).parents]
        return any(os.path.realpath(ancestor) == real_dir for ancestor in ancestors)
    except (OSError, ValueError):
        return True


def _skip_unreadable(error: OSError) -> None:
    logger.debug(f"Skipping unreadable directory: {error}")
