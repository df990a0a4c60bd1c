"""
Moves replays into their output folders.

A replay keeps its file name and loses its original directory:
`some/nested/Game_1.slp` moved to `@handwarmers` ends up at
`<base_dir>/@handwarmers/Game_1.slp`.

Name collisions are rejected. If the destination already holds a file with the
same name, ReplayMoveError is raised and the source stays where it is.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional, Union

from slpsort.errors import ReplayMoveError

logger = logging.getLogger('slpsort.sorting')


def ensure_output_folder(folder: Path) -> None:
    """Create an output folder if needed. Failures are ignored; the move reports them."""
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create output folder {folder}: {e}")


def move_replay(
    source: Union[str, Path],
    folder_name: str,
    base_dir: Optional[Union[str, Path]] = None
) -> Path:
    """
    Move a replay into an output folder.

    Args:
        source: Path of the replay to move
        folder_name: Name of the output folder
        base_dir: Directory the output folder lives in (defaults to the current directory)

    Returns:
        Path the replay was moved to

    Raises:
        ReplayMoveError: If the destination already exists or the move fails
    """
    source = Path(source)
    folder = Path(base_dir if base_dir is not None else '.') / folder_name
    destination = folder / source.name

    ensure_output_folder(folder)

    try:
        # exists() raises PermissionError when the folder is not searchable
        if destination.exists() or destination.is_symlink():
            raise FileExistsError(f"destination already exists: {destination}")
        shutil.move(str(source), str(destination))
    except OSError as e:
        raise ReplayMoveError(source, destination, e) from e

    logger.debug(f"Moved {source} -> {destination}")
    return destination
