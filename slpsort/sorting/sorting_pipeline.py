"""
Replay Sorting Pipeline

Orchestrates the sorting workflow: collect paths -> read replay -> extract
features -> classify -> move.

Files are processed one at a time in discovery order. A replay that fails to
read or fails to move is reported and left where it is; the batch carries on
with the next file.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from slpsort.collection.path_collector import collect_replay_paths
from slpsort.config.sort_config import SortConfig
from slpsort.errors import ReplayMoveError
from slpsort.parsing.features import extract_features, format_damage
from slpsort.parsing.replay_reader import ReplayReader
from slpsort.sorting.classifier import CPU_MATCH, classify
from slpsort.sorting.file_mover import move_replay

logger = logging.getLogger('slpsort.sorting')

# Label used in move failure messages, by routing reason
MOVE_FAILURE_LABELS = {
    CPU_MATCH: 'cpu',
}
DEFAULT_MOVE_FAILURE_LABEL = 'friendlies'


@dataclass
class SortProgress:
    """Progress information for sorting operations."""
    current: int
    total: int
    replay_path: Path
    status: str  # 'cpu_match', 'handwarmer', 'kept', 'read_failed', 'move_failed'
    message: str
    destination: Optional[Path] = None
    error: Optional[str] = None


@dataclass
class SortResult:
    """Result of a sorting run."""
    total_replays: int = 0
    cpu_matches: int = 0
    handwarmers: int = 0
    kept: int = 0
    read_failed: int = 0
    move_failed: int = 0
    moved: List[Tuple[Path, Path]] = field(default_factory=list)
    failures: List[Dict] = field(default_factory=list)  # List of {path, error} dicts

    @property
    def moved_count(self) -> int:
        return len(self.moved)


class SortingPipeline:
    """
    High-level replay sorting orchestrator.

    Example:
        >>> from slpsort.sorting import SortingPipeline
        >>>
        >>> pipeline = SortingPipeline()
        >>> result = pipeline.sort_directory('./replays')
        >>> print(result.cpu_matches, result.handwarmers)
    """

    def __init__(
        self,
        reader: Optional[ReplayReader] = None,
        config: Optional[SortConfig] = None,
        progress_callback: Optional[Callable[[SortProgress], None]] = None,
        dry_run: bool = False
    ):
        """
        Initialize the sorting pipeline.

        Args:
            reader: ReplayReader instance (uses peppi-py if not provided)
            config: SortConfig with folder names and damage threshold
            progress_callback: Optional callback for progress updates
            dry_run: If True, classify replays but never move them
        """
        self.reader = reader or ReplayReader()
        self.config = config or SortConfig()
        self.progress_callback = progress_callback or self._default_progress_callback
        self.dry_run = dry_run

    def _default_progress_callback(self, progress: SortProgress):
        """Default progress callback that prints one line per notable event."""
        if progress.status != 'kept':
            print(progress.message)

    def sort_directory(self, root: Optional[Union[str, Path]] = None) -> SortResult:
        """
        Sort every replay under a directory.

        Output folders are created inside root.

        Args:
            root: Directory to scan (defaults to the current directory)

        Returns:
            SortResult with statistics

        Raises:
            RootDirectoryError: If root does not exist or is not a directory
        """
        root = Path(root) if root is not None else Path('.')
        replay_paths = collect_replay_paths(root, self.config)
        return self.sort_replays(replay_paths, base_dir=root)

    def sort_replays(
        self,
        replay_paths: List[Union[str, Path]],
        base_dir: Optional[Union[str, Path]] = None
    ) -> SortResult:
        """
        Sort a list of replay files.

        Args:
            replay_paths: Paths to .slp files, processed in the given order
            base_dir: Directory the output folders live in (defaults to the current directory)

        Returns:
            SortResult with statistics
        """
        base_dir = Path(base_dir) if base_dir is not None else Path('.')
        result = SortResult(total_replays=len(replay_paths))
        total = len(replay_paths)

        for i, replay_path in enumerate(replay_paths, 1):
            replay_path = Path(replay_path)

            read_result = self.reader.read_file(replay_path)
            if not read_result.success:
                logger.warning(f"Failed to read {replay_path}: {read_result.error}")
                result.read_failed += 1
                result.failures.append({'path': str(replay_path), 'error': read_result.error})
                self.progress_callback(SortProgress(
                    current=i,
                    total=total,
                    replay_path=replay_path,
                    status='read_failed',
                    message=f"failed to read game: {replay_path} [{read_result.error}]",
                    error=read_result.error
                ))
                continue

            features = extract_features(read_result.game)
            decision = classify(features, self.config)

            if not decision.should_move:
                result.kept += 1
                self.progress_callback(SortProgress(
                    current=i,
                    total=total,
                    replay_path=replay_path,
                    status='kept',
                    message=f"{replay_path}: kept (damage_done = {format_damage(features.damage_done)})"
                ))
                continue

            if decision.reason == CPU_MATCH:
                result.cpu_matches += 1
                message = f"{replay_path}: cpu_match"
            else:
                result.handwarmers += 1
                message = f"{replay_path}: damage_done = {format_damage(features.damage_done)}"

            self.progress_callback(SortProgress(
                current=i,
                total=total,
                replay_path=replay_path,
                status=decision.reason,
                message=message,
                destination=base_dir / decision.destination
            ))

            if self.dry_run:
                continue

            try:
                destination = move_replay(replay_path, decision.destination, base_dir)
            except ReplayMoveError as e:
                label = MOVE_FAILURE_LABELS.get(decision.reason, DEFAULT_MOVE_FAILURE_LABEL)
                error_msg = str(e)
                logger.warning(f"Failed to move {replay_path} to {e.destination}: {error_msg}")
                result.move_failed += 1
                result.failures.append({'path': str(replay_path), 'error': error_msg})
                self.progress_callback(SortProgress(
                    current=i,
                    total=total,
                    replay_path=replay_path,
                    status='move_failed',
                    message=f"failed to move {label} match: file={replay_path} err={error_msg}",
                    destination=e.destination,
                    error=error_msg
                ))
                continue

            result.moved.append((replay_path, destination))

        return result


def print_summary(result: SortResult, dry_run: bool = False) -> None:
    """Print a summary block for a sorting run."""
    print()
    print("=" * 60)
    print("SORTING SUMMARY" + (" (DRY RUN)" if dry_run else ""))
    print("=" * 60)
    print(f"Total replays: {result.total_replays}")
    print(f"CPU matches: {result.cpu_matches}")
    print(f"Handwarmers: {result.handwarmers}")
    print(f"Kept in place: {result.kept}")
    print(f"Failed to read: {result.read_failed}")
    print(f"Failed to move: {result.move_failed}")
    print(f"Moved: {result.moved_count}")
