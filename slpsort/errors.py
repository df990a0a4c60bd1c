"""
Exceptions raised by the sorter.

Per-file problems (decode failures, failed moves) are reported and the batch
continues. Only an invalid scan root stops a run.
"""

from pathlib import Path


class SortError(Exception):
    """Base class for sorter errors."""


class RootDirectoryError(SortError):
    """The scan root does not exist or is not a directory."""

    def __init__(self, root: Path, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"Invalid replay root '{root}': {reason}")


class ReplayMoveError(SortError):
    """A replay could not be moved into its output folder."""

    def __init__(self, source: Path, destination: Path, cause: Exception):
        self.source = source
        self.destination = destination
        self.cause = cause
        super().__init__(str(cause))
