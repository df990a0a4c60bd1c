"""
Replay Reader Module

Wraps the peppi-py library to read Slippi replay files.
Decode problems are returned as a failed ReadResult rather than raised, so a
single corrupt replay never stops a sorting run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Union

from peppi_py import read_slippi


@dataclass
class ReadResult:
    """Result of reading a replay file."""
    success: bool
    replay_path: Path
    game: Optional[Any] = None
    error: Optional[str] = None


class ReplayReader:
    """
    Reader for Slippi replay files using peppi-py.

    Frame data is always decoded, since damage is computed from the per-frame
    percent columns.
    """

    def __init__(self, decoder: Optional[Callable[[str], Any]] = None):
        """
        Initialize the replay reader.

        Args:
            decoder: Callable taking a file path and returning a decoded game.
                Defaults to peppi_py.read_slippi.
        """
        self.decoder = decoder or read_slippi

    def read_file(self, replay_path: Union[str, Path]) -> ReadResult:
        """
        Read a replay file from disk.

        Args:
            replay_path: Path to .slp file

        Returns:
            ReadResult with the decoded game or error information
        """
        replay_path = Path(replay_path)

        try:
            game = self.decoder(str(replay_path))
        except Exception as e:
            return ReadResult(
                success=False,
                replay_path=replay_path,
                error=str(e) or type(e).__name__
            )

        if game is None:
            return ReadResult(
                success=False,
                replay_path=replay_path,
                error="Decoder returned no game"
            )

        return ReadResult(success=True, replay_path=replay_path, game=game)
