"""
Configuration for replay sorting.

Holds the output folder names, the handwarmer damage threshold and the replay
file extension. Defaults match the values the sorter has always used; they can
be overridden from the environment (.env file) or programmatically for tests.
"""

from dotenv import load_dotenv
import os
from typing import Tuple
from dataclasses import dataclass

# '@' prefix sorts the output folders to the top of a directory listing
CPU_OUTPUT_FOLDER_NAME = "@cpu_games"
HANDWARMERS_OUTPUT_FOLDER_NAME = "@handwarmers"

# Any game with less total damage done than this is assumed to be a handwarmer
MINIMUM_TOURNAMENT_PERCENT = 100.0

REPLAY_EXTENSION = ".slp"


@dataclass
class SortConfig:
    """
    Configuration for the slpsort pipeline.

    Attributes:
        cpu_folder_name: Output folder for games with a CPU player
        handwarmers_folder_name: Output folder for low-damage games
        minimum_tournament_damage: Games below this total damage are handwarmers
        replay_extension: File extension of replay files (with leading dot)
    """

    cpu_folder_name: str = CPU_OUTPUT_FOLDER_NAME
    handwarmers_folder_name: str = HANDWARMERS_OUTPUT_FOLDER_NAME
    minimum_tournament_damage: float = MINIMUM_TOURNAMENT_PERCENT
    replay_extension: str = REPLAY_EXTENSION

    @property
    def sentinel_folders(self) -> Tuple[str, str]:
        """Folder names that are never scanned for input."""
        return (self.cpu_folder_name, self.handwarmers_folder_name)

    @classmethod
    def from_env(cls) -> 'SortConfig':
        """
        Load configuration from environment variables (.env file).

        Optional environment variables:
            - SLPSORT_CPU_FOLDER: Output folder for CPU games
            - SLPSORT_HANDWARMERS_FOLDER: Output folder for handwarmers
            - SLPSORT_MIN_DAMAGE: Handwarmer damage threshold
            - SLPSORT_EXTENSION: Replay file extension

        Returns:
            SortConfig instance

        Raises:
            ValueError: If SLPSORT_MIN_DAMAGE is not a number
        """
        load_dotenv()

        config = cls()

        cpu_folder = os.environ.get("SLPSORT_CPU_FOLDER")
        if cpu_folder:
            config.cpu_folder_name = cpu_folder

        handwarmers_folder = os.environ.get("SLPSORT_HANDWARMERS_FOLDER")
        if handwarmers_folder:
            config.handwarmers_folder_name = handwarmers_folder

        min_damage = os.environ.get("SLPSORT_MIN_DAMAGE")
        if min_damage:
            try:
                config.minimum_tournament_damage = float(min_damage)
            except ValueError:
                raise ValueError(
                    f"SLPSORT_MIN_DAMAGE must be a number, got '{min_damage}'"
                )

        extension = os.environ.get("SLPSORT_EXTENSION")
        if extension:
            config.replay_extension = extension

        return config

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'SortConfig':
        """
        Create configuration from a dictionary.

        Example:
            >>> config = SortConfig.from_dict({'minimum_tournament_damage': 50.0})
        """
        return cls(**config_dict)

    def validate(self) -> None:
        """
        Check that the configuration is usable.

        Raises:
            ValueError: If a folder name is empty, contains a path separator or
                both folder names are the same, if the threshold is negative, or
                if the extension has no leading dot
        """
        for folder_name in self.sentinel_folders:
            if not folder_name:
                raise ValueError("Output folder names must not be empty")
            if '/' in folder_name or os.sep in folder_name:
                raise ValueError(
                    f"Output folder name '{folder_name}' must be a single path component"
                )

        if self.cpu_folder_name == self.handwarmers_folder_name:
            raise ValueError(
                f"CPU and handwarmers folders must differ, both are '{self.cpu_folder_name}'"
            )

        if self.minimum_tournament_damage < 0:
            raise ValueError(
                f"minimum_tournament_damage must be non-negative, got {self.minimum_tournament_damage}"
            )

        if not self.replay_extension.startswith('.') or len(self.replay_extension) < 2:
            raise ValueError(
                f"replay_extension must start with '.', got '{self.replay_extension}'"
            )
