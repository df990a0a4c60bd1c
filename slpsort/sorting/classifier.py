"""
Routing rules for sorted replays.

Rules are evaluated in order and the first match wins:
    1. A CPU player was in the game -> CPU folder
    2. Total damage below the threshold -> handwarmers folder
    3. Otherwise the replay stays where it is
"""

from dataclasses import dataclass
from typing import Optional

from slpsort.config.sort_config import SortConfig
from slpsort.parsing.features import FeatureSet

CPU_MATCH = 'cpu_match'
HANDWARMER = 'handwarmer'


@dataclass(frozen=True)
class RoutingDecision:
    """Where a replay should go. A destination of None means leave it in place."""
    destination: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def no_move(cls) -> 'RoutingDecision':
        return cls()

    @classmethod
    def move_to(cls, destination: str, reason: str) -> 'RoutingDecision':
        return cls(destination=destination, reason=reason)

    @property
    def should_move(self) -> bool:
        return self.destination is not None


def classify(features: FeatureSet, config: Optional[SortConfig] = None) -> RoutingDecision:
    """
    Decide where a replay belongs based on its features.

    Args:
        features: FeatureSet extracted from the decoded game
        config: SortConfig with folder names and damage threshold

    Returns:
        RoutingDecision
    """
    config = config or SortConfig()

    if features.has_cpu_player:
        return RoutingDecision.move_to(config.cpu_folder_name, CPU_MATCH)

    if features.damage_done < config.minimum_tournament_damage:
        return RoutingDecision.move_to(config.handwarmers_folder_name, HANDWARMER)

    return RoutingDecision.no_move()
