"""
Feature extraction for decoded Slippi games.

peppi-py gives us frame data in a columnar format: `game.frames.ports` holds
one entry per occupied port, and each port's `leader.post.percent` is the
player's percent on every frame of the game.
"""

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from peppi_py.game import PlayerType


@dataclass(frozen=True)
class FeatureSet:
    """Features used to decide where a replay belongs."""
    has_cpu_player: bool
    damage_done: float


def game_has_cpu_player(game: Any) -> bool:
    """Returns True if any player slot in the game is CPU controlled."""
    return any(player.type == PlayerType.CPU for player in game.start.players)


def percent_gain(percents: Sequence[float]) -> float:
    """
    Sum of every frame-to-frame percent increase in a single player's percents.

    A drop (stock lost, percent reset to 0) or an unchanged value contributes
    nothing, so a reset never cancels out damage taken before it. Missing
    readings are NaN after conversion and also contribute nothing.

    Example:
        >>> percent_gain([0.0, 20.0, 45.0, 0.0, 15.0])
        60.0
    """
    values = np.asarray(percents, dtype=np.float32)
    if values.size < 2:
        return 0.0

    deltas = np.diff(values)
    return float(deltas[deltas > 0].sum(dtype=np.float32))


def calculate_damage_done(game: Any) -> float:
    """Total damage done by all players in the game."""
    total = np.float32(0.0)
    for port in game.frames.ports:
        total += np.float32(percent_gain(port.leader.post.percent))
    return float(total)


def extract_features(game: Any) -> FeatureSet:
    """Compute the FeatureSet for a decoded game."""
    return FeatureSet(
        has_cpu_player=game_has_cpu_player(game),
        damage_done=calculate_damage_done(game)
    )


def format_damage(damage_done: float) -> str:
    """
    Shortest string that round-trips the damage as a float32, never rounded.

    Example:
        >>> format_damage(99.96)
        '99.96'
    """
    return np.format_float_positional(np.float32(damage_done), trim='0')
