"""
Shared pytest fixtures for all tests.

This file is automatically loaded by pytest and makes fixtures available
to all test files without needing to import them.
"""

import pytest
from pathlib import Path
from types import SimpleNamespace

from peppi_py.game import PlayerType

from slpsort.config.sort_config import SortConfig
from slpsort.parsing.replay_reader import ReplayReader


# ============================================================================
# Game Fixtures
# ============================================================================

def build_game(player_types, percents):
    """
    Build a stand-in for a peppi-py Game.

    Only the attributes the sorter reads are present:
    game.start.players[i].type and game.frames.ports[i].leader.post.percent.
    """
    players = tuple(SimpleNamespace(port=i, type=t) for i, t in enumerate(player_types))
    ports = tuple(
        SimpleNamespace(leader=SimpleNamespace(post=SimpleNamespace(percent=p)))
        for p in percents
    )
    return SimpleNamespace(
        start=SimpleNamespace(players=players),
        frames=SimpleNamespace(ports=ports)
    )


@pytest.fixture
def make_game():
    """Provide a factory for stand-in decoded games."""
    return build_game


@pytest.fixture
def tournament_game():
    """Two humans, 150% total damage."""
    return build_game(
        [PlayerType.HUMAN, PlayerType.HUMAN],
        [[0.0, 30.0, 80.0, 0.0, 20.0], [0.0, 10.0, 50.0]]
    )


@pytest.fixture
def handwarmer_game():
    """Two humans, 30% total damage."""
    return build_game(
        [PlayerType.HUMAN, PlayerType.HUMAN],
        [[0.0, 10.0, 20.0], [0.0, 5.0, 10.0]]
    )


@pytest.fixture
def cpu_game():
    """Human vs CPU with plenty of damage."""
    return build_game(
        [PlayerType.HUMAN, PlayerType.CPU],
        [[0.0, 150.0], [0.0, 150.0]]
    )


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def default_config():
    """Provide the default sorting configuration."""
    return SortConfig()


# ============================================================================
# Replay Tree Fixtures
# ============================================================================

@pytest.fixture
def games_by_name(tournament_game, handwarmer_game, cpu_game):
    """Decoded games keyed by replay file name. Missing names fail to decode."""
    return {
        'tournament.slp': tournament_game,
        'friendlies.slp': handwarmer_game,
        'vs_cpu.slp': cpu_game,
        'nested_cpu.slp': cpu_game,
    }


@pytest.fixture
def fake_reader(games_by_name):
    """
    Provide a ReplayReader whose decoder looks games up by file name.

    Any file name not in games_by_name raises, like a corrupt replay would.
    """
    def decoder(path):
        name = Path(path).name
        if name not in games_by_name:
            raise ValueError(f"invalid slippi file: {name}")
        return games_by_name[name]

    return ReplayReader(decoder=decoder)


@pytest.fixture
def replay_tree(tmp_path):
    """
    Provide a directory of replays:

        root/
            tournament.slp
            friendlies.slp
            vs_cpu.slp
            corrupt.slp
            notes.txt
            session/nested_cpu.slp
    """
    root = tmp_path / "replays"
    (root / "session").mkdir(parents=True)

    for name in ['tournament.slp', 'friendlies.slp', 'vs_cpu.slp', 'corrupt.slp']:
        (root / name).write_bytes(b"fake slp content")
    (root / "notes.txt").write_text("not a replay")
    (root / "session" / "nested_cpu.slp").write_bytes(b"fake slp content")

    return root
