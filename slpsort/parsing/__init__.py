"""
slpsort Parsing Module - Slippi Replay Reading and Features

Reads `.slp` files with the peppi-py library and extracts the features the
sorter needs: whether a CPU played, and how much damage was done.

## Quick Start

```python
from slpsort.parsing import ReplayReader, extract_features

reader = ReplayReader()
result = reader.read_file('./Game_20240101T120000.slp')

if result.success:
    features = extract_features(result.game)
    print(features.has_cpu_player, features.damage_done)
```
"""

from slpsort.parsing.replay_reader import ReplayReader, ReadResult
from slpsort.parsing.features import (
    FeatureSet,
    calculate_damage_done,
    extract_features,
    format_damage,
    game_has_cpu_player,
    percent_gain,
)

__all__ = [
    # Reader
    'ReplayReader',
    'ReadResult',

    # Features
    'FeatureSet',
    'calculate_damage_done',
    'extract_features',
    'format_damage',
    'game_has_cpu_player',
    'percent_gain',
]
