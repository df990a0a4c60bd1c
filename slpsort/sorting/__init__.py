"""
slpsort Sorting Module - classification and relocation

## Quick Start

```python
from slpsort.sorting import SortingPipeline

pipeline = SortingPipeline()
result = pipeline.sort_directory('./replays')
```
"""

from slpsort.sorting.classifier import RoutingDecision, classify
from slpsort.sorting.file_mover import move_replay
from slpsort.sorting.sorting_pipeline import (
    SortingPipeline,
    SortProgress,
    SortResult,
    print_summary,
)

__all__ = [
    'RoutingDecision',
    'classify',
    'move_replay',
    'SortingPipeline',
    'SortProgress',
    'SortResult',
    'print_summary',
]
