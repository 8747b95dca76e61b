"""Discovery, filtering and aggregation modules for GetHash."""

from .filters import ExtensionFilter, is_recognized
from .discovery import TreeWalker, WalkStats, walk
from .aggregator import BatchAggregator
from .scanner import BatchScanner, Prescan

__all__ = [
    'ExtensionFilter',
    'is_recognized',
    'TreeWalker',
    'WalkStats',
    'walk',
    'BatchAggregator',
    'BatchScanner',
    'Prescan',
]
