"""GetHash - high-speed sparse fingerprinting for large media files."""

from .config import VERSION

__version__ = VERSION
__author__ = "GetHash Team"

# Import key classes for convenient top-level access
from .commands import HashCommand
from .hashing import FNV1aMixer, SparseSampler, plan_windows
from .scanning import ExtensionFilter, TreeWalker, BatchAggregator, BatchScanner, is_recognized
from .models import FingerprintResult, FileOutcome, RunTotals, HashError, UnreadableError, PathNotFoundError

__all__ = [
    # Core classes
    'HashCommand',
    'BatchScanner',

    # Engine components
    'FNV1aMixer',
    'SparseSampler',
    'plan_windows',
    'ExtensionFilter',
    'is_recognized',
    'TreeWalker',
    'BatchAggregator',

    # Data models
    'FingerprintResult',
    'FileOutcome',
    'RunTotals',
    'HashError',
    'UnreadableError',
    'PathNotFoundError',

    # Package metadata
    '__version__',
    '__author__'
]
