"""Data models for GetHash."""

from .errors import HashError, UnreadableError, PathNotFoundError
from .fingerprint import FileSample, FingerprintResult, FileOutcome
from .totals import RunTotals

__all__ = [
    'HashError',
    'UnreadableError',
    'PathNotFoundError',
    'FileSample',
    'FingerprintResult',
    'FileOutcome',
    'RunTotals',
]
