"""Sparse fingerprint engine for GetHash."""

from .mixer import FNV1aMixer
from .sampler import SparseSampler, Window, plan_windows, encode_size, sample

__all__ = [
    'FNV1aMixer',
    'SparseSampler',
    'Window',
    'plan_windows',
    'encode_size',
    'sample',
]
