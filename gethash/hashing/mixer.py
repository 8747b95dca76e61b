#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
FNV-1a 64-bit accumulator used to fold sampled windows into a fingerprint.

Not a cryptographic hash. It is chosen for speed and a good spread on
small inputs, which is all the sparse sampler needs.
"""

from ..config import FNV_OFFSET_BASIS, FNV_PRIME, HASH_MASK


def init() -> int:
    """Return a fresh accumulator state."""
    return FNV_OFFSET_BASIS


def fold(state: int, data: bytes) -> int:
    """Fold ``data`` into ``state`` byte by byte and return the new state."""
    for byte in data:
        state = ((state ^ byte) * FNV_PRIME) & HASH_MASK
    return state


class FNV1aMixer:
    """hashlib-style wrapper around :func:`fold`.

    One instance per file; the state is never shared between files.
    """

    digest_size = 8

    def __init__(self, data: bytes = b""):
        self._state = init()
        self.bytes_folded = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        self._state = fold(self._state, data)
        self.bytes_folded += len(data)

    def intdigest(self) -> int:
        return self._state

    def hexdigest(self) -> str:
        return format(self._state, "016x")

    def copy(self) -> "FNV1aMixer":
        other = FNV1aMixer()
        other._state = self._state
        other.bytes_folded = self.bytes_folded
        return other
