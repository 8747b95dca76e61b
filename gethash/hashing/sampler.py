#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
The sparse hashing engine.

Instead of reading a whole file, the sampler folds the file size and up to
three CHUNK_SIZE windows (head, middle, tail) into an FNV-1a accumulator:

    size <= CHUNK_SIZE                  head only (truncated to size)
    CHUNK_SIZE < size <= 3*CHUNK_SIZE   head + tail
    size > 3*CHUNK_SIZE                 head + mid + tail

Head and tail overlap when size < 2*CHUNK_SIZE. In the three-window case
the mid window reaches into the tail while size < 4*CHUNK_SIZE - 1; from
there on the three windows are disjoint.
"""

import logging
import os
from collections import namedtuple
from pathlib import Path
from typing import List, Union

from ..config import CHUNK_SIZE, MID_THRESHOLD, TAIL_THRESHOLD, SIZE_FIELD_BYTES, SIZE_BYTE_ORDER
from ..models.errors import UnreadableError
from ..models.fingerprint import FileSample, FingerprintResult
from .mixer import FNV1aMixer

logger = logging.getLogger(__name__)

Window = namedtuple("Window", ["label", "offset", "length"])

_O_NOATIME = getattr(os, "O_NOATIME", 0)


def plan_windows(size: int) -> List[Window]:
    """Return the windows sampled for a file of ``size`` bytes, in fold order."""
    windows = []
    if size > 0:
        windows.append(Window("head", 0, min(CHUNK_SIZE, size)))
    if size > MID_THRESHOLD:
        mid = size // 2
        windows.append(Window("mid", mid, min(CHUNK_SIZE, size - mid)))
    if size > TAIL_THRESHOLD:
        windows.append(Window("tail", size - CHUNK_SIZE, CHUNK_SIZE))
    return windows


def encode_size(size: int) -> bytes:
    """8-byte encoding of the file size that is folded before any window."""
    return size.to_bytes(SIZE_FIELD_BYTES, SIZE_BYTE_ORDER)


def _noatime_opener(path, flags):
    """Open without updating the access time where the OS allows it."""
    if _O_NOATIME:
        try:
            return os.open(path, flags | _O_NOATIME)
        except PermissionError:
            # O_NOATIME is refused for files we do not own
            pass
    return os.open(path, flags)


class SparseSampler:
    """Computes sparse fingerprints, one file at a time."""

    def sample(self, path: Union[str, Path]) -> FingerprintResult:
        """Fingerprint ``path``.

        Raises:
            UnreadableError: the file cannot be opened, measured or read.
        """
        path = str(path)
        try:
            with open(path, "rb", opener=_noatime_opener) as f:
                sample = FileSample(path=path, size=os.fstat(f.fileno()).st_size)
                digest = self._fold_windows(f, sample)
        except OSError as e:
            logger.debug("Cannot sample %s: %s", path, e)
            raise UnreadableError(path, e) from e

        return FingerprintResult(hash=digest, size=sample.size, path=path)

    def _fold_windows(self, f, sample: FileSample) -> int:
        mixer = FNV1aMixer(encode_size(sample.size))
        for window in plan_windows(sample.size):
            f.seek(window.offset, os.SEEK_SET)
            data = f.read(CHUNK_SIZE)
            mixer.update(data)
            logger.debug("%s: %s window at %d, %d bytes",
                         sample.path, window.label, window.offset, len(data))
        return mixer.intdigest()


_default_sampler = SparseSampler()


def sample(path: Union[str, Path]) -> FingerprintResult:
    """Convenience function for fingerprinting a single file."""
    return _default_sampler.sample(path)
