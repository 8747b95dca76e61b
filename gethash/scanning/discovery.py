#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Recursive file discovery for GetHash.

The walk is depth-first and link-unaware: directory entries are classified
without following symbolic links, so a symlinked directory is never entered
and a symlinked file is never sampled. That also makes the walk cycle-free
without tracking visited inodes. Following links would need a visited set.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from ..hashing.sampler import SparseSampler
from ..models.errors import HashError
from ..models.fingerprint import FileOutcome
from .filters import ExtensionFilter

logger = logging.getLogger(__name__)


@dataclass
class WalkStats:
    """Counters for the most recent walk."""
    directories: int = 0
    files_seen: int = 0
    unreadable_dirs: int = 0
    symlinks_skipped: int = 0


class TreeWalker:
    """Walks a directory tree and fingerprints the accepted files in it."""

    def __init__(self, sampler: Optional[SparseSampler] = None,
                 extension_filter: Optional[ExtensionFilter] = None):
        self.sampler = sampler or SparseSampler()
        self.extension_filter = extension_filter or ExtensionFilter()
        self.stats = WalkStats()

    def walk(self, root: Union[str, Path], accept_all: bool = False) -> Iterator[Tuple[Path, FileOutcome]]:
        """
        Lazily yield ``(path, outcome)`` for every regular file under ``root``.

        Args:
            root: Directory to walk
            accept_all: Sample every regular file, bypassing the extension filter

        Yields:
            Pairs of file path and outcome. Files rejected by the filter get a
            skipped outcome and are never opened.
        """
        for path in self.iter_files(root):
            if not (accept_all or self.extension_filter.is_recognized(path)):
                yield path, FileOutcome.skipped(path, explicit=False)
                continue

            try:
                result = self.sampler.sample(path)
            except HashError as e:
                logger.warning("Unreadable file %s: %s", path, e.reason)
                yield path, FileOutcome.failed(e)
                continue

            yield path, FileOutcome.hashed(result)

    def iter_files(self, root: Union[str, Path]) -> Iterator[Path]:
        """Depth-first traversal yielding regular files only."""
        self.stats = WalkStats()
        stack = [iter(self._list_dir(Path(root)))]

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            try:
                if entry.is_symlink():
                    self.stats.symlinks_skipped += 1
                    continue
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file(follow_symlinks=False)
            except OSError as e:
                logger.warning("Cannot stat %s: %s", entry.path, e)
                continue

            if is_dir:
                stack.append(iter(self._list_dir(Path(entry.path))))
            elif is_file:
                self.stats.files_seen += 1
                yield Path(entry.path)

    def _list_dir(self, directory: Path) -> List[os.DirEntry]:
        """List a directory in name order; unreadable directories yield nothing."""
        try:
            with os.scandir(directory) as entries:
                listing = sorted(entries, key=lambda e: e.name)
        except OSError as e:
            self.stats.unreadable_dirs += 1
            logger.warning("Cannot read directory %s: %s", directory, e)
            return []

        self.stats.directories += 1
        return listing


def walk(root: Union[str, Path], accept_all: bool = False) -> Iterator[Tuple[Path, FileOutcome]]:
    """Convenience function for a walk with the default sampler and filter."""
    return TreeWalker().walk(root, accept_all=accept_all)
