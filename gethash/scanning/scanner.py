#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Batch scanner for GetHash.
Coordinates flat-list and recursive processing of the paths given on the
command line and feeds every outcome into the caller's aggregator.
"""

import logging
import os
from collections import namedtuple
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from ..hashing.sampler import SparseSampler
from ..models.errors import HashError, PathNotFoundError
from ..models.fingerprint import FileOutcome
from .aggregator import BatchAggregator
from .discovery import TreeWalker
from .filters import ExtensionFilter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

Prescan = namedtuple("Prescan", ["count", "longest_display"])


class BatchScanner:
    """Runs the sparse sampler over a batch of roots."""

    def __init__(self, sampler: Optional[SparseSampler] = None,
                 extension_filter: Optional[ExtensionFilter] = None,
                 walker: Optional[TreeWalker] = None):
        self.sampler = sampler or SparseSampler()
        self.extension_filter = extension_filter or ExtensionFilter()
        self.walker = walker or TreeWalker(self.sampler, self.extension_filter)

    def scan(self, roots: Iterable[PathLike], aggregator: BatchAggregator,
             recursive: bool = False, accept_all: bool = False) -> Iterator[FileOutcome]:
        """
        Fingerprint every candidate reachable from ``roots``.

        Args:
            roots: Files (and, when recursive, directories) to process
            aggregator: Receives each outcome before it is yielded
            recursive: Walk directory roots instead of treating them as files
            accept_all: Bypass the extension filter

        Yields:
            One FileOutcome per candidate, in input order.
        """
        for root in roots:
            if recursive and os.path.isdir(root):
                outcomes = self._scan_tree(root, accept_all)
            else:
                outcomes = iter((self._scan_file(root, accept_all),))

            for outcome in outcomes:
                aggregator.record(outcome)
                yield outcome

    def _scan_tree(self, root: PathLike, accept_all: bool) -> Iterator[FileOutcome]:
        root_path = Path(root).resolve()
        logger.info("Walking %s", root_path)
        for _, outcome in self.walker.walk(root_path, accept_all=accept_all):
            yield outcome

        stats = self.walker.stats
        logger.info("Walked %s: %d directories, %d files", root_path, stats.directories, stats.files_seen)
        if stats.unreadable_dirs:
            logger.warning("  - %d unreadable directories skipped", stats.unreadable_dirs)

    def _scan_file(self, target: PathLike, accept_all: bool) -> FileOutcome:
        """Flat-list handling: filter, resolve, then sample."""
        if not (accept_all or self.extension_filter.is_recognized(target)):
            logger.debug("Skipping non-media file %s", target)
            return FileOutcome.skipped(target)

        try:
            resolved = Path(target).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            # RuntimeError is raised for symlink loops on older Pythons
            logger.warning("Path not found: %s", target)
            return FileOutcome.failed(PathNotFoundError(str(target), e))

        try:
            return FileOutcome.hashed(self.sampler.sample(resolved))
        except HashError as e:
            logger.warning("Unreadable file %s: %s", resolved, e.reason)
            return FileOutcome.failed(e)

    def prescan(self, roots: Iterable[PathLike], recursive: bool = False) -> Prescan:
        """
        Count candidates and measure the longest name/directory.

        Used to size the progress bar and the report separators before any
        file is sampled. Nothing is opened here.
        """
        count = 0
        longest = 0
        for root in roots:
            if recursive and os.path.isdir(root):
                paths = self.walker.iter_files(Path(root).resolve())
            else:
                paths = [Path(root)]

            for path in paths:
                count += 1
                longest = max(longest, len(path.name))
                try:
                    directory = str(path.resolve(strict=True).parent)
                except (OSError, RuntimeError):
                    continue
                longest = max(longest, len(directory))

        return Prescan(count=count, longest_display=longest)
