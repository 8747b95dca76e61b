#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Hash command (thin wrapper).
All sampling and traversal lives in the scanning engine; this module only
wires the engine to the report writer, the progress bar and JSON output.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from tqdm import tqdm

from .. import jsonio
from ..config import VERSION, PROGRESS_BAR_WIDTH
from ..models.totals import RunTotals
from ..scanning.aggregator import BatchAggregator
from ..scanning.filters import ExtensionFilter
from ..scanning.scanner import BatchScanner
from ..utils.time import elapsed_ms, utc_now_str
from ..writer import ReportWriter

logger = logging.getLogger(__name__)


class HashCommand:
    def __init__(self, recursive: bool = False, accept_all: bool = False,
                 extensions: Optional[Iterable[str]] = None):
        self.recursive = recursive
        self.accept_all = accept_all
        self.scanner = BatchScanner(extension_filter=ExtensionFilter(extensions))
        self.totals: Optional[RunTotals] = None

    def execute(
        self,
        paths: Sequence[Union[str, Path]],
        log_path: Optional[Union[str, Path]] = None,
        silent: bool = False,
        compact: bool = False,
        as_json: bool = False,
    ) -> int:
        """Hash every path and render the results. Returns the exit code."""
        start = time.perf_counter()
        aggregator = BatchAggregator()
        logger.info("Hashing %d path(s) (recursive=%s, ignore extension=%s)",
                    len(paths), self.recursive, self.accept_all)

        if as_json:
            return self._execute_json(paths, aggregator, start)

        prescan = self.scanner.prescan(paths, self.recursive)
        outcomes = self.scanner.scan(paths, aggregator, recursive=self.recursive,
                                     accept_all=self.accept_all)

        with ReportWriter(log_path=log_path, silent=silent, compact=compact,
                          longest_display=prescan.longest_display) as writer:
            if silent:
                writer.console.print(f"Calculating hash for {prescan.count:,} file(s).")

            progress = tqdm(
                total=prescan.count,
                disable=not silent,
                ascii=".=",
                bar_format="[{bar:%d}] {percentage:3.0f}%%" % PROGRESS_BAR_WIDTH,
                file=sys.stdout,
                leave=True,
            )
            with progress:
                for outcome in outcomes:
                    writer.write_outcome(outcome)
                    progress.update(1)

            self.totals = aggregator.snapshot()
            writer.write_summary(self.totals, elapsed_ms(start))

        logger.info("Run finished: %d of %d hashed", self.totals.succeeded, self.totals.attempted)
        return 0

    def _execute_json(self, paths: Sequence[Union[str, Path]],
                      aggregator: BatchAggregator, start: float) -> int:
        outcomes: List = list(self.scanner.scan(paths, aggregator, recursive=self.recursive,
                                                accept_all=self.accept_all))
        self.totals = aggregator.snapshot()
        meta = {
            "version": VERSION,
            "generated_at": utc_now_str(),
            "elapsed_ms": round(elapsed_ms(start), 3),
            "recursive": self.recursive,
            "ignore_extension": self.accept_all,
        }
        return jsonio.success("hash", jsonio.run_payload(outcomes, self.totals), meta=meta)
