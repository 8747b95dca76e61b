#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Batch aggregation of per-file outcomes.
"""

import logging
from dataclasses import replace

from ..models.fingerprint import (
    FileOutcome, STATUS_HASHED, STATUS_NOT_FOUND, STATUS_SKIPPED, STATUS_UNREADABLE,
)
from ..models.totals import RunTotals

logger = logging.getLogger(__name__)


class BatchAggregator:
    """Append-only run totals.

    Each outcome is recorded exactly once. Skipped files only bump
    ``skipped``; everything else counts as attempted.
    """

    def __init__(self):
        self._totals = RunTotals()

    def record(self, outcome: FileOutcome) -> None:
        totals = self._totals

        if outcome.status == STATUS_SKIPPED:
            totals.skipped += 1
            return

        totals.attempted += 1
        if outcome.status == STATUS_HASHED:
            totals.succeeded += 1
            totals.bytes_succeeded += outcome.result.size
        elif outcome.status == STATUS_UNREADABLE:
            totals.unreadable += 1
        elif outcome.status == STATUS_NOT_FOUND:
            totals.not_found += 1
        else:
            logger.debug("Unclassified failure for %s: %s", outcome.path, outcome.status)

    def snapshot(self) -> RunTotals:
        """Independent copy of the current totals."""
        return replace(self._totals)

