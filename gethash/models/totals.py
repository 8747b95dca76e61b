#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Run-wide totals for a GetHash batch.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from ..config import MB


@dataclass
class RunTotals:
    """Counters accumulated over one batch invocation."""
    attempted: int = 0
    succeeded: int = 0
    bytes_succeeded: int = 0

    # Breakdown of the non-hashed outcomes
    skipped: int = 0
    unreadable: int = 0
    not_found: int = 0

    @property
    def failed(self) -> int:
        return self.attempted - self.succeeded

    @property
    def megabytes_succeeded(self) -> float:
        return self.bytes_succeeded / MB

    def to_dict(self) -> Dict[str, Any]:
        """Convert totals to a dictionary for serialization."""
        data = asdict(self)
        data["failed"] = self.failed
        data["megabytes_succeeded"] = round(self.megabytes_succeeded, 3)
        return data
