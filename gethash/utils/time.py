#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Time utility functions for GetHash.
"""

import time
from datetime import datetime, timezone

from ..config import LOG_TIME_FORMAT


def utc_now_str() -> str:
    """Return current UTC time in ISO-8601 format with 'Z'."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def log_timestamp() -> str:
    """Local time for the log file header, e.g. 'Sun, Oct 18 2026 14:03:11'."""
    return datetime.now().strftime(LOG_TIME_FORMAT)


def elapsed_ms(start: float) -> float:
    """Milliseconds since ``start``, a time.perf_counter() reading."""
    return (time.perf_counter() - start) * 1000.0
