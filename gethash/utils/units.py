#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Size formatting helpers.
"""

from typing import Tuple

from ..config import KB, MB


def human_size(size_bytes: int) -> Tuple[float, str]:
    """KB below one megabyte, MB from there on."""
    if size_bytes < MB:
        return size_bytes / KB, "KB"
    return size_bytes / MB, "MB"

