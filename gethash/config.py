#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Global configuration and constants for GetHash.
"""

from typing import Set

VERSION = "0.19"

# FNV-1a 64-bit parameters
FNV_OFFSET_BASIS = 0xcbf29ce484222325
FNV_PRIME = 0x100000001b3
HASH_MASK = 0xFFFFFFFFFFFFFFFF

# Sampling windows. These are part of the fingerprint format: changing any of
# them changes every hash produced.
CHUNK_SIZE = 16384
MID_THRESHOLD = 3 * CHUNK_SIZE
TAIL_THRESHOLD = CHUNK_SIZE
SIZE_FIELD_BYTES = 8
SIZE_BYTE_ORDER = "little"

# Recognized media extensions (without the dot)
VIDEO_EXT: Set[str] = {
    "mp4", "mkv", "avi", "mov", "wmv", "flv",
    "webm", "m4v", "mpg", "mpeg", "ts", "m2ts",
}

# Report layout
KB = 1024
MB = 1024 * 1024
MIN_SEPARATOR_WIDTH = 15
SEPARATOR_PADDING = 8
PROGRESS_BAR_WIDTH = 35
LOG_TIME_FORMAT = "%a, %b %d %Y %H:%M:%S"
