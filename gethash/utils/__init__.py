"""Utility functions for GetHash."""

from .path import display_path
from .time import utc_now_str, log_timestamp, elapsed_ms
from .units import human_size

__all__ = ['display_path', 'utc_now_str', 'log_timestamp', 'elapsed_ms', 'human_size']
