#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Per-file error types raised by the hashing core.
"""

from typing import Optional


class HashError(Exception):
    """Base class for failures that affect a single file only."""

    kind = "error"

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = str(path)
        self.cause = cause
        super().__init__(self._describe())

    @property
    def reason(self) -> str:
        """Short human-readable reason taken from the underlying OS error."""
        if isinstance(self.cause, OSError) and self.cause.strerror:
            return self.cause.strerror
        if self.cause is not None:
            return str(self.cause)
        return self.kind.replace("_", " ")

    def _describe(self) -> str:
        return f"{self.path}: {self.reason}"


class UnreadableError(HashError):
    """The file could not be opened, measured or read."""

    kind = "unreadable"


class PathNotFoundError(HashError):
    """The path could not be resolved before sampling was attempted."""

    kind = "not_found"
