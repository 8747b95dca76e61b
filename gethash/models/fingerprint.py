#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Data structures for fingerprint results in GetHash.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..utils.path import display_path
from .errors import HashError

STATUS_HASHED = "hashed"
STATUS_UNREADABLE = "unreadable"
STATUS_NOT_FOUND = "not_found"
STATUS_SKIPPED = "skipped"


@dataclass(frozen=True)
class FileSample:
    """A file as seen by the sampler: its path and the size reported by fstat."""
    path: str
    size: int


@dataclass(frozen=True)
class FingerprintResult:
    """Sparse fingerprint of a single file."""
    hash: int
    size: int
    path: str

    @property
    def hex_digest(self) -> str:
        """16 hex-digit lowercase rendering of the hash."""
        return format(self.hash, "016x")

    @property
    def display(self) -> str:
        return display_path(self.path)

    @property
    def name(self) -> str:
        return os.path.basename(self.display)

    @property
    def directory(self) -> str:
        return os.path.dirname(self.display)

    def to_dict(self) -> Dict[str, Any]:
        return {"hash": self.hex_digest, "size": self.size, "path": self.display}


@dataclass(frozen=True)
class FileOutcome:
    """What happened to one candidate path during a run."""
    path: str
    status: str
    result: Optional[FingerprintResult] = None
    error: Optional[HashError] = None
    # False for files found by a directory walk rather than named directly
    explicit: bool = True

    @classmethod
    def hashed(cls, result: FingerprintResult) -> "FileOutcome":
        return cls(path=result.path, status=STATUS_HASHED, result=result)

    @classmethod
    def failed(cls, error: HashError) -> "FileOutcome":
        return cls(path=error.path, status=error.kind, error=error)

    @classmethod
    def skipped(cls, path, explicit: bool = True) -> "FileOutcome":
        return cls(path=str(path), status=STATUS_SKIPPED, explicit=explicit)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_HASHED

    @property
    def is_skipped(self) -> bool:
        return self.status == STATUS_SKIPPED

    @property
    def display(self) -> str:
        return display_path(self.path)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"path": self.display, "status": self.status}
        if self.result is not None:
            data.update(self.result.to_dict())
        if self.error is not None:
            data["error"] = self.error.reason
        return data
