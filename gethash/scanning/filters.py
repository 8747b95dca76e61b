#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Media file recognition by extension.
"""

import os
from pathlib import Path
from typing import Iterable, Optional, Union

from ..config import VIDEO_EXT


def extension_of(path: Union[str, Path]) -> Optional[str]:
    """Return the text after the last '.' of the final path component, or None."""
    name = os.path.basename(os.fspath(path))
    _, dot, ext = name.rpartition(".")
    if not dot or not ext:
        return None
    return ext


class ExtensionFilter:
    """Exact, case-insensitive extension allow-list."""

    def __init__(self, extensions: Optional[Iterable[str]] = None):
        if extensions is None:
            self.extensions = frozenset(VIDEO_EXT)
        else:
            self.extensions = frozenset(
                e.strip().lstrip(".").lower() for e in extensions if e.strip().lstrip(".")
            )

    def is_recognized(self, path: Union[str, Path]) -> bool:
        ext = extension_of(path)
        return ext is not None and ext.lower() in self.extensions

    def __repr__(self) -> str:
        return f"ExtensionFilter({sorted(self.extensions)!r})"


_default_filter = ExtensionFilter()


def is_recognized(path: Union[str, Path]) -> bool:
    """Check if a path has one of the default media extensions."""
    return _default_filter.is_recognized(path)
