#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Path utility functions for GetHash.
"""

import os
from pathlib import Path
from typing import Union


def display_path(path: Union[str, Path]) -> str:
    """Printable form of a path.

    Bytes that are not valid UTF-8 arrive from the OS as lone surrogates and
    cannot be encoded for the terminal or the log; they are shown as
    ``\\xNN`` escapes instead.
    """
    return os.fsencode(path).decode("utf-8", "backslashreplace")
