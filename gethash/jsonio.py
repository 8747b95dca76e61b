# gethash/jsonio.py
"""JSON output mode: one envelope on stdout, logs on stderr."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Iterable, Optional

from .models.fingerprint import FileOutcome
from .models.totals import RunTotals
from .utils.path import display_path


def enable_json_logging():
    """Route logging to stderr at ERROR so stdout carries only the JSON envelope."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    logging.basicConfig(stream=sys.stderr, level=logging.ERROR)


def run_payload(outcomes: Iterable[FileOutcome], totals: RunTotals) -> Dict[str, Any]:
    """Per-file records plus run totals."""
    return {
        "files": [outcome.to_dict() for outcome in outcomes],
        "totals": totals.to_dict(),
    }


def _write(payload: Dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))
    sys.stdout.write("\n")
    sys.stdout.flush()


def success(command: str, data: Optional[Dict[str, Any]] = None,
            meta: Optional[Dict[str, Any]] = None, code: int = 0) -> int:
    payload: Dict[str, Any] = {"result": "success", "command": command, "data": data or {}}
    if meta:
        payload["meta"] = meta
    _write(payload)
    return code


def error(command: str, message: str, debug: Optional[Dict[str, Any]] = None, code: int = 1) -> int:
    payload: Dict[str, Any] = {"result": "error", "command": command, "error": display_path(message)}
    if debug:
        payload["debug"] = debug
    _write(payload)
    return code
