# gethash/writer.py
"""
Report rendering for GetHash.

Everything goes to two places: the terminal (colored, through rich) and,
when requested, a plain-text log file that never contains ANSI codes.
Silent mode suppresses the terminal side only.
"""

import logging
from pathlib import Path
from typing import Optional, TextIO, Union

from rich.console import Console
from rich.text import Text

from .config import VERSION, MIN_SEPARATOR_WIDTH, SEPARATOR_PADDING
from .models.fingerprint import FileOutcome, FingerprintResult, STATUS_NOT_FOUND, STATUS_SKIPPED
from .models.totals import RunTotals
from .utils.path import display_path
from .utils.time import log_timestamp
from .utils.units import human_size

logger = logging.getLogger(__name__)


class ReportWriter:
    def __init__(self, log_path: Optional[Union[str, Path]] = None, silent: bool = False,
                 compact: bool = False, longest_display: int = 0,
                 console: Optional[Console] = None, err_console: Optional[Console] = None):
        self.log_path = Path(log_path) if log_path else None
        self.silent = silent
        self.compact = compact
        self.width = max(MIN_SEPARATOR_WIDTH, longest_display) + SEPARATOR_PADDING
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)
        self._log_fp: Optional[TextIO] = None

    # --- log file lifecycle -------------------------------------------------

    def open_log(self) -> bool:
        """Create the log file and write its header. Failure is not fatal."""
        if not self.log_path:
            return False
        try:
            self._log_fp = self.log_path.open("w", encoding="utf-8", errors="backslashreplace")
        except OSError as e:
            logger.debug("Log open failed: %s", e)
            self.err_console.print(Text.assemble(
                ("Error:", "red"), " Could not open log file ", (display_path(self.log_path), "yellow")))
            return False

        self._log_fp.write(f"GetHash v{VERSION} Log - Generated on {log_timestamp()}\n\n")
        self._log_fp.flush()
        return True

    @property
    def logging_to_file(self) -> bool:
        return self._log_fp is not None

    def close(self):
        if self._log_fp is not None:
            self._log_fp.close()
            self._log_fp = None

    def __enter__(self):
        self.open_log()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    # --- output primitives ----------------------------------------------------

    def _emit(self, text: Text):
        """Terminal (unless silent) and log file."""
        if not self.silent:
            self.console.print(text)
        if self._log_fp is not None:
            self._log_fp.write(text.plain + "\n")
            self._log_fp.flush()

    def separator(self, symbol: str = "-", style: str = "cyan"):
        self._emit(Text(symbol * self.width, style=style))

    # --- per-file records -----------------------------------------------------

    def write_outcome(self, outcome: FileOutcome):
        if outcome.ok:
            self.write_result(outcome.result)
        else:
            self.write_failure(outcome)

    def write_result(self, result: FingerprintResult):
        if self.compact:
            self._emit(Text(f"{result.hex_digest}  {result.display}"))
            return

        value, unit = human_size(result.size)
        self.separator("-", "cyan")
        self._emit(Text.assemble(("File: ", "green"), result.name))
        self._emit(Text.assemble(("Path: ", "green"), result.directory))
        self._emit(Text.assemble(("Size:", "green"), (f" {value:,.2f} ", "yellow"), unit))
        self._emit(Text.assemble(("Hash: ", "green"), result.hex_digest))

    def write_failure(self, outcome: FileOutcome):
        """Failures go to stderr only, never to the log file.

        Files a directory walk passes over for their extension are only
        counted; naming one on the command line still reports it.
        """
        if self.silent:
            return
        if outcome.is_skipped and not outcome.explicit:
            logger.debug("Skipping: %s (Non-video)", outcome.display)
            return
        if outcome.status == STATUS_SKIPPED:
            message = Text.assemble(("Skipping:", "red"), f" '{outcome.display}' ", ("(Non-video)", "yellow"))
        elif outcome.status == STATUS_NOT_FOUND:
            message = Text.assemble(("Path Error:", "red"), " ", (f"'{outcome.display}'", "yellow"), " not found")
        else:
            reason = outcome.error.reason if outcome.error else outcome.status
            message = Text.assemble(("Read Error:", "red"), " ", (f"'{outcome.display}'", "yellow"), f" ({reason})")
        self.err_console.print(message)

    # --- run summary ------------------------------------------------------------

    def write_summary(self, totals: RunTotals, elapsed_ms: float):
        self.separator("=", "cyan")

        summary = Text.assemble(
            ("Summary: ", "yellow"),
            f"{totals.succeeded:,} of {totals.attempted:,} files hashed (",
            (f"{totals.megabytes_succeeded:,.2f}", "yellow"),
            " MB) in ",
            (f"{elapsed_ms:.3f}", "orange3"),
            " ms",
        )
        if totals.skipped:
            summary.append(f", {totals.skipped:,} skipped")

        # The summary is shown even in silent mode
        self.console.print(summary)
        if self._log_fp is not None:
            self._log_fp.write(summary.plain + "\n")
            self._log_fp.flush()
            self.console.print(Text.assemble(("Log saved to:", "yellow"), f" {display_path(self.log_path)}"))
