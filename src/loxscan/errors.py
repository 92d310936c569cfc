"""Exception classes for loxscan.

Lexical errors are not exceptions: they are reported to a diagnostic sink
and the scan continues. The exceptions here cover caller-side policy
(strict mode) and API misuse.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxscan.diagnostics import Diagnostic


class LoxScanError(Exception):
    """Base exception for all loxscan errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(LoxScanError):
    """A completed scan recorded one or more lexical errors.

    Raised in strict mode once the whole source has been scanned, so every
    diagnostic is available on the exception, not just the first one.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
        diagnostics: tuple[Diagnostic, ...] = (),
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number of the first error (1-indexed)
            source_file: Path to source file (optional)
            diagnostics: Every diagnostic recorded during the scan
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file
        self.diagnostics = diagnostics

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + ": "

        super().__init__(f"{location}{message}")

    @classmethod
    def from_diagnostics(
        cls,
        diagnostics: tuple[Diagnostic, ...],
        source_file: str | None = None,
    ) -> ScanError:
        """Build an error summarizing the given diagnostics."""
        first = diagnostics[0]
        message = first.message
        if len(diagnostics) > 1:
            message += f" (and {len(diagnostics) - 1} more)"
        return cls(
            message,
            lineno=first.line,
            source_file=source_file,
            diagnostics=diagnostics,
        )


class ScannerReuseError(LoxScanError):
    """A Scanner instance was asked to scan more than once.

    Scanner instances are single-use; create one per source string.
    """

    def __init__(self) -> None:
        super().__init__("Scanner instances are single-use; create a new Scanner")
