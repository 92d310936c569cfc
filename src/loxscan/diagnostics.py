"""Diagnostic sinks for lexical errors.

The scanner never decides what an error means for the program as a whole.
It hands each error to a sink (anything with a ``report(line, message)``
method) and keeps scanning. Callers inspect the sink afterwards.

Usage:
    >>> from loxscan import scan
    >>> from loxscan.diagnostics import CollectingSink
    >>> sink = CollectingSink()
    >>> tokens = scan("@", sink)
    >>> sink.has_errors
    True
    >>> str(sink.diagnostics[0])
    '[line 1] Error: Unexpected character.'

Thread Safety:
    Sinks are plain mutable objects. Use one sink per scan.

"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class DiagnosticSink(Protocol):
    """Protocol for receivers of line-tagged lexical errors."""

    def report(self, line: int, message: str) -> None:
        """Record an error detected at ``line`` (1-indexed)."""
        ...


class LexicalErrorKind(Enum):
    """The two kinds of lexical error. Values are the reported messages."""

    UNEXPECTED_CHARACTER = "Unexpected character."
    UNTERMINATED_STRING = "Unterminated string."


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single reported error."""

    line: int
    message: str

    @property
    def kind(self) -> LexicalErrorKind | None:
        """The lexical error kind, or None for messages from elsewhere."""
        try:
            return LexicalErrorKind(self.message)
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class CollectingSink:
    """Sink that keeps every diagnostic in arrival order."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def report(self, line: int, message: str) -> None:
        self._diagnostics.append(Diagnostic(line, message))

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    @property
    def has_errors(self) -> bool:
        return bool(self._diagnostics)

    def clear(self) -> None:
        """Forget recorded diagnostics (used between prompt lines)."""
        self._diagnostics.clear()

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)


class StreamSink(CollectingSink):
    """Collecting sink that also prints each diagnostic as it arrives.

    Args:
        stream: Where to write; defaults to ``sys.stderr`` at report time
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self._stream = stream

    def report(self, line: int, message: str) -> None:
        super().report(line, message)
        stream = self._stream if self._stream is not None else sys.stderr
        print(self._diagnostics[-1], file=stream)
