"""State-machine scanner with O(n) guaranteed performance.

One forward pass over the complete source text, one character of lookahead
(two for the fractional part of a number). No regex, no backtracking.

Lexical errors go to a diagnostic sink; the scan always runs to the end of
input and always returns a token list terminated by END_OF_INPUT.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from loxscan.config import ScanConfig, get_scan_config
from loxscan.diagnostics import (
    CollectingSink,
    Diagnostic,
    DiagnosticSink,
    LexicalErrorKind,
)
from loxscan.errors import ScanError, ScannerReuseError
from loxscan.scanner.classes import OPERATORS, PUNCTUATION, CharClass, classify
from loxscan.scanner.literals import LiteralScannerMixin
from loxscan.tokens import LiteralValue, Token, TokenKind
from loxscan.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(LiteralScannerMixin):
    """State-machine scanner for Lox source text.

    Usage:
            >>> scanner = Scanner("var x = 1;")
            >>> for token in scanner.scan_tokens():
            ...     print(token)
        VAR var nil
        IDENTIFIER x nil
        EQUAL = nil
        NUMBER 1 1.0
        SEMICOLON ; nil
        END_OF_INPUT  nil

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_start",  # Index where the current lexeme began
        "_current",  # Index of the next unconsumed character
        "_line",
        "_start_line",  # Line on which the current lexeme began
        "_tokens",
        "_sink",
        "_source_file",
        "_config",
        "_scanned",
    )

    def __init__(
        self,
        source: str,
        sink: DiagnosticSink | None = None,
        *,
        source_file: str | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Complete Lox source text, already decoded
            sink: Receiver for lexical errors; a CollectingSink if omitted
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self._tokens: list[Token] = []
        self._sink: DiagnosticSink = sink if sink is not None else CollectingSink()
        self._source_file = source_file
        self._config: ScanConfig = get_scan_config()
        self._scanned = False

    @property
    def sink(self) -> DiagnosticSink:
        return self._sink

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source into a token list.

        Returns:
            Tokens in source order, ending with one END_OF_INPUT token.

        Raises:
            ScannerReuseError: If called a second time on this instance.
            ScanError: In strict mode, after the scan, if anything was reported.

        Complexity: O(n) where n = len(source)
        """
        if self._scanned:
            raise ScannerReuseError()
        self._scanned = True

        reported = _ReportCounter(self._sink)
        self._sink = reported

        while not self._is_at_end():
            # At the beginning of the next lexeme
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        self._tokens.append(Token(TokenKind.END_OF_INPUT, "", None, self._line))
        self._sink = reported.inner

        logger.debug(
            "Scanned %d tokens, %d diagnostics, %d lines",
            len(self._tokens),
            len(reported.diagnostics),
            self._line,
        )

        if self._config.strict and reported.diagnostics:
            raise ScanError.from_diagnostics(
                tuple(reported.diagnostics), source_file=self._source_file
            )
        return self._tokens

    def _scan_token(self) -> None:
        """Consume exactly one lexeme (or one error character)."""
        char = self._advance()

        match classify(char):
            case CharClass.PUNCTUATION:
                self._add_token(PUNCTUATION[char])
            case CharClass.OPERATOR:
                single, double = OPERATORS[char]
                self._add_token(double if self._match("=") else single)
            case CharClass.SLASH:
                if self._match("/"):
                    self._skip_line_comment()
                else:
                    self._add_token(TokenKind.SLASH)
            case CharClass.WHITESPACE:
                pass
            case CharClass.NEWLINE:
                self._line += 1
            case CharClass.QUOTE:
                self._scan_string()
            case CharClass.DIGIT:
                self._scan_number()
            case CharClass.ALPHA:
                self._scan_identifier()
            case CharClass.OTHER:
                self._report(LexicalErrorKind.UNEXPECTED_CHARACTER)

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _is_at_end(self) -> bool:
        return self._current >= self._source_len

    def _advance(self) -> str:
        """Consume and return the next character."""
        char = self._source[self._current]
        self._current += 1
        return char

    def _peek(self) -> str:
        """Current character, or empty string at end of input."""
        if self._current >= self._source_len:
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        """Character after the current one, or empty string past the end."""
        if self._current + 1 >= self._source_len:
            return ""
        return self._source[self._current + 1]

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it equals ``expected``."""
        if self._current >= self._source_len:
            return False
        if self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    # =========================================================================
    # Output
    # =========================================================================

    def _add_token(self, kind: TokenKind, literal: LiteralValue = None) -> None:
        token = Token(
            kind,
            self._source[self._start : self._current],
            literal,
            self._start_line,
        )
        if self._config.trace_tokens:
            logger.debug("token %r", token)
        self._tokens.append(token)

    def _report(self, error: LexicalErrorKind) -> None:
        logger.debug(
            "line %d: %s %r",
            self._line,
            error.value,
            self._source[self._start : self._current],
        )
        self._sink.report(self._line, error.value)


class _ReportCounter:
    """Forwards reports to the caller's sink while keeping its own copy.

    Strict mode needs to know what this scan reported regardless of the
    kind of sink the caller passed in.
    """

    __slots__ = ("inner", "diagnostics")

    def __init__(self, inner: DiagnosticSink) -> None:
        self.inner = inner
        self.diagnostics: list[Diagnostic] = []

    def report(self, line: int, message: str) -> None:
        self.diagnostics.append(Diagnostic(line, message))
        self.inner.report(line, message)


def scan(source: str, sink: DiagnosticSink | None = None) -> list[Token]:
    """Scan source text with a fresh Scanner.

    Args:
        source: Complete Lox source text
        sink: Receiver for lexical errors (optional)

    Returns:
        Token list ending with END_OF_INPUT.
    """
    return Scanner(source, sink).scan_tokens()
