"""Literal scanner mixin: strings, numbers, identifiers and comments.

Each method is entered with the lexeme's first character already consumed
and leaves the cursor just past the lexeme.
"""

from __future__ import annotations

from loxscan.diagnostics import LexicalErrorKind
from loxscan.scanner.classes import ALPHANUMERIC, DIGITS
from loxscan.tokens import KEYWORDS, LiteralValue, TokenKind


class LiteralScannerMixin:
    """Mixin providing the multi-character lexeme scanners.

    Uses str.find for the delimiter searches (C implementation), then
    commits the cursor in one step. The cursor only moves forward.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _start: int
    _current: int
    _line: int

    def _peek(self) -> str:
        raise NotImplementedError

    def _peek_next(self) -> str:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _add_token(self, kind: TokenKind, literal: LiteralValue = None) -> None:
        raise NotImplementedError

    def _report(self, error: LexicalErrorKind) -> None:
        raise NotImplementedError

    def _skip_line_comment(self) -> None:
        """Skip to the end of the line. The newline itself is left in place."""
        end = self._source.find("\n", self._current)
        self._current = end if end != -1 else self._source_len

    def _scan_string(self) -> None:
        """Scan a raw string literal; newlines inside it are allowed."""
        close = self._source.find('"', self._current)
        end = close if close != -1 else self._source_len
        self._line += self._source.count("\n", self._current, end)
        self._current = end

        if close == -1:
            self._report(LexicalErrorKind.UNTERMINATED_STRING)
            return

        self._current += 1  # closing quote
        self._add_token(TokenKind.STRING, self._source[self._start + 1 : close])

    def _scan_number(self) -> None:
        """Scan a number literal: digits, optionally '.' and more digits."""
        while self._peek() in DIGITS:
            self._advance()

        # A trailing '.' with no digit after it belongs to the next token
        if self._peek() == "." and self._peek_next() in DIGITS:
            self._advance()
            while self._peek() in DIGITS:
                self._advance()

        self._add_token(
            TokenKind.NUMBER, float(self._source[self._start : self._current])
        )

    def _scan_identifier(self) -> None:
        """Scan an identifier or reserved word (maximal run)."""
        while self._peek() in ALPHANUMERIC:
            self._advance()

        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))
