"""Token and TokenKind definitions for the loxscan scanner.

The scanner produces a list of Token objects that a parser consumes.
Each Token has a kind, the exact lexeme, an optional decoded literal,
and the line on which it started.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum and KEYWORDS is a read-only mapping.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping


class TokenKind(Enum):
    """Token kinds produced by the scanner.

    Organized by category:
    - Single-character punctuation
    - One or two character operators
    - Literals
    - Reserved words
    - End of input

    """

    # Single-character punctuation
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two character operators
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Reserved words
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # Synthetic terminator
    END_OF_INPUT = auto()


# Reserved word spelling -> kind. Read-only at runtime.
KEYWORDS: Mapping[str, TokenKind] = MappingProxyType(
    {
        "and": TokenKind.AND,
        "class": TokenKind.CLASS,
        "else": TokenKind.ELSE,
        "false": TokenKind.FALSE,
        "for": TokenKind.FOR,
        "fun": TokenKind.FUN,
        "if": TokenKind.IF,
        "nil": TokenKind.NIL,
        "or": TokenKind.OR,
        "print": TokenKind.PRINT,
        "return": TokenKind.RETURN,
        "super": TokenKind.SUPER,
        "this": TokenKind.THIS,
        "true": TokenKind.TRUE,
        "var": TokenKind.VAR,
        "while": TokenKind.WHILE,
    }
)

LiteralValue = float | str | None


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        kind: The token kind (from TokenKind enum)
        lexeme: The exact source text that produced the token
        literal: Decoded value; float for NUMBER, str for STRING, else None
        line: Line on which the token started (1-indexed)

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    kind: TokenKind
    lexeme: str
    literal: LiteralValue
    line: int

    def __str__(self) -> str:
        """Printable form: kind name, lexeme, literal."""
        literal = "nil" if self.literal is None else self.literal
        return f"{self.kind.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        lexeme = self.lexeme
        if len(lexeme) > 20:
            lexeme = lexeme[:17] + "..."
        if self.literal is None:
            return f"Token({self.kind.name}, {lexeme!r}, line={self.line})"
        return f"Token({self.kind.name}, {lexeme!r}, {self.literal!r}, line={self.line})"

    @property
    def is_keyword(self) -> bool:
        """True if this token is a reserved word."""
        return KEYWORDS.get(self.lexeme) is self.kind
