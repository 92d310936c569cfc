"""Character classes and lookup tables for the scanner.

Every character the scanner starts a lexeme on falls into exactly one
CharClass. classify() is a pure function, so dispatch in the scanner is a
single match over a closed set.

All sets are ASCII-only frozensets. str.isdigit()/isalpha() are not used
because they accept non-ASCII digits and letters.
"""

from __future__ import annotations

from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping

from loxscan.tokens import TokenKind


class CharClass(Enum):
    """Lexeme-starting character classes."""

    PUNCTUATION = auto()  # ( ) { } , . - + ; *
    OPERATOR = auto()  # ! = < >  (may take a trailing =)
    SLASH = auto()  # /  (division or line comment)
    WHITESPACE = auto()  # space, \r, \t
    NEWLINE = auto()  # \n
    QUOTE = auto()  # "
    DIGIT = auto()  # 0-9
    ALPHA = auto()  # A-Z a-z _
    OTHER = auto()  # anything else: unexpected character


PUNCTUATION: Mapping[str, TokenKind] = MappingProxyType(
    {
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "{": TokenKind.LEFT_BRACE,
        "}": TokenKind.RIGHT_BRACE,
        ",": TokenKind.COMMA,
        ".": TokenKind.DOT,
        "-": TokenKind.MINUS,
        "+": TokenKind.PLUS,
        ";": TokenKind.SEMICOLON,
        "*": TokenKind.STAR,
    }
)

# Operator prefix -> (kind alone, kind when followed by "=")
OPERATORS: Mapping[str, tuple[TokenKind, TokenKind]] = MappingProxyType(
    {
        "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
        "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
        "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
        ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
    }
)

WHITESPACE: frozenset[str] = frozenset(" \r\t")

DIGITS: frozenset[str] = frozenset("0123456789")

ALPHA: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)

ALPHANUMERIC: frozenset[str] = ALPHA | DIGITS


def classify(char: str) -> CharClass:
    """Classify a single character.

    Args:
        char: One character of source text

    Returns:
        The CharClass the scanner dispatches on.
    """
    if char in PUNCTUATION:
        return CharClass.PUNCTUATION
    if char in OPERATORS:
        return CharClass.OPERATOR
    if char == "/":
        return CharClass.SLASH
    if char in WHITESPACE:
        return CharClass.WHITESPACE
    if char == "\n":
        return CharClass.NEWLINE
    if char == '"':
        return CharClass.QUOTE
    if char in DIGITS:
        return CharClass.DIGIT
    if char in ALPHA:
        return CharClass.ALPHA
    return CharClass.OTHER
