"""State-machine scanner for Lox source text.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner, scan, CharClass, classify
├── core.py              # Scanner class (dispatch + cursor helpers)
├── classes.py           # CharClass enum, ASCII character tables
└── literals.py          # String, number, identifier, comment scanning

Usage:
    >>> from loxscan.scanner import scan
    >>> [t.kind.name for t in scan("a <= 1")]
    ['IDENTIFIER', 'LESS_EQUAL', 'NUMBER', 'END_OF_INPUT']

"""

from loxscan.scanner.classes import CharClass, classify
from loxscan.scanner.core import Scanner, scan

__all__ = ["CharClass", "Scanner", "classify", "scan"]
