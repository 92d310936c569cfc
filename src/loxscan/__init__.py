"""
loxscan: Scanner for the Lox scripting language

Turns Lox source text into a flat list of tokens for a parser. Lexical
errors are reported to a diagnostic sink and never stop the scan.

Quick Start:
    >>> from loxscan import scan
    >>> for token in scan('var x = "hi";'):
    ...     print(token)
    VAR var nil
    IDENTIFIER x nil
    EQUAL = nil
    STRING "hi" hi
    SEMICOLON ; nil
    END_OF_INPUT  nil

    >>> # Collect errors instead of printing them
    >>> from loxscan import CollectingSink
    >>> sink = CollectingSink()
    >>> tokens = scan("@", sink)
    >>> [str(d) for d in sink]
    ['[line 1] Error: Unexpected character.']

Installation:
    pip install loxscan              # Core scanner (zero deps)
    pip install loxscan[test]        # + pytest and hypothesis
"""

from loxscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from loxscan.diagnostics import (
    CollectingSink,
    Diagnostic,
    DiagnosticSink,
    LexicalErrorKind,
    StreamSink,
)
from loxscan.errors import LoxScanError, ScanError, ScannerReuseError
from loxscan.scanner import CharClass, Scanner, classify, scan
from loxscan.serialization import (
    token_from_dict,
    token_to_dict,
    tokens_from_json,
    tokens_to_json,
)
from loxscan.tokens import KEYWORDS, Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    # Scanning
    "scan",
    "Scanner",
    "CharClass",
    "classify",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    # Diagnostics
    "DiagnosticSink",
    "Diagnostic",
    "LexicalErrorKind",
    "CollectingSink",
    "StreamSink",
    # Errors
    "LoxScanError",
    "ScanError",
    "ScannerReuseError",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Serialization
    "token_to_dict",
    "token_from_dict",
    "tokens_to_json",
    "tokens_from_json",
    "__version__",
]
