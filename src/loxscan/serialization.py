"""Token serialization to JSON-compatible dicts.

Used by the command line ``--json`` mode and by tools that hand a token
stream to another process.

All output is deterministic (sorted keys).

Example:
    from loxscan import scan
    from loxscan.serialization import tokens_to_json

    print(tokens_to_json(scan("print 1;")))

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from loxscan.tokens import Token, TokenKind


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict."""
    return {
        "kind": token.kind.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }


def token_from_dict(data: dict[str, Any]) -> Token:
    """Rebuild a token from ``token_to_dict`` output.

    Raises:
        ValueError: If ``kind`` is not a TokenKind name.
    """
    try:
        kind = TokenKind[data["kind"]]
    except KeyError:
        raise ValueError(f"Unknown token kind: {data.get('kind')!r}") from None

    literal = data.get("literal")
    # JSON has no float/int distinction; NUMBER literals are always floats
    if kind is TokenKind.NUMBER and literal is not None:
        literal = float(literal)
    return Token(kind, data["lexeme"], literal, data["line"])


def tokens_to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array."""
    return json.dumps(
        [token_to_dict(t) for t in tokens], sort_keys=True, indent=indent
    )


def tokens_from_json(text: str) -> list[Token]:
    """Deserialize a JSON array produced by ``tokens_to_json``."""
    return [token_from_dict(item) for item in json.loads(text)]
