"""Command line entry point: scan a file, or scan lines interactively.

    loxscan script.lox        # print the tokens of a file
    loxscan                   # prompt, scanning one line at a time
    loxscan --json script.lox # tokens as a JSON array

Exit status follows sysexits.h: 64 for bad usage, 65 when the scanned
file contained lexical errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from loxscan.config import ScanConfig, scan_config_context
from loxscan.diagnostics import StreamSink
from loxscan.errors import ScanError
from loxscan.scanner import Scanner
from loxscan.serialization import tokens_to_json
from loxscan.tokens import Token
from loxscan.utils.logger import get_logger

logger = get_logger(__name__)

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65

PROMPT = "> "


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxscan", description="Scan Lox source into tokens"
    )
    parser.add_argument("script", nargs="*", help="Lox source file")
    parser.add_argument(
        "--json", action="store_true", help="print tokens as a JSON array"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="print no tokens if the source has lexical errors",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def _print_tokens(tokens: list[Token], as_json: bool) -> None:
    if as_json:
        print(tokens_to_json(tokens))
        return
    for token in tokens:
        print(token)


def run(
    source: str,
    sink: StreamSink,
    *,
    as_json: bool = False,
    source_file: str | None = None,
) -> None:
    """Scan one source text and print its tokens."""
    try:
        tokens = Scanner(source, sink, source_file=source_file).scan_tokens()
    except ScanError as e:
        print(f"error: {e}", file=sys.stderr)
        return
    _print_tokens(tokens, as_json)


def run_file(path: str, *, as_json: bool = False) -> int:
    """Scan a whole file. Decoding uses the platform default encoding."""
    source = Path(path).read_text()
    sink = StreamSink()
    run(source, sink, as_json=as_json, source_file=path)
    return EX_DATAERR if sink.has_errors else EX_OK


def run_prompt(*, as_json: bool = False) -> int:
    """Scan lines from stdin until end of input.

    Errors on one line do not carry over to the next.
    """
    sink = StreamSink()
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            break
        run(line, sink, as_json=as_json)
        sink.clear()
    return EX_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if len(args.script) > 1:
        print("Usage: loxscan [script]")
        return EX_USAGE

    config = ScanConfig(strict=args.strict, trace_tokens=args.verbose)
    with scan_config_context(config):
        if args.script:
            logger.debug("Scanning file %s", args.script[0])
            return run_file(args.script[0], as_json=args.json)
        return run_prompt(as_json=args.json)
