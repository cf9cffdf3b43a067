"""
minijs CLI Entrypoint.

This module provides the command-line interface for the minijs front end.
It lexes and parses source code and prints the result as JSON.

Features:
    - Read source from `.js` files or inline strings.
    - Print the token stream (`--tokens`) or the parsed AST (default).
    - Output to console or file.
    - Syntax errors go to stderr with a non-zero exit status.

Example usage:
    minijs program.js
    minijs -s "x = y = 42;" -p
    minijs program.js --tokens -o tokens.json

Functions:
    run_minijs(source: str, is_string: bool = False, tokens: bool = False,
               out: str | None = None, pretty: bool = False) -> None:
        Runs the pipeline (read → lex → parse → output).

    main(argv: list[str] | None = None) -> int:
        Parses CLI arguments, runs the pipeline and returns the exit status.
"""

import argparse
import json
import logging
import sys
from typing import Any

from minijs.minijs_errors import MiniJSError
from minijs.minijs_lexer import tokenize
from minijs.minijs_parser import parse

LOG = logging.getLogger("minijs")
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def run_minijs(
    source: str,
    is_string: bool = False,
    tokens: bool = False,
    out: str | None = None,
    pretty: bool = False,
) -> None:
    """
    Run the minijs front end: read, lex, parse, and write the JSON result.

    Args:
        source (str): The source code or path to a `.js` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path. Defaults to False.
        tokens (bool): If True, output the token stream instead of the AST. Defaults to False.
        out (str | None): Optional path to write the output. If None, prints to stdout.
        pretty (bool): If True, indent the JSON output. Defaults to False.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.js'.
        MiniJSSyntaxError: If the source cannot be lexed or parsed.
    """
    if not is_string and not source.endswith(".js"):
        raise ValueError("Only .js files are supported.")
    # 1. Read source
    if not is_string:
        LOG.debug("reading %s", source)
        with open(source, encoding="utf-8") as f:
            source = f.read()

    # 2. Lex or parse
    result: Any
    if tokens:
        result = [
            {"type": tok.type, "value": tok.value, "line": tok.line, "col": tok.col}
            for tok in tokenize(source)
        ]
        LOG.debug("lexed %d tokens", len(result))
    else:
        result = parse(source).to_dict()

    # 3. Output result
    text = json.dumps(result, indent=2 if pretty else None)
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        LOG.info("wrote %s", out)
    else:
        print(text)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the minijs CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-t`, `--tokens`: Print tokens instead of the AST.
        - `-o`, `--out`: Write output to a file.
        - `-p`, `--pretty`: Indent JSON output.
        - `-v`, `--verbose`: Enable debug logging.

    Returns:
        int: 0 on success, 1 on a minijs error, 2 on invalid usage.
    """
    parser = argparse.ArgumentParser(prog="minijs")
    parser.add_argument("source", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-t", "--tokens", action="store_true", help="Print tokens instead of the AST"
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "-p", "--pretty", action="store_true", help="Indent JSON output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.verbose:
        LOG.setLevel(logging.DEBUG)
        LOG.debug("Verbose mode enabled")

    try:
        run_minijs(
            source=args.source,
            is_string=args.string,
            tokens=args.tokens,
            out=args.out,
            pretty=args.pretty,
        )
    except MiniJSError as e:
        where = e.location()
        print(f"{e} ({where})" if where else str(e), file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        LOG.error("%s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
