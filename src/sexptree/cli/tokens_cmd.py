"""
List the lexical units of S-expressions.

Usage:
    sexptree tokens [EXPR] [options]

Examples:
    sexptree tokens "(123 world)"
    sexptree tokens "(1.2.3)" --strict
    sexptree tokens --file exprs.txt --format json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List

from rich.console import Console
from rich.table import Table
from rich.text import Text

from sexptree.config import Config, ConfigError
from sexptree.exceptions import ParseError
from sexptree.lexer import CloseParen, Identifier, LexicalUnit, Number, OpenParen, tokenize
from sexptree.log import configure_logging

from .utils import print_error, read_sources

UNIT_KINDS = {
    Identifier: "identifier",
    Number: "number",
    OpenParen: "open_paren",
    CloseParen: "close_paren",
}


def main(argv: List[str] | None = None) -> int:
    """Main entry point for the tokens command."""
    parser = argparse.ArgumentParser(
        prog="sexptree tokens",
        description="List lexical units",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("expr", nargs="?", help="S-expression text to tokenize")
    parser.add_argument("--file", "-f", help="Read expressions from a file, one per line")
    parser.add_argument(
        "--strict", action="store_true", default=None, help="Report malformed input as errors"
    )
    parser.add_argument(
        "--format", choices=["table", "json"], default="table", help="Output format"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    try:
        config = Config.load()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    strict = config.parser.strict if args.strict is None else args.strict
    verbose = args.verbose or config.defaults.verbose
    if verbose:
        configure_logging(verbose=True, modules=["sexptree.lexer"])

    try:
        sources = read_sources(args.expr, args.file)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    results = []
    try:
        for source in sources:
            results.append((source, tokenize(source, strict=strict)))
    except ParseError as e:
        print_error(e, verbose=verbose)
        return 1

    if args.format == "json":
        output_json(results)
    else:
        output_table(results)

    return 0


def unit_to_dict(unit: LexicalUnit) -> dict:
    """JSON-friendly description of a lexical unit."""
    data = {"kind": UNIT_KINDS[type(unit)], "start": unit.start, "end": unit.end}
    if isinstance(unit, Identifier):
        data["text"] = unit.text
    elif isinstance(unit, Number):
        data["text"] = unit.text
        data["value"] = unit.value
    return data


def output_json(results: list) -> None:
    data = [
        {"source": source, "tokens": [unit_to_dict(unit) for unit in units]}
        for source, units in results
    ]
    print(json.dumps(data, indent=2))


def output_table(results: list) -> None:
    console = Console()
    for source, units in results:
        table = Table(title=Text(f"source: {source!r}"), title_justify="left")
        table.add_column("Offset", justify="right")
        table.add_column("Kind")
        table.add_column("Text")
        table.add_column("Value", justify="right")

        for unit in units:
            data = unit_to_dict(unit)
            value = data.get("value")
            table.add_row(
                str(unit.start),
                data["kind"],
                data.get("text", "(" if isinstance(unit, OpenParen) else ")"),
                "" if value is None else repr(value),
            )

        console.print(table, markup=False, highlight=False)
