"""
Parse S-expressions and print the resulting tree.

Usage:
    sexptree parse [EXPR] [options]

Examples:
    sexptree parse "((car cdr) cdr)"
    sexptree parse "(1 2" --strict
    sexptree parse --file exprs.txt --format json
    sexptree parse "()()) (a)" --all
    sexptree parse                  # run the built-in samples
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from sexptree.builder import TreeBuilder
from sexptree.config import OUTPUT_FORMATS, Config, ConfigError
from sexptree.exceptions import ParseError
from sexptree.lexer import Identifier
from sexptree.log import configure_logging
from sexptree.tree import Group, Leaf

from .utils import print_error, read_sources


def main(argv: List[str] | None = None) -> int:
    """Main entry point for the parse command."""
    parser = argparse.ArgumentParser(
        prog="sexptree parse",
        description="Parse S-expressions into a tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("expr", nargs="?", help="S-expression text to parse")
    parser.add_argument("--file", "-f", help="Read expressions from a file, one per line")
    parser.add_argument(
        "--strict", action="store_true", default=None, help="Report malformed input as errors"
    )
    parser.add_argument(
        "--max-depth", type=int, help="Maximum nesting depth (0 = unlimited)"
    )
    parser.add_argument(
        "--all",
        dest="parse_all",
        action="store_true",
        help="Keep parsing after a stray top-level ')'",
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    try:
        config = Config.load()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.strict is not None:
        config.parser.strict = args.strict
    if args.max_depth is not None:
        if args.max_depth < 0:
            print("Error: --max-depth must be >= 0", file=sys.stderr)
            return 1
        config.parser.max_depth = args.max_depth
    output_format = args.format or config.output.format
    verbose = args.verbose or config.defaults.verbose
    if verbose:
        configure_logging(verbose=True)

    try:
        sources = read_sources(args.expr, args.file)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    builder = TreeBuilder.from_config(config)
    results = []
    try:
        for source in sources:
            if args.parse_all:
                groups = builder.parse_all(source)
            else:
                groups = [builder.parse(source)]
            results.append((source, groups))
    except ParseError as e:
        print_error(e, verbose=verbose)
        return 1

    if output_format == "json":
        output_json(results)
    elif output_format == "repr":
        output_repr(results)
    else:
        output_tree(results)

    return 0


def output_json(results: list) -> None:
    """Print one JSON document describing every parsed source."""
    data = [
        {"source": source, "trees": [group.to_python() for group in groups]}
        for source, groups in results
    ]
    print(json.dumps(data, indent=2))


def output_repr(results: list) -> None:
    """Print trees in Group[...] / Leaf(...) notation."""
    for source, groups in results:
        print(f"source: {source!r}, parsed:")
        for group in groups:
            print(f" {group!r}")


def output_tree(results: list) -> None:
    """Render each tree with Rich."""
    console = Console()
    for source, groups in results:
        root = Tree(Text(f"source: {source!r}"), guide_style="dim")
        for group in groups:
            _add_group(root, group)
        console.print(root, highlight=False)


def _add_group(parent: Tree, group: Group) -> None:
    pending = [(parent.add(_group_label(group)), group)]
    while pending:
        branch, node = pending.pop()
        for child in node:
            if child.is_leaf:
                branch.add(_leaf_label(child))
            else:
                pending.append((branch.add(_group_label(child)), child))


# Labels never wrap; deep guides can leave them no width at all
def _group_label(group: Group) -> Text:
    return Text(f"Group ({len(group)})", style="bold", no_wrap=True)


def _leaf_label(leaf: Leaf) -> Text:
    if isinstance(leaf.unit, Identifier):
        return Text(f"Identifier {leaf.unit.text}", no_wrap=True)
    return Text(f"Number {leaf.unit.value!r}", no_wrap=True)
