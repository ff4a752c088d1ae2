"""
Command-line interface for sexptree.

Provides CLI commands via the `sexptree` command:

    sexptree parse [EXPR]     - Parse S-expressions and print the tree
    sexptree tokens [EXPR]    - List lexical units
    sexptree config           - Show or initialize configuration

Examples:
    sexptree parse "((car cdr) cdr)"
    sexptree parse "(123  456 world)" --format json
    sexptree parse "()())))((()))" --all --format repr
    sexptree parse "(a" --strict
    sexptree tokens "(1.5 x)"
    sexptree config --show
"""

import argparse
from typing import List, Optional

from sexptree import __version__
from sexptree.config import OUTPUT_FORMATS

__all__ = ["main", "parse_main", "tokens_main", "config_main"]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for sexptree CLI."""
    parser = argparse.ArgumentParser(
        prog="sexptree",
        description="S-expression tokenizer and tree builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"sexptree {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse subcommand
    parse_parser = subparsers.add_parser("parse", help="Parse S-expressions into a tree")
    parse_parser.add_argument("expr", nargs="?", help="S-expression text to parse")
    parse_parser.add_argument("--file", "-f", help="Read expressions from a file, one per line")
    parse_parser.add_argument("--strict", action="store_true", help="Report malformed input")
    parse_parser.add_argument("--max-depth", type=int, help="Maximum nesting depth")
    parse_parser.add_argument(
        "--all", dest="parse_all", action="store_true", help="Keep parsing after a stray ')'"
    )
    parse_parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format")
    parse_parser.add_argument("-v", "--verbose", action="store_true")

    # Tokens subcommand
    tokens_parser = subparsers.add_parser("tokens", help="List lexical units")
    tokens_parser.add_argument("expr", nargs="?", help="S-expression text to tokenize")
    tokens_parser.add_argument("--file", "-f", help="Read expressions from a file, one per line")
    tokens_parser.add_argument("--strict", action="store_true", help="Report malformed input")
    tokens_parser.add_argument("--format", choices=["table", "json"], default="table")
    tokens_parser.add_argument("-v", "--verbose", action="store_true")

    # Config subcommand
    config_parser = subparsers.add_parser("config", help="Show or initialize configuration")
    config_group = config_parser.add_mutually_exclusive_group()
    config_group.add_argument("--show", action="store_true", help="Show effective configuration")
    config_group.add_argument("--init", action="store_true", help="Create template config file")
    config_group.add_argument("--paths", action="store_true", help="Show config file paths")
    config_parser.add_argument("--user", action="store_true", help="Use user config for --init")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "parse":
        sub_argv = _source_argv(args)
        if args.max_depth is not None:
            sub_argv.extend(["--max-depth", str(args.max_depth)])
        if args.parse_all:
            sub_argv.append("--all")
        if args.format:
            sub_argv.extend(["--format", args.format])
        return parse_main(_with_expr(sub_argv, args))

    elif args.command == "tokens":
        sub_argv = _source_argv(args)
        if args.format != "table":
            sub_argv.extend(["--format", args.format])
        return tokens_main(_with_expr(sub_argv, args))

    elif args.command == "config":
        sub_argv = []
        if args.show:
            sub_argv.append("--show")
        if args.init:
            sub_argv.append("--init")
        if args.paths:
            sub_argv.append("--paths")
        if args.user:
            sub_argv.append("--user")
        return config_main(sub_argv)

    return 1


def _source_argv(args: argparse.Namespace) -> List[str]:
    """Arguments shared by the parse and tokens commands."""
    sub_argv = []
    if args.file:
        sub_argv.extend(["--file", args.file])
    if args.strict:
        sub_argv.append("--strict")
    if args.verbose:
        sub_argv.append("--verbose")
    return sub_argv


def _with_expr(sub_argv: List[str], args: argparse.Namespace) -> List[str]:
    """Append the expression last; "--" keeps input such as "-3" from being read as an option."""
    if args.expr is not None:
        sub_argv.extend(["--", args.expr])
    return sub_argv


def parse_main(argv: Optional[List[str]] = None) -> int:
    from .parse_cmd import main as parse_cmd

    return parse_cmd(argv)


def tokens_main(argv: Optional[List[str]] = None) -> int:
    from .tokens_cmd import main as tokens_cmd

    return tokens_cmd(argv)


def config_main(argv: Optional[List[str]] = None) -> int:
    from .config_cmd import main as config_cmd

    return config_cmd(argv)
