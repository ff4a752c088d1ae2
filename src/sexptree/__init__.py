"""
sexptree: S-expression tokenizer and tree builder.

Reads parenthesized lists of identifiers and numbers and produces a nested
tree of Leaf and Group nodes. Nothing is evaluated.

Modules:
    lexer: Cursor and lexical units (identifier, number, parentheses)
    tree: Leaf and Group nodes
    builder: Recursive-descent tree builder with strict and compatibility modes
    config: TOML configuration loading
    cli: Command-line interface

Quick Start::

    from sexptree import parse, tokenize

    tree = parse("((car cdr) cdr)")
    tree[0][0][1].value    # 'cdr'
    tree.to_python()       # [[['car', 'cdr'], 'cdr']]

    tokenize("(123 world)")
    # [OpenParen(), Number(123.0), Identifier('world'), CloseParen()]

    parse("(a", strict=True)  # raises UnterminatedGroupError
"""

__version__ = "0.1.0"

from sexptree.builder import DEFAULT_MAX_DEPTH, TreeBuilder, build, parse, parse_all
from sexptree.exceptions import (
    InvalidNumberError,
    NestingDepthError,
    ParseError,
    SexpTreeError,
    UnbalancedParenError,
    UnexpectedCharacterError,
    UnterminatedGroupError,
)
from sexptree.lexer import (
    CloseParen,
    Cursor,
    Identifier,
    LexicalUnit,
    Number,
    OpenParen,
    iter_tokens,
    next_token,
    tokenize,
)
from sexptree.tree import Group, Leaf, Node

__all__ = [
    # Version
    "__version__",
    # Lexer
    "Cursor",
    "Identifier",
    "Number",
    "OpenParen",
    "CloseParen",
    "LexicalUnit",
    "next_token",
    "iter_tokens",
    "tokenize",
    # Tree
    "Leaf",
    "Group",
    "Node",
    # Builder
    "DEFAULT_MAX_DEPTH",
    "TreeBuilder",
    "build",
    "parse",
    "parse_all",
    # Errors
    "SexpTreeError",
    "ParseError",
    "InvalidNumberError",
    "UnexpectedCharacterError",
    "UnbalancedParenError",
    "UnterminatedGroupError",
    "NestingDepthError",
]
