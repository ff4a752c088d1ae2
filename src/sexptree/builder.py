"""
Tree builder: turns the lexer's flat unit stream into nested Groups.

Each ``(`` opens a new Group, each ``)`` closes the current one, and
identifiers and numbers become Leaf nodes. A single call to ``build`` yields
one root Group holding everything read before the input ran out.

Compatibility mode (the default) never reports malformed input:
- an unknown character or malformed number stops the build
- a ``)`` with no open group ends the top-level group, leaving the rest unread
- groups still open at end of input are closed implicitly

Strict mode raises a ParseError subclass for each of those cases instead.
In both modes nesting deeper than ``max_depth`` raises NestingDepthError.

Usage:
    from sexptree.builder import parse, parse_all, TreeBuilder

    parse("((car cdr) cdr)")
    # Group[Group[Group[Leaf(Identifier('car')), Leaf(Identifier('cdr'))],
    #             Leaf(Identifier('cdr'))]]

    parse("(a", strict=True)  # raises UnterminatedGroupError
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from .exceptions import NestingDepthError, UnbalancedParenError, UnterminatedGroupError
from .lexer import CloseParen, Cursor, OpenParen, error_at, next_token, skip_whitespace
from .tree import Group, Leaf, Node

if TYPE_CHECKING:
    from .config import Config

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 512


@dataclass
class _Frame:
    """Children collected so far for one open parenthesis scope."""

    opener: Optional[OpenParen] = None
    children: List[Node] = field(default_factory=list)


class TreeBuilder:
    """
    Configured builder.

    Args:
        strict: Raise on malformed input instead of truncating silently
        max_depth: Maximum parenthesis nesting, or None for no limit
    """

    def __init__(self, strict: bool = False, max_depth: Optional[int] = DEFAULT_MAX_DEPTH):
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.strict = strict
        self.max_depth = max_depth

    @classmethod
    def from_config(cls, config: Config) -> TreeBuilder:
        """Create a builder from the ``[parser]`` config section (max_depth 0 = unlimited)."""
        return cls(
            strict=config.parser.strict,
            max_depth=config.parser.max_depth or None,
        )

    def build(self, cursor: Cursor) -> Tuple[Cursor, Group]:
        """
        Build one root Group starting at ``cursor``.

        Returns:
            The cursor where building stopped and the root Group.
        """
        cursor, root, _ = self._build(cursor)
        return cursor, root

    def parse(self, text: str) -> Group:
        """Build the root Group for ``text``."""
        return self.build(Cursor(text))[1]

    def parse_all(self, text: str) -> List[Group]:
        """
        Build root Groups until the input is used up.

        A single ``build`` call stops at a stray top-level ``)``; this keeps
        going with the rest of the input, one root Group per call. It stops
        once input is exhausted or the build halted on unreadable input.
        """
        groups = []
        cursor = Cursor(text)
        while True:
            cursor, root, closed_early = self._build(cursor)
            groups.append(root)
            if not closed_early or skip_whitespace(cursor).at_end:
                return groups

    def _build(self, cursor: Cursor) -> Tuple[Cursor, Group, bool]:
        # stack[0] is the root scope; one extra frame per open paren
        stack = [_Frame()]

        while not cursor.at_end:
            cursor, unit = next_token(cursor, strict=self.strict)

            if unit is None:
                logger.debug("Build stopped at offset %d: unreadable input", cursor.offset)
                break

            if isinstance(unit, OpenParen):
                if self.max_depth is not None and len(stack) > self.max_depth:
                    raise error_at(
                        NestingDepthError,
                        f"Nesting deeper than {self.max_depth} levels",
                        Cursor(cursor.text, unit.start),
                        suggestions=["Raise parser.max_depth if this input is trusted"],
                    )
                stack.append(_Frame(opener=unit))

            elif isinstance(unit, CloseParen):
                if len(stack) == 1:
                    if self.strict:
                        raise error_at(
                            UnbalancedParenError,
                            "Unexpected ')' with no matching '('",
                            Cursor(cursor.text, unit.start),
                            suggestions=["Remove the extra ')' or add a matching '('"],
                        )
                    logger.debug(
                        "Unmatched ')' at offset %d ends the top-level group", unit.start
                    )
                    return cursor, Group(stack[0].children), True
                frame = stack.pop()
                stack[-1].children.append(Group(frame.children))

            else:
                stack[-1].children.append(Leaf(unit))

        if len(stack) > 1:
            opener = stack[-1].opener
            if self.strict:
                raise error_at(
                    UnterminatedGroupError,
                    f"'(' is never closed ({len(stack) - 1} group(s) open at end of input)",
                    Cursor(cursor.text, opener.start),
                    suggestions=["Add the missing ')'"],
                )
            logger.debug(
                "Closing %d open group(s) implicitly at offset %d", len(stack) - 1, cursor.offset
            )

        return cursor, _close_open_groups(stack), False


def _close_open_groups(stack: List[_Frame]) -> Group:
    while len(stack) > 1:
        frame = stack.pop()
        stack[-1].children.append(Group(frame.children))
    return Group(stack[0].children)


def build(
    cursor: Cursor,
    strict: bool = False,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> Tuple[Cursor, Group]:
    """Build one root Group from ``cursor``; returns (remaining_cursor, group)."""
    return TreeBuilder(strict=strict, max_depth=max_depth).build(cursor)


def parse(
    text: str,
    strict: bool = False,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> Group:
    """Parse ``text`` into its root Group."""
    return TreeBuilder(strict=strict, max_depth=max_depth).parse(text)


def parse_all(
    text: str,
    strict: bool = False,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> List[Group]:
    """Parse ``text`` into one root Group per top-level build."""
    return TreeBuilder(strict=strict, max_depth=max_depth).parse_all(text)


__all__ = ["DEFAULT_MAX_DEPTH", "TreeBuilder", "build", "parse", "parse_all"]
