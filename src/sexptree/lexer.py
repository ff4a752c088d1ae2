"""
Lexer for sexptree S-expressions.

Turns a Cursor over the source text into classified lexical units:

    (car 12.5 -3)
    → OpenParen, Identifier("car"), Number(12.5), Number(-3.0), CloseParen

Categories are tried in a fixed order (identifier, number, open-paren,
close-paren) after skipping spaces. Only the space character counts as
whitespace. In the default compatibility mode nothing here raises: a number
that fails to parse is treated as "no number here", and an unknown character
simply yields no unit. Pass ``strict=True`` to turn both cases into errors.

Usage:
    from sexptree.lexer import Cursor, next_token, tokenize

    tokenize("(a 1)")
    # [OpenParen(), Identifier('a'), Number(1.0), CloseParen()]

    cursor, unit = next_token(Cursor("  abc def"))
    cursor.remaining  # " def"
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Type, Union

from .exceptions import InvalidNumberError, ParseError, UnexpectedCharacterError

logger = logging.getLogger(__name__)

WHITESPACE = " "
LETTERS = frozenset(string.ascii_letters)
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits)
NUMBER_START = frozenset("+-." + string.digits)
NUMBER_CHARS = frozenset("." + string.digits)


@dataclass(frozen=True)
class Cursor:
    """
    Immutable view over the unconsumed part of the source text.

    Advancing returns a new Cursor; ``remaining`` is always a suffix of
    ``text``.
    """

    text: str
    offset: int = 0

    def __post_init__(self):
        if not 0 <= self.offset <= len(self.text):
            raise ValueError(f"Cursor offset {self.offset} outside text of length {len(self.text)}")

    @property
    def remaining(self) -> str:
        """The unconsumed input."""
        return self.text[self.offset :]

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self) -> Optional[str]:
        """Return the current character, or None at end of input."""
        if self.at_end:
            return None
        return self.text[self.offset]

    def advance(self, count: int = 1) -> Cursor:
        """Return a cursor moved forward by ``count`` characters."""
        return Cursor(self.text, min(self.offset + count, len(self.text)))

    def advance_while(self, chars: frozenset) -> Cursor:
        """Return a cursor moved past the longest run of characters in ``chars``."""
        end = self.offset
        length = len(self.text)
        while end < length and self.text[end] in chars:
            end += 1
        return Cursor(self.text, end)

    def span_to(self, other: Cursor) -> str:
        """Text consumed between this cursor and a later one."""
        return self.text[self.offset : other.offset]

    def location(self) -> Tuple[int, int]:
        """1-based (line, column) of the current offset."""
        line = self.text.count("\n", 0, self.offset) + 1
        line_start = self.text.rfind("\n", 0, self.offset) + 1
        return line, self.offset - line_start + 1

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset}, remaining={self.remaining!r})"


@dataclass(frozen=True)
class Identifier:
    """An identifier: one ASCII letter followed by ASCII letters or digits."""

    text: str
    start: int = field(default=0, compare=False)

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    def __repr__(self) -> str:
        return f"Identifier({self.text!r})"


@dataclass(frozen=True)
class Number:
    """A numeric literal, stored as a float along with its source text."""

    value: float
    text: str = field(default="", compare=False)
    start: int = field(default=0, compare=False)

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


@dataclass(frozen=True)
class OpenParen:
    start: int = field(default=0, compare=False)

    @property
    def end(self) -> int:
        return self.start + 1

    def __repr__(self) -> str:
        return "OpenParen()"


@dataclass(frozen=True)
class CloseParen:
    start: int = field(default=0, compare=False)

    @property
    def end(self) -> int:
        return self.start + 1

    def __repr__(self) -> str:
        return "CloseParen()"


LexicalUnit = Union[Identifier, Number, OpenParen, CloseParen]

# Result of a single match attempt: the cursor to continue from and the unit, if any
MatchResult = Tuple[Cursor, Optional[LexicalUnit]]


def error_at(
    error_class: Type[ParseError],
    message: str,
    cursor: Cursor,
    suggestions: Optional[List[str]] = None,
) -> ParseError:
    """Build a ParseError subclass positioned at ``cursor``."""
    line, column = cursor.location()
    return error_class(
        message,
        offset=cursor.offset,
        line=line,
        column=column,
        suggestions=suggestions,
    )


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip consecutive space characters (tabs and newlines are not whitespace)."""
    while cursor.peek() == WHITESPACE:
        cursor = cursor.advance()
    return cursor


def match_identifier(cursor: Cursor) -> MatchResult:
    """Match ``[A-Za-z][A-Za-z0-9]*`` at the cursor."""
    if cursor.peek() not in LETTERS:
        return cursor, None
    after = cursor.advance().advance_while(IDENTIFIER_CHARS)
    return after, Identifier(cursor.span_to(after), start=cursor.offset)


def match_number(cursor: Cursor, strict: bool = False) -> MatchResult:
    """
    Match a number at the cursor.

    The first character must be a sign, a dot or a digit and is consumed
    unconditionally; any run of digits and dots follows. The captured text
    must be accepted by ``float()``. When it is not, the match fails and the
    original cursor is returned, unless ``strict`` is set.

    Raises:
        InvalidNumberError: In strict mode, when the captured text is not a
            valid float literal.
    """
    if cursor.peek() not in NUMBER_START:
        return cursor, None

    after = cursor.advance().advance_while(NUMBER_CHARS)
    text = cursor.span_to(after)

    try:
        value = float(text)
    except ValueError:
        if strict:
            raise error_at(
                InvalidNumberError,
                f"Invalid number literal {text!r}",
                cursor,
                suggestions=["Numbers need at least one digit and at most one decimal point"],
            ) from None
        logger.debug("Rejected number literal %r at offset %d", text, cursor.offset)
        return cursor, None

    return after, Number(value, text=text, start=cursor.offset)


def match_open_paren(cursor: Cursor) -> MatchResult:
    if cursor.peek() != "(":
        return cursor, None
    return cursor.advance(), OpenParen(start=cursor.offset)


def match_close_paren(cursor: Cursor) -> MatchResult:
    if cursor.peek() != ")":
        return cursor, None
    return cursor.advance(), CloseParen(start=cursor.offset)


def next_token(cursor: Cursor, strict: bool = False) -> MatchResult:
    """
    Read the next lexical unit after any leading spaces.

    Returns:
        ``(cursor_after_unit, unit)`` on a match, otherwise
        ``(whitespace_trimmed_cursor, None)``.

    Raises:
        InvalidNumberError: strict mode, malformed number.
        UnexpectedCharacterError: strict mode, character outside every category.
    """
    trimmed = skip_whitespace(cursor)

    # Fixed priority: identifier, number, open-paren, close-paren
    after, unit = match_identifier(trimmed)
    if unit is None:
        after, unit = match_number(trimmed, strict=strict)
    if unit is None:
        after, unit = match_open_paren(trimmed)
    if unit is None:
        after, unit = match_close_paren(trimmed)

    if unit is None and not trimmed.at_end:
        if strict:
            raise error_at(
                UnexpectedCharacterError,
                f"Unexpected character {trimmed.peek()!r}",
                trimmed,
                suggestions=[
                    "Only identifiers, numbers, parentheses and spaces are allowed",
                ],
            )
        logger.debug(
            "No lexical unit matches %r at offset %d", trimmed.peek(), trimmed.offset
        )

    return after, unit


def iter_tokens(text: str, strict: bool = False) -> Iterator[LexicalUnit]:
    """Yield lexical units from ``text`` until input ends or nothing matches."""
    cursor = Cursor(text)
    while not cursor.at_end:
        cursor, unit = next_token(cursor, strict=strict)
        if unit is None:
            break
        yield unit


def tokenize(text: str, strict: bool = False) -> List[LexicalUnit]:
    """Split ``text`` into a flat list of lexical units."""
    return list(iter_tokens(text, strict=strict))


__all__ = [
    "Cursor",
    "Identifier",
    "Number",
    "OpenParen",
    "CloseParen",
    "LexicalUnit",
    "skip_whitespace",
    "match_identifier",
    "match_number",
    "match_open_paren",
    "match_close_paren",
    "next_token",
    "iter_tokens",
    "tokenize",
]
