"""
Custom exception hierarchy for sexptree.

Compatibility-mode parsing never raises for malformed input; these errors are
raised by strict mode, by the nesting depth guard, and by the CLI layer.
All exceptions include:
- Context information (offset, line, column, offending text)
- Suggestions for how to fix the input
- Clear, formatted error messages

Example::

    from sexptree.exceptions import UnbalancedParenError

    raise UnbalancedParenError(
        "Unexpected ')' with no matching '('",
        offset=4,
        line=1,
        column=5,
        suggestions=["Remove the extra ')'"],
    )
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class SexpTreeError(Exception):
    """
    Base exception for all sexptree errors.

    Provides consistent formatting with context and suggestions.

    Attributes:
        context: Dictionary of contextual information (offset, line, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ParseError(SexpTreeError):
    """
    S-expression parsing failed at a known position.

    Example::

        raise ParseError(
            "Unexpected character '#'",
            offset=3,
            line=1,
            column=4,
            suggestions=["Only identifiers, numbers and parentheses are allowed"],
        )

    Attributes:
        offset: 0-based character offset into the source text
        line: 1-based line number
        column: 1-based column number
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        offset: Optional[int] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.offset = offset
        self.line = line
        self.column = column

        # Build context from convenience parameters
        ctx = context or {}
        if offset is not None and "offset" not in ctx:
            ctx["offset"] = offset
        if line is not None and "line" not in ctx:
            ctx["line"] = line
        if column is not None and "column" not in ctx:
            ctx["column"] = column

        super().__init__(message, ctx, suggestions)


class InvalidNumberError(ParseError):
    """
    A numeric-looking run of characters is not a valid float literal.

    Raised in strict mode for input such as ``1.2.3`` or a lone ``-``.
    """

    pass


class UnexpectedCharacterError(ParseError):
    """
    A character matches none of the lexical categories.

    Raised in strict mode for symbols outside the alphabet, tabs, newlines, etc.
    """

    pass


class UnbalancedParenError(ParseError):
    """A ``)`` appeared with no matching ``(``."""

    pass


class UnterminatedGroupError(ParseError):
    """Input ended while one or more groups were still open."""

    pass


class NestingDepthError(ParseError):
    """
    Parenthesis nesting exceeded the configured maximum depth.

    Raised in both strict and compatibility mode so that adversarial input
    cannot grow the builder's stack without bound.
    """

    pass


__all__ = [
    "SexpTreeError",
    "ParseError",
    "InvalidNumberError",
    "UnexpectedCharacterError",
    "UnbalancedParenError",
    "UnterminatedGroupError",
    "NestingDepthError",
]
