"""Tests for the exception hierarchy."""

import pytest

from sexptree.exceptions import (
    InvalidNumberError,
    NestingDepthError,
    ParseError,
    SexpTreeError,
    UnbalancedParenError,
    UnexpectedCharacterError,
    UnterminatedGroupError,
)


class TestSexpTreeError:
    """Tests for message formatting."""

    def test_message_only(self):
        err = SexpTreeError("Something failed")
        assert str(err) == "Something failed"
        assert err.context == {}
        assert err.suggestions == []

    def test_context_and_suggestions(self):
        err = SexpTreeError(
            "Something failed",
            context={"input": "(a"},
            suggestions=["Try again"],
        )
        text = str(err)
        assert "Context:\n  input: (a" in text
        assert "Suggestions:\n  - Try again" in text


class TestParseError:
    """Tests for position handling."""

    def test_position_in_context(self):
        err = ParseError("Bad", offset=4, line=2, column=1)
        assert err.offset == 4
        assert err.context == {"offset": 4, "line": 2, "column": 1}

    def test_explicit_context_wins(self):
        err = ParseError("Bad", context={"offset": "custom"}, offset=4)
        assert err.context["offset"] == "custom"
        assert err.offset == 4

    def test_no_position(self):
        err = ParseError("Bad")
        assert err.offset is None
        assert err.context == {}

    @pytest.mark.parametrize(
        "error_class",
        [
            InvalidNumberError,
            UnexpectedCharacterError,
            UnbalancedParenError,
            UnterminatedGroupError,
            NestingDepthError,
        ],
    )
    def test_subclasses(self, error_class):
        err = error_class("Bad", offset=0)
        assert isinstance(err, ParseError)
        assert isinstance(err, SexpTreeError)
