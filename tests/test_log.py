"""Tests for logging of silent truncation."""

import logging

import pytest

from sexptree.builder import parse
from sexptree.cli import main
from sexptree.log import configure_logging


class TestTruncationLogging:
    """Compatibility mode logs what it silently drops."""

    def test_unexpected_character_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="sexptree")
        parse("(a #)")
        assert "No lexical unit matches '#' at offset 3" in caplog.text

    def test_rejected_number_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="sexptree")
        parse("(1.2.3)")
        assert "Rejected number literal '1.2.3'" in caplog.text

    def test_stray_close_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="sexptree")
        parse("())")
        assert "Unmatched ')' at offset 2" in caplog.text

    def test_implicit_close_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="sexptree")
        parse("((a")
        assert "Closing 2 open group(s)" in caplog.text

    def test_balanced_input_logs_nothing(self, caplog):
        caplog.set_level(logging.DEBUG, logger="sexptree")
        parse("((car cdr) cdr)")
        assert caplog.records == []


class TestConfigureLogging:
    """Tests for configure_logging."""

    def stream_handlers(self):
        logger = logging.getLogger("sexptree")
        return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]

    def test_verbose_adds_single_handler(self):
        configure_logging(verbose=True)
        configure_logging(verbose=True)
        assert len(self.stream_handlers()) == 1
        assert logging.getLogger("sexptree.lexer").level == logging.DEBUG
        assert logging.getLogger("sexptree.builder").level == logging.DEBUG

    def test_quiet_restores_defaults(self):
        configure_logging(verbose=True)
        configure_logging(verbose=False)
        assert self.stream_handlers() == []
        assert logging.getLogger("sexptree").level == logging.WARNING
        assert logging.getLogger("sexptree.lexer").level == logging.NOTSET

    def test_single_module(self, capsys):
        configure_logging(verbose=True, modules=["sexptree.builder"])
        parse("(1.2.3 (a")
        err = capsys.readouterr().err
        assert "[DEBUG] sexptree.builder: Closing" in err
        assert "sexptree.lexer" not in err

    def test_unknown_module(self):
        with pytest.raises(ValueError, match="sexptree.config"):
            configure_logging(verbose=True, modules=["sexptree.config"])

    def test_parse_verbose_flag(self, capsys):
        result = main(["parse", "(a #)", "--format", "json", "-v"])
        assert result == 0
        assert "[DEBUG] sexptree.lexer" in capsys.readouterr().err

    def test_tokens_verbose_shows_lexer_only(self, capsys):
        result = main(["tokens", "(a #)", "--format", "json", "-v"])
        assert result == 0

        err = capsys.readouterr().err
        assert "No lexical unit matches '#'" in err
        assert "sexptree.builder" not in err
