"""
Logging setup for sexptree.

Compatibility-mode parsing never raises on malformed input. Instead the
lexer logs each rejected number literal and unreadable character, and the
builder logs each stray ')' and each group it closes at end of input, all at
DEBUG level under their own module loggers:

    sexptree.lexer
    sexptree.builder

configure_logging() routes those records to stderr for one or both modules.
"""

import logging
from typing import Iterable

PACKAGE_LOGGER = "sexptree"
TRUNCATION_LOGGERS = ("sexptree.lexer", "sexptree.builder")
DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_logger = logging.getLogger(PACKAGE_LOGGER)
_logger.addHandler(logging.NullHandler())  # Default: no output


def configure_logging(
    verbose: bool = False,
    modules: Iterable[str] = TRUNCATION_LOGGERS,
    level: str = "DEBUG",
    fmt: str = DEFAULT_FORMAT,
) -> None:
    """Show or hide truncation records on stderr.

    Args:
        verbose: If False, remove any stderr handler and restore defaults
        modules: Module loggers to open up to ``level``; the rest of the
            package stays at WARNING
        level: Logging level name for ``modules``
        fmt: Format string for the stderr handler

    Example:
        configure_logging(True, modules=["sexptree.lexer"])
        tokenize("(a #)")  # logs where the lexer stopped
        configure_logging(False)
    """
    for handler in _logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)
    for name in TRUNCATION_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)
    _logger.setLevel(logging.WARNING)

    if not verbose:
        return

    for name in modules:
        if name not in TRUNCATION_LOGGERS:
            raise ValueError(f"Unknown module logger: {name}")
        logging.getLogger(name).setLevel(level.upper())

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    _logger.addHandler(handler)
