"""Shared utilities for CLI commands."""

from __future__ import annotations

import sys
import traceback
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from sexptree.exceptions import SexpTreeError

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ["SAMPLE_INPUTS", "format_error", "print_error", "get_error_console", "read_sources"]

# Inputs shown when no expression or file is given
SAMPLE_INPUTS = [
    "(123  456  world)",
    "((car cdr) cdr)",
    "()())))((()))",
]

# Module-level console for error output, created lazily
_error_console: Console | None = None


def get_error_console() -> Console:
    """Get or create the Rich console for error output.

    Returns a console configured for stderr with appropriate settings.
    The console is created lazily and cached for reuse.
    """
    global _error_console
    if _error_console is None:
        from rich.console import Console

        _error_console = Console(stderr=True, force_terminal=None)
    return _error_console


def print_error(
    e: Exception,
    verbose: bool = False,
    use_rich: bool | None = None,
) -> None:
    """
    Print an exception with Rich formatting when available.

    Uses the Rich console on TTY terminals and falls back to plain text
    for pipes and captured output.

    Args:
        e: The exception to print
        verbose: If True, include full stack trace
        use_rich: Override automatic TTY detection (None = auto-detect)
    """
    console = get_error_console()

    if use_rich is None:
        use_rich = console.is_terminal

    if verbose:
        # Always use plain text for stack traces
        print(traceback.format_exc(), file=sys.stderr)
        return

    if use_rich and isinstance(e, SexpTreeError):
        console.print(f"[bold red]Error:[/bold red] {type(e).__name__}", highlight=False)
        console.print(str(e), markup=False, highlight=False)
    else:
        print(format_error(e), file=sys.stderr)


def format_error(e: Exception) -> str:
    """Format an exception for plain-text display."""
    if isinstance(e, SexpTreeError):
        return f"Error: {e}"
    return f"Error: {type(e).__name__}: {e}"


def read_sources(expr: Optional[str], file: Optional[str]) -> List[str]:
    """
    Collect the inputs a command should process.

    An expression argument is used as-is. A file contributes one input per
    non-blank line, since newlines are not whitespace to the lexer. With
    neither, the built-in samples are used.

    Raises:
        FileNotFoundError: If ``file`` does not exist
    """
    if expr is not None:
        return [expr]
    if file is not None:
        path = Path(file)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {file}")
        lines = path.read_text(encoding="utf-8").splitlines()
        return [line for line in lines if line.strip()]
    return list(SAMPLE_INPUTS)
