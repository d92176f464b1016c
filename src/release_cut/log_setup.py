"""Logging setup for the release-cut CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(is_verbose: bool = False, console: Console | None = None) -> None:
    """Route log records through rich.

    Args:
        is_verbose: Log at DEBUG instead of WARNING
        console: Console to write to (default: stderr)
    """
    log_level = logging.DEBUG if is_verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Repeated calls (e.g. several CLI invocations in one test run) must not stack handlers
    for handler in root_logger.handlers[:]:
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)

    root_logger.addHandler(
        RichHandler(
            level=log_level,
            console=console or Console(stderr=True),
            rich_tracebacks=True,
            show_time=is_verbose,
            show_path=is_verbose,
        )
    )
