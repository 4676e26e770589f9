"""
Structured Logging — Rich console for dev, JSON file for production.

Provides a unified logging setup with colored, timestamped output
via the Rich library and optional JSON-structured file logging.

Usage:
    import logging

    from shorts_planner.core.logging import setup_logging

    setup_logging()
    log = logging.getLogger(__name__)
    log.info("Plan delivered", extra={"provenance": "model"})
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED = False


def setup_logging(level: int | str = logging.INFO, log_file: str | Path | None = None) -> None:
    """Configure application-wide logging.

    Safe to call more than once; only the first call installs handlers.

    Args:
        level: Logging level or level name (default: INFO).
        log_file: Optional path for JSON file logging.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root = logging.getLogger()
    root.setLevel(level)

    # stderr keeps stdout free for JSON output
    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=True,
        show_path=False,
        markup=False,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler.setLevel(level)
    root.addHandler(console_handler)

    # Optional JSON file handler for production
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                '{"time": "%(asctime)s", "level": "%(levelname)s", '
                '"logger": "%(name)s", "message": "%(message)s"}',
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        file_handler.setLevel(level)
        root.addHandler(file_handler)

    _CONFIGURED = True

