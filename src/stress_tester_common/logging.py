"""Logging setup for stress tester processes.

Log output goes to stderr; stdout may carry the framed message stream.
"""

from __future__ import annotations

import logging
import sys

from stress_tester_common.config import Settings, load_settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO", *, log_file: str | None = None) -> None:
    """Configure root logging with a stderr handler and an optional file handler."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level.upper(),
        format=_FORMAT,
        handlers=handlers,
        force=True,
    )


def configure_from_settings(settings: Settings | None = None) -> Settings:
    """Configure logging from settings, loading them from the environment if absent."""
    if settings is None:
        settings = load_settings()
    configure_logging(settings.app.log_level, log_file=settings.app.log_file or None)
    return settings
