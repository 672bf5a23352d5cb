"""Logging setup for entry points.

Library code only calls ``structlog.get_logger``; the API and CLI call
``configure_logging`` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolved per logger so a replaced sys.stderr is picked up.
    return structlog.PrintLogger(sys.stderr)


def configure_logging(level: str = "INFO") -> None:
    """Filter log events below level and write them to stderr."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        logger_factory=_stderr_logger,
    )
