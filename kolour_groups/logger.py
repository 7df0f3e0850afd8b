"""
Logging setup for Kolour Groups.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
LOG_PATH_ENV = "KOLOUR_GROUPS_LOG"


def configure(log_path: Optional[Path] = None) -> None:
    """
    Configure loguru for the extension.

    Console output is always kept. A rotating file sink is added only when a
    path is given explicitly or through ``KOLOUR_GROUPS_LOG``.
    """
    global _LOG_INITIALISED
    if _LOG_INITIALISED:
        return

    _logger.remove()
    if sys.stderr is not None:
        _logger.add(sys.stderr, level="INFO")

    target = log_path
    if target is None and os.environ.get(LOG_PATH_ENV):
        target = Path(os.environ[LOG_PATH_ENV])
    if target is not None:
        target.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            target,
            level="DEBUG",
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
        )
    _LOG_INITIALISED = True


def get_logger():
    """Return the shared logger instance."""
    configure()
    return _logger
