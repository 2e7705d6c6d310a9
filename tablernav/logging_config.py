"""Logging setup for the tablernav command line."""

from __future__ import annotations

import logging
import sys
from typing import Optional

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def parse_log_level(name: str, default: int = logging.WARNING) -> int:
    """Map a level name such as ``"debug"`` or ``"20"`` to a logging level.

    Unknown names fall back to ``default``.
    """

    text = (name or "").strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.WARNING, handler: Optional[logging.Handler] = None) -> None:
    """Install a single formatted handler on the root logger.

    Rendered markup goes to stdout, so the default handler writes to
    ``sys.stderr``. Handlers installed by earlier calls are removed.
    """

    root_logger = logging.getLogger()
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


__all__ = ["configure_logging", "parse_log_level"]
