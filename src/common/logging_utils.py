"""Logging helpers shared across the finder: setup, structured extras, timing."""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional

from constants import Constants

_STANDARD_FIELDS = ("event", "component", "action", "target", "outcome")


def configure_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Level comes from ``level``, then ``JAVAFINDER_LOG_LEVEL``, then INFO.
    Calling again only adjusts the level.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler: logging.Handler
        if logfile:
            handler = logging.FileHandler(logfile, encoding="utf-8")
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level_value)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured log records.

    ``None`` values are dropped; standard fields are always present so
    formatters can rely on them.
    """
    ctx: Dict[str, Any] = {name: None for name in _STANDARD_FIELDS}
    for key, value in fields.items():
        if value is not None:
            ctx[key] = value
    return ctx


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True if DEBUG records would be emitted by ``logger``."""
    is_enabled = getattr(logger, "isEnabledFor", None)
    if not callable(is_enabled):
        return False
    return bool(is_enabled(logging.DEBUG))


class Timer:
    """Context manager measuring wall-clock duration."""

    def __init__(self) -> None:
        self._start: Optional[float] = None
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> float:
        """Elapsed milliseconds; live value while the block is still running."""
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else time.perf_counter()
        return round((end - self._start) * 1000.0, 3)
