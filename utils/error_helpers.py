from __future__ import annotations

# File: utils/error_helpers.py
# Error types and handling helpers
import traceback
from typing import Optional

from utils.logger import get_logger


log = get_logger(__name__)


class SwatchError(Exception):
    """Base class for all errors raised by the swatch panel."""


class ColorParseError(SwatchError, ValueError):
    """A value could not be interpreted as a color."""

    def __init__(self, value: object, reason: Optional[str] = None):
        self.value = value
        self.reason = reason
        msg = f"Cannot parse color from {value!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ThemeConfigError(SwatchError):
    """A theme configuration could not be loaded or validated."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")


def log_exception(context: str, exc: Exception, verbose: bool = True) -> None:
    """
    Record exceptions consistently across the app.
    """
    log.error(f"[Error] {context}: {exc}")
    if verbose:
        tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        log.debug(tb)


def safe_call(func, *args, **kwargs):
    """
    Execute a callable safely, logging any exceptions without interrupting flow.
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        log_exception(getattr(func, "__name__", repr(func)), e)
        return None
