# -------------------- logger (start)
"""
utils/logger.py
Unified logger for the swatch panel: handles console + file output with rotation,
respects DEBUG_MODE from config/settings.py, and provides a standard
get_logger() accessor for all modules and services.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os
import sys

from config.settings import DEBUG_MODE, LOG_DIR, QUIET_STARTUP


class SafeRotatingFileHandler(RotatingFileHandler):
    """RotatingFileHandler that keeps writing when rotation is blocked.

    Windows file locking can prevent rotation; in that case the current file
    keeps growing until the next rollover attempt.
    """

    def doRollover(self) -> None:
        try:
            super().doRollover()
        except PermissionError:
            pass
        except OSError as e:
            if "being used by another process" not in str(e):
                raise


def _init_logger_system() -> None:
    """Initializes global logging handlers (console + rotating file)."""
    if getattr(_init_logger_system, "_initialized", False):
        return

    # QUIET_STARTUP mode: suppress DEBUG logs, only show INFO+
    log_level = logging.INFO if QUIET_STARTUP else (logging.DEBUG if DEBUG_MODE else logging.INFO)

    fmt = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt, datefmt)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    try:
        os.makedirs(LOG_DIR, exist_ok=True)
        log_path = os.path.join(LOG_DIR, "app.log")
        file_handler = SafeRotatingFileHandler(
            log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8", delay=True
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)
    except OSError as e:
        # Read-only home or sandboxed run: keep going with console output only
        log_path = None
        print(f"[Logger] File logging disabled: {e}", file=sys.stderr)

    # Console handler - only in DEBUG mode (and not in quiet mode)
    if DEBUG_MODE and not QUIET_STARTUP:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(log_level)
        root_logger.addHandler(console_handler)
        print(f"[Logger] Initialized ({logging.getLevelName(log_level)}) -> {log_path}", file=sys.stderr)

    _init_logger_system._initialized = True


def get_logger(name: str = "subtheme_swatches") -> logging.Logger:
    """
    Returns a module-scoped logger.
    Example:
        log = get_logger(__name__)
        log.info("Hello from module")
    """
    _init_logger_system()
    return logging.getLogger(name)


def setup_debug_logging(enabled: bool = False) -> None:
    """
    Globally elevate log level to DEBUG if enabled=True.
    Useful for runtime toggles (e.g. --verbose).
    """
    _init_logger_system()
    root = logging.getLogger()
    new_level = logging.DEBUG if enabled else logging.INFO
    root.setLevel(new_level)
    for h in root.handlers:
        h.setLevel(new_level)


# -------------------- logger (end)
