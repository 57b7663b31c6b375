# -------------------- config/settings.py (start)
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional


# -------------------- helpers --------------------
def _env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    return val if val not in ("", None) else default


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    val = os.getenv(name)
    if val in (None, ""):
        return default
    try:
        return int(val)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    return str(os.getenv(name, "1" if default else "0")).strip().lower() in ("1", "true", "yes", "on")


# --- Paths ---
HOME: str = str(Path.home())
APP_DIR: str = str(Path(HOME) / ".subtheme_swatches")

# Logs directory (used by utils/logger.py)
LOG_DIR: str = _env_str("SWATCH_LOG_DIR", str(Path(APP_DIR) / "logs")) or str(Path(APP_DIR) / "logs")

# --- Feature flags ---
DEBUG_MODE: bool = _env_bool("DEBUG_MODE", False)
QUIET_STARTUP: bool = _env_bool("QUIET_STARTUP", False)

# Built-in theme name ("light" / "dark") or path to a JSON/YAML theme file
SWATCH_THEME: str = _env_str("SWATCH_THEME", "light") or "light"


# -------------------- JSON override loader (start)
CONFIG_JSON_PATH: Path = Path(_env_str("SWATCH_CONFIG_JSON", str(Path(APP_DIR) / "config.json")) or "")


def _load_config_json(path: Path = CONFIG_JSON_PATH) -> dict[str, Any]:
    """Load app-local override JSON if present; return {} when missing or unreadable."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}
    except FileNotFoundError:
        return {}
    except (OSError, ValueError):
        return {}


# -------------------- JSON override loader (end)

# Apply JSON overrides (JSON wins over env if key exists)
_config = _load_config_json()
if "SWATCH_THEME" in _config and isinstance(_config["SWATCH_THEME"], str) and _config["SWATCH_THEME"].strip():
    SWATCH_THEME = _config["SWATCH_THEME"].strip()
if "DEBUG_MODE" in _config and isinstance(_config["DEBUG_MODE"], bool):
    DEBUG_MODE = _config["DEBUG_MODE"]

# -------------------- Layout constants --------------------
CARD_WIDTH: int = _env_int("SWATCH_CARD_WIDTH", 86) or 86
CARD_HEIGHT: int = _env_int("SWATCH_CARD_HEIGHT", 58) or 58
CARD_RADIUS_DEFAULT: int = 4
WRAP_SPACING: int = 6
WRAP_RUN_SPACING: int = 6

# Explicit export list (useful for linters)
__all__ = [
    "HOME",
    "APP_DIR",
    "LOG_DIR",
    "DEBUG_MODE",
    "QUIET_STARTUP",
    "SWATCH_THEME",
    "CONFIG_JSON_PATH",
    "CARD_WIDTH",
    "CARD_HEIGHT",
    "CARD_RADIUS_DEFAULT",
    "WRAP_SPACING",
    "WRAP_RUN_SPACING",
]
# -------------------- config/settings.py (end)
