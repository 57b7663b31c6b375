# -------------------- config/theme.py (start)
# File: config/theme.py
# Built-in themes and the theme registry.
# Supports: light | dark built-ins, or any JSON/YAML theme file

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from config.theme_schema import ThemeSettings, load_theme_file, parse_theme
from utils.error_helpers import ThemeConfigError
from utils.logger import get_logger


log = get_logger(__name__)


# ========================================================================
# BASE COLOR SCHEMES
# ========================================================================
_LIGHT_SCHEME: dict[str, str] = {
    "brightness": "light",
    "primary": "#6200EE",
    "on_primary": "#FFFFFF",
    "secondary": "#03DAC6",
    "surface": "#FFFFFF",
    "on_surface": "#000000",
    "background": "#FFFFFF",
}

_DARK_SCHEME: dict[str, str] = {
    "brightness": "dark",
    "primary": "#BB86FC",
    "on_primary": "#000000",
    "secondary": "#03DAC6",
    "surface": "#121212",
    "on_surface": "#FFFFFF",
    "background": "#121212",
}


# ========================================================================
# COMPONENT SUB-THEME LAYERS
# ========================================================================
# Only a subset of components is themed; the rest show their fallback role color.
_LIGHT_SUB_THEMES: dict[str, Any] = {
    "toggleable_active_color": "#6200EE",
    "switch": {"thumb_color": "#03DAC6"},
    "chip": {"background_color": "rgba(98, 0, 238, 0.12)"},
    "input_decoration": {"focus_color": "#1F6200EE"},
    "tooltip": {"color": "#E6616161"},
    "navigation_bar": {
        "background_color": "#F3EDF7",
        "indicator_color": "rgba(98, 0, 238, 0.24)",
    },
    "navigation_rail": {"indicator_color": "oklch(85% 0.08 300)"},
    "card": {"border_radius": 12},
}

_DARK_SUB_THEMES: dict[str, Any] = {
    "toggleable_active_color": "#BB86FC",
    "floating_action_button": {"background_color": "#03DAC6"},
    "chip": {"background_color": "rgba(187, 134, 252, 0.16)"},
    "tooltip": {"color": "#E6FFFFFF"},
    "app_bar": {"background_color": "#1F1B24"},
    "bottom_navigation_bar": {"background_color": "#1E1E1E"},
    "navigation_bar": {"indicator_color": "rgba(187, 134, 252, 0.32)"},
    "card": {"color": "#1E1E1E", "border_radius": 12},
}

_BUILTIN_LAYERS: dict[str, tuple[dict[str, str], dict[str, Any]]] = {
    "light": (_LIGHT_SCHEME, _LIGHT_SUB_THEMES),
    "dark": (_DARK_SCHEME, _DARK_SUB_THEMES),
}


# ========================================================================
# THEME COMPILER
# ========================================================================
def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries, with override taking precedence.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def compile_theme(mode: str, overrides: dict | None = None) -> ThemeSettings:
    """
    Compile a built-in theme, optionally with raw overrides merged on top.

    Args:
        mode: One of "light" or "dark"
        overrides: Raw theme mapping merged over the built-in layers

    Returns:
        Validated ThemeSettings
    """
    mode = mode.lower().strip()
    if mode not in _BUILTIN_LAYERS:
        raise ThemeConfigError(mode, f"unknown built-in theme (available: {', '.join(_BUILTIN_LAYERS)})")

    scheme, sub_themes = _BUILTIN_LAYERS[mode]
    raw: dict[str, Any] = {"name": mode, "color_scheme": dict(scheme)}
    raw = deep_merge(raw, sub_themes)
    if overrides:
        raw = deep_merge(raw, overrides)
    return parse_theme(raw, source=f"builtin:{mode}")


# ========================================================================
# THEME REGISTRY (Centralized theme management)
# ========================================================================
class ThemeRegistry:
    """
    Centralized theme registry.
    Compiles and caches the built-in themes, hands out copies, and resolves
    a theme argument that may be either a built-in name or a file path.
    """

    _themes: dict[str, ThemeSettings] = {}
    _active_mode: str = "light"

    @classmethod
    def compile_all(cls) -> None:
        """Pre-compile all built-in themes."""
        for mode in cls.list_available():
            cls._themes[mode] = compile_theme(mode)

    @classmethod
    def get(cls, mode: str) -> ThemeSettings:
        """
        Get a copy of the compiled built-in theme.

        Raises:
            ThemeConfigError: unknown theme name
        """
        mode = mode.lower().strip()
        if mode not in cls._themes:
            cls._themes[mode] = compile_theme(mode)
        return cls._themes[mode].model_copy(deep=True)

    @classmethod
    def get_active(cls) -> ThemeSettings:
        """Get the currently active built-in theme."""
        return cls.get(cls._active_mode)

    @classmethod
    def set_active(cls, mode: str) -> None:
        """Set the active built-in theme; validates the name first."""
        cls.get(mode)
        cls._active_mode = mode.lower().strip()
        log.info(f"[ThemeRegistry] Active theme set to {cls._active_mode}")

    @classmethod
    def list_available(cls) -> list[str]:
        """List all built-in theme names."""
        return list(_BUILTIN_LAYERS)

    @classmethod
    def resolve(cls, name_or_path: Union[str, Path]) -> ThemeSettings:
        """
        Resolve a built-in theme name or a JSON/YAML theme file path.

        Raises:
            ThemeConfigError: unknown name, or a file that fails to load
        """
        text = str(name_or_path).strip()
        if text.lower() in _BUILTIN_LAYERS:
            return cls.get(text)
        path = Path(text)
        if path.suffix.lower() in (".json", ".yaml", ".yml") or path.exists():
            return load_theme_file(path)
        raise ThemeConfigError(
            text, f"not a built-in theme ({', '.join(cls.list_available())}) or a theme file"
        )


# -------------------- config/theme.py (end)
