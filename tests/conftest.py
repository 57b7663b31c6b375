"""
Test Configuration

Pytest fixtures shared by the test suite.
Widget tests use pytest-qt's qapp/qtbot fixtures on the offscreen platform.
"""
from __future__ import annotations

import os
from pathlib import Path
import sys
import tempfile


# Must be set before any PyQt6 / config import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("SWATCH_LOG_DIR", tempfile.mkdtemp(prefix="swatch_logs_"))
os.environ.setdefault("SWATCH_CONFIG_JSON", str(Path(tempfile.gettempdir()) / "swatch_no_config.json"))

import pytest  # noqa: E402


# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


# ============================================================================
# THEMES
# ============================================================================


@pytest.fixture
def light_theme():
    """Built-in light theme (fresh copy per test)."""
    from config.theme import ThemeRegistry

    return ThemeRegistry.get("light")


@pytest.fixture
def dark_theme():
    """Built-in dark theme (fresh copy per test)."""
    from config.theme import ThemeRegistry

    return ThemeRegistry.get("dark")


@pytest.fixture
def bare_theme():
    """Theme with only a color scheme: every component uses its fallback."""
    from config.theme_schema import parse_theme

    return parse_theme(
        {
            "name": "bare",
            "color_scheme": {
                "brightness": "light",
                "primary": "#1565C0",
                "on_primary": "#FFFFFF",
                "secondary": "#FF6F00",
                "surface": "#FAFAFA",
                "on_surface": "#212121",
                "background": "#F5F5F5",
            },
        }
    )


@pytest.fixture
def theme_file(tmp_path):
    """Factory writing a raw theme mapping to a JSON or YAML file."""
    import json

    import yaml

    def _write(data: dict, suffix: str = ".json") -> Path:
        path = tmp_path / f"theme{suffix}"
        if suffix in (".yaml", ".yml"):
            path.write_text(yaml.safe_dump(data), encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
