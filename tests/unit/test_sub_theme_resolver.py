"""
Unit tests for services.sub_theme_resolver.

Tests the fallback chains, background selection and per-swatch text color.
"""

import pytest

from config.theme_schema import parse_theme
from services.sub_theme_resolver import (
    effective_background,
    first_present,
    resolve_swatches,
    surface_contrast_warning,
)
from utils.color_utils import BLACK, WHITE, Color
from utils.contrast import contrast_ratio


EXPECTED_LABELS = [
    "Elevated Button",
    "Outlined Button",
    "Text Button",
    "Toggle Buttons",
    "Switch",
    "Checkbox",
    "Radio",
    "Floating Action Button",
    "Chips",
    "Input Decorator",
    "Tooltip",
    "AppBar",
    "TabBar item",
    "TabBar Indicator",
    "Dialog Background",
    "Bottom NavigationBar background",
    "Bottom NavigationBar selected",
    "Navigation Bar background",
    "Navigation Bar selected",
    "Navigation Bar indicator",
    "Navigation Rail background",
    "Navigation Rail selected",
    "Navigation Rail indicator",
]


def _theme(brightness="light", **extra):
    scheme = {
        "brightness": brightness,
        "primary": "#1565C0",
        "on_primary": "#FFFFFF",
        "secondary": "#FF6F00",
        "surface": "#FAFAFA" if brightness == "light" else "#202020",
        "on_surface": "#212121" if brightness == "light" else "#EEEEEE",
        "background": "#F5F5F5" if brightness == "light" else "#101010",
    }
    return parse_theme({"color_scheme": scheme, **extra})


def _by_label(swatches):
    return {s.display_label: s for s in swatches}


class TestFirstPresent:
    """Test the fallback chain primitive."""

    def test_first_non_none_wins(self):
        assert first_present(None, 2, 3, default=4) == 2

    def test_default_when_all_none(self):
        assert first_present(None, None, default=4) == 4
        assert first_present(default=4) == 4

    def test_falsy_values_are_present(self):
        assert first_present(0, default=4) == 0
        assert first_present("", default="x") == ""


class TestFallbacks:
    """Test each component falls back to its documented role color."""

    def test_labels_and_order(self, bare_theme):
        assert [s.display_label for s in resolve_swatches(bare_theme)] == EXPECTED_LABELS

    def test_light_fallbacks(self, bare_theme):
        scheme = bare_theme.color_scheme
        s = _by_label(resolve_swatches(bare_theme))
        for label in ("Elevated Button", "Outlined Button", "Text Button", "Toggle Buttons", "Chips"):
            assert s[label].color == scheme.primary
        for label in ("Switch", "Checkbox", "Radio"):
            assert s[label].color == bare_theme.toggleable_active_color
        assert s["Floating Action Button"].color == scheme.secondary
        assert s["Input Decorator"].color == scheme.primary
        assert s["Tooltip"].color == scheme.surface
        assert s["AppBar"].color == scheme.primary
        assert s["TabBar item"].color == scheme.on_primary
        assert s["TabBar Indicator"].color == bare_theme.indicator_color
        assert s["Dialog Background"].color == bare_theme.dialog_background_color
        for label in (
            "Bottom NavigationBar background",
            "Navigation Bar background",
            "Navigation Rail background",
        ):
            assert s[label].color == scheme.background
        for label in (
            "Bottom NavigationBar selected",
            "Navigation Bar selected",
            "Navigation Bar indicator",
            "Navigation Rail selected",
            "Navigation Rail indicator",
        ):
            assert s[label].color == scheme.primary

    def test_dark_mode_fallbacks(self):
        theme = _theme("dark")
        s = _by_label(resolve_swatches(theme))
        assert s["AppBar"].color == theme.color_scheme.surface
        assert s["TabBar item"].color == theme.color_scheme.on_surface

    def test_sub_theme_values_win(self):
        theme = _theme(
            switch={"thumb_color": "#00FF00"},
            app_bar={"background_color": "#123456"},
            dialog={"background_color": "#ABCDEF"},
            navigation_rail={"indicator_color": "#FEDCBA"},
        )
        s = _by_label(resolve_swatches(theme))
        assert s["Switch"].color == Color(0, 255, 0)
        assert s["AppBar"].color == Color(0x12, 0x34, 0x56)
        assert s["Dialog Background"].color == Color(0xAB, 0xCD, 0xEF)
        assert s["Navigation Rail indicator"].color == Color(0xFE, 0xDC, 0xBA)
        # Siblings keep their fallback
        assert s["Checkbox"].color == theme.toggleable_active_color

    def test_input_decorator_shows_opaque_focus_color(self):
        theme = _theme(input_decoration={"focus_color": "#1F6200EE"})
        s = _by_label(resolve_swatches(theme))
        assert s["Input Decorator"].color == Color(0x62, 0x00, 0xEE, 0xFF)


class TestTextColors:
    """Test each swatch's label color comes from its own color and the background."""

    def test_each_card_uses_its_own_color(self):
        theme = _theme(
            elevated_button={"background_color": "#FFFFFF"},
            outlined_button={"foreground_color": "#000000"},
        )
        s = _by_label(resolve_swatches(theme))
        assert s["Elevated Button"].text_color == BLACK
        assert s["Outlined Button"].text_color == WHITE

    def test_translucent_swatch_blends_with_background(self):
        theme = _theme(navigation_bar={"indicator_color": "#20000000"})
        on_white = _by_label(resolve_swatches(theme, WHITE))["Navigation Bar indicator"]
        on_black = _by_label(resolve_swatches(theme, BLACK))["Navigation Bar indicator"]
        assert on_white.color == on_black.color == Color(0, 0, 0, 0x20)
        assert on_white.text_color == BLACK
        assert on_black.text_color == WHITE

    def test_text_colors_are_black_or_white(self, light_theme, dark_theme):
        for theme in (light_theme, dark_theme):
            assert {s.text_color for s in resolve_swatches(theme)} <= {BLACK, WHITE}


class TestBackground:
    """Test the effective background chain."""

    def test_explicit_wins(self, bare_theme):
        assert effective_background(bare_theme, Color(1, 2, 3)) == Color(1, 2, 3)

    def test_card_sub_theme_then_card_color(self):
        assert effective_background(_theme(card={"color": "#333333"})) == Color(0x33, 0x33, 0x33)
        assert effective_background(_theme(card_color="#444444")) == Color(0x44, 0x44, 0x44)

    def test_defaults_to_surface(self, bare_theme):
        assert effective_background(bare_theme) == bare_theme.color_scheme.surface


class TestSurfaceWarning:
    """Test the reverse-contrast surface warning."""

    def test_builtins_have_no_warning(self, light_theme, dark_theme):
        assert surface_contrast_warning(light_theme) is None
        assert surface_contrast_warning(dark_theme) is None

    def test_dark_surface_in_light_theme(self, bare_theme):
        assert "too dark" in surface_contrast_warning(bare_theme, Color(0x20, 0x20, 0x20))

    def test_warning_reports_mode_text_contrast(self, bare_theme, dark_theme):
        surface = Color(0x20, 0x20, 0x20)
        ratio = contrast_ratio(surface, BLACK)
        assert f"{ratio:.1f}:1" in surface_contrast_warning(bare_theme, surface)
        # white text on a white surface
        assert "1.0:1" in surface_contrast_warning(dark_theme, WHITE)

    @pytest.mark.parametrize("surface", ["#FFFFFF", "#E0E0E0"])
    def test_light_surface_in_dark_theme(self, surface):
        theme = _theme("dark", card={"color": surface})
        assert "too light" in surface_contrast_warning(theme)
