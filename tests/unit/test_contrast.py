"""
Unit tests for utils.contrast.

Tests alpha blending, luminance, brightness classification and the
black/white label color decision.
"""

import pytest

from utils.color_utils import BLACK, TRANSPARENT, WHITE, Color
from utils.contrast import (
    LUMINANCE_CUTOFF,
    Brightness,
    alpha_blend,
    contrast_ratio,
    estimate_brightness,
    relative_luminance,
    resolve_text_color,
)


SAMPLE_BACKGROUNDS = [
    WHITE,
    BLACK,
    Color(0x12, 0x12, 0x12),
    Color(0xF3, 0xED, 0xF7),
    Color(0x62, 0x00, 0xEE),
]


class TestAlphaBlend:
    """Test compositing a foreground over an opaque background."""

    def test_opaque_foreground_is_unchanged(self):
        """Test blending an opaque color returns it unchanged for any background."""
        fg = Color(0x62, 0x00, 0xEE)
        for bg in SAMPLE_BACKGROUNDS:
            assert alpha_blend(fg, bg) == fg

    def test_transparent_foreground_returns_background(self):
        """Test alpha 0 reduces to the (opaque) background."""
        bg = Color(0x12, 0x34, 0x56)
        assert alpha_blend(TRANSPARENT, bg) == bg
        assert alpha_blend(Color(255, 0, 0, 0), bg) == bg

    def test_background_alpha_is_ignored(self):
        """Test a translucent background is treated as opaque."""
        assert alpha_blend(TRANSPARENT, Color(10, 20, 30, 40)) == Color(10, 20, 30, 255)

    def test_half_yellow_over_white(self):
        """Test 50% yellow over white gives a pastel yellow."""
        assert alpha_blend(Color(255, 255, 0, 128), WHITE) == Color(255, 255, 127)

    def test_half_yellow_over_black(self):
        """Test channels use integer arithmetic with truncation."""
        assert alpha_blend(Color(255, 255, 0, 128), BLACK) == Color(128, 128, 0)

    def test_result_is_opaque(self):
        """Test the blended result always has full alpha."""
        assert alpha_blend(Color(10, 200, 30, 77), Color(90, 10, 250)).alpha == 255


class TestLuminance:
    """Test relative luminance and brightness classification."""

    def test_extremes(self):
        """Test black and white luminance."""
        assert relative_luminance(BLACK) == 0.0
        assert relative_luminance(WHITE) == pytest.approx(1.0)

    def test_primary_channel_weights(self):
        """Test each pure channel returns its weight."""
        assert relative_luminance(Color(255, 0, 0)) == pytest.approx(0.2126)
        assert relative_luminance(Color(0, 255, 0)) == pytest.approx(0.7152)
        assert relative_luminance(Color(0, 0, 255)) == pytest.approx(0.0722)

    def test_alpha_ignored(self):
        """Test luminance looks at RGB only."""
        assert relative_luminance(Color(40, 80, 120, 10)) == relative_luminance(Color(40, 80, 120))

    def test_cutoff_value(self):
        """Test the light/dark luminance cutoff."""
        assert LUMINANCE_CUTOFF == pytest.approx(0.3372983, abs=1e-6)

    def test_brightness(self):
        """Test basic light/dark classification."""
        assert estimate_brightness(WHITE) is Brightness.LIGHT
        assert estimate_brightness(BLACK) is Brightness.DARK
        assert estimate_brightness(Color(255, 0, 0)) is Brightness.DARK
        assert estimate_brightness(Color(255, 255, 0)) is Brightness.LIGHT


class TestResolveTextColor:
    """Test black/white label color selection."""

    def test_white_gets_black_text(self):
        for bg in SAMPLE_BACKGROUNDS:
            assert resolve_text_color(WHITE, bg) == BLACK

    def test_black_gets_white_text(self):
        for bg in SAMPLE_BACKGROUNDS:
            assert resolve_text_color(BLACK, bg) == WHITE

    @pytest.mark.parametrize(
        "fg",
        [Color(255, 0, 0), Color(0x03, 0xDA, 0xC6), Color(0x62, 0x00, 0xEE), Color(158, 158, 158)],
    )
    def test_opaque_foreground_ignores_background(self, fg):
        """Test that once the foreground is opaque, the background does not matter."""
        results = {resolve_text_color(fg, bg) for bg in SAMPLE_BACKGROUNDS}
        assert len(results) == 1

    @pytest.mark.parametrize("bg", SAMPLE_BACKGROUNDS)
    def test_transparent_foreground_judges_background(self, bg):
        """Test a fully transparent swatch is judged on the background alone."""
        fg = Color(0xFF, 0x00, 0x00, 0x00)
        assert resolve_text_color(fg, bg) == resolve_text_color(bg, bg)

    def test_threshold_boundary(self):
        """Test luminances just below/above the cutoff map to different text colors."""
        below = Color(157, 157, 157)
        above = Color(158, 158, 158)
        assert relative_luminance(below) < LUMINANCE_CUTOFF < relative_luminance(above)
        assert resolve_text_color(below, WHITE) == WHITE
        assert resolve_text_color(above, WHITE) == BLACK

    def test_opaque_red_on_white(self):
        """Test opaque red gets white text."""
        assert resolve_text_color(Color(255, 0, 0, 255), WHITE) == WHITE

    def test_half_yellow_on_white(self):
        """Test 50% yellow over white gets black text."""
        assert resolve_text_color(Color(255, 255, 0, 128), WHITE) == BLACK

    def test_translucent_depends_on_background(self):
        """Test a faint black tint flips with the surface it sits on."""
        tint = Color(0, 0, 0, 0x20)
        assert resolve_text_color(tint, WHITE) == BLACK
        assert resolve_text_color(tint, BLACK) == WHITE

    def test_results_are_opaque(self):
        assert resolve_text_color(Color(1, 2, 3, 4), WHITE).alpha == 255


class TestContrastRatio:
    """Test WCAG contrast ratio."""

    def test_black_white(self):
        assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)

    def test_symmetric(self):
        a, b = Color(0x62, 0x00, 0xEE), Color(0x03, 0xDA, 0xC6)
        assert contrast_ratio(a, b) == pytest.approx(contrast_ratio(b, a))

    def test_same_color(self):
        assert contrast_ratio(Color(10, 20, 30), Color(10, 20, 30)) == pytest.approx(1.0)

    def test_translucent_judged_over_white(self):
        """Test a transparent color has no contrast against white."""
        assert contrast_ratio(TRANSPARENT, WHITE) == pytest.approx(1.0)
