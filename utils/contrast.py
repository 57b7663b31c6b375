"""
utils/contrast.py
Legible label color for a swatch drawn on a known background.

A swatch color may be translucent, so the decision is made on what is actually
visible: the swatch alpha-blended over the surface it is painted on.
"""
from __future__ import annotations

from enum import Enum

from utils.color_utils import BLACK, WHITE, Color


class Brightness(str, Enum):
    LIGHT = "light"
    DARK = "dark"


# sRGB linearization knee and Rec. 709 channel weights
_LINEAR_KNEE = 0.03928
_WEIGHTS = (0.2126, 0.7152, 0.0722)

# (L + 0.05)^2 > 0.15  <=>  L > sqrt(0.15) - 0.05
BRIGHTNESS_THRESHOLD = 0.15
LUMINANCE_CUTOFF = BRIGHTNESS_THRESHOLD ** 0.5 - 0.05


def _linearize(channel: int) -> float:
    c = channel / 0xFF
    if c <= _LINEAR_KNEE:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def alpha_blend(foreground: Color, background: Color) -> Color:
    """Composite foreground over background; the result is always opaque."""
    alpha = foreground.alpha
    if alpha == 0xFF:
        return foreground
    if alpha == 0:
        return background.with_alpha(0xFF)
    inv_alpha = 0xFF - alpha
    return Color(
        (alpha * foreground.red + inv_alpha * background.red) // 0xFF,
        (alpha * foreground.green + inv_alpha * background.green) // 0xFF,
        (alpha * foreground.blue + inv_alpha * background.blue) // 0xFF,
        0xFF,
    )


def relative_luminance(color: Color) -> float:
    """Relative luminance of the RGB channels, 0.0 (black) to 1.0 (white). Alpha is ignored."""
    r, g, b = (_linearize(c) for c in color.rgb)
    return _WEIGHTS[0] * r + _WEIGHTS[1] * g + _WEIGHTS[2] * b


def estimate_brightness(color: Color) -> Brightness:
    luminance = relative_luminance(color)
    if (luminance + 0.05) * (luminance + 0.05) > BRIGHTNESS_THRESHOLD:
        return Brightness.LIGHT
    return Brightness.DARK


def resolve_text_color(foreground: Color, background: Color) -> Color:
    """Black or white label color for foreground as seen on background."""
    visible = alpha_blend(foreground, background)
    return BLACK if estimate_brightness(visible) is Brightness.LIGHT else WHITE


def contrast_ratio(a: Color, b: Color) -> float:
    """WCAG contrast ratio (1.0 - 21.0); translucent colors are judged over white."""
    la = relative_luminance(alpha_blend(a, WHITE))
    lb = relative_luminance(alpha_blend(b, WHITE))
    hi, lo = max(la, lb), min(la, lb)
    return (hi + 0.05) / (lo + 0.05)


__all__ = [
    "Brightness",
    "BRIGHTNESS_THRESHOLD",
    "LUMINANCE_CUTOFF",
    "alpha_blend",
    "relative_luminance",
    "estimate_brightness",
    "resolve_text_color",
    "contrast_ratio",
]
