# -------------------- color_utils.py (start)
"""
utils/color_utils.py
Color value type and parsers for theme configuration values.

Theme files describe colors as hex strings (#RRGGBB or ARGB #AARRGGBB),
Qt-style rgb()/rgba() strings, OKLCH strings or 32-bit 0xAARRGGBB ints.
Everything is normalized into the immutable Color type below.
"""
from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Union

import numpy as np
from PyQt6 import QtGui

from utils.error_helpers import ColorParseError


# -------------------- Color type (start)
@dataclass(frozen=True)
class Color:
    """8-bit RGBA color. Alpha 255 is fully opaque."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ColorParseError(value, f"{name} channel must be an int in 0..255")

    @property
    def is_opaque(self) -> bool:
        return self.alpha == 0xFF

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def with_alpha(self, alpha: int) -> Color:
        return Color(self.red, self.green, self.blue, alpha)

    def to_argb32(self) -> int:
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    @classmethod
    def from_argb32(cls, value: int) -> Color:
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, (value >> 24) & 0xFF)

    def to_qcolor(self) -> QtGui.QColor:
        return QtGui.QColor(self.red, self.green, self.blue, self.alpha)

    @classmethod
    def from_qcolor(cls, qcolor: QtGui.QColor) -> Color:
        return cls(qcolor.red(), qcolor.green(), qcolor.blue(), qcolor.alpha())

    def __str__(self) -> str:
        return to_hex(self)


BLACK = Color(0x00, 0x00, 0x00)
WHITE = Color(0xFF, 0xFF, 0xFF)
TRANSPARENT = Color(0x00, 0x00, 0x00, 0x00)

ColorLike = Union[Color, QtGui.QColor, str, int, tuple, list]
# -------------------- Color type (end)


# -------------------- OKLCH -> sRGB converter (start)
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)

_LMS_TO_LINEAR_SRGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)


def oklch_to_srgb(lightness: float, chroma: float, hue: float) -> np.ndarray:
    """Convert OKLCH (L in 0-1) to gamma-encoded sRGB floats clipped to 0-1."""
    h_rad = np.deg2rad(hue)
    lab = np.array([lightness, chroma * np.cos(h_rad), chroma * np.sin(h_rad)])

    lms = (_OKLAB_TO_LMS @ lab) ** 3
    linear = np.clip(_LMS_TO_LINEAR_SRGB @ lms, 0.0, 1.0)

    return np.where(linear <= 0.0031308, 12.92 * linear, 1.055 * np.power(linear, 1.0 / 2.4) - 0.055)


# -------------------- OKLCH -> sRGB converter (end)


# -------------------- parsing (start)
_HEX_RE = re.compile(r"^#(?P<digits>[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_RE = re.compile(
    r"^rgba?\(\s*(?P<r>\d{1,3})\s*,\s*(?P<g>\d{1,3})\s*,\s*(?P<b>\d{1,3})\s*(?:,\s*(?P<a>[\d.]+%?)\s*)?\)$",
    re.IGNORECASE,
)
_OKLCH_RE = re.compile(r"^oklch\(\s*(?P<l>[\d.]+)(?P<pct>%?)\s+(?P<c>[\d.]+)\s+(?P<h>[\d.]+)\s*\)$", re.IGNORECASE)


def _parse_alpha(token: str, source: str) -> int:
    """Qt convention: integers are 0-255, decimals are 0-1, percentages 0-100%."""
    try:
        if token.endswith("%"):
            fraction = float(token[:-1]) / 100.0
        elif "." in token:
            fraction = float(token)
        else:
            value = int(token)
            if not 0 <= value <= 255:
                raise ColorParseError(source, "alpha out of range")
            return value
    except ValueError as e:
        raise ColorParseError(source, "malformed alpha") from e
    if not 0.0 <= fraction <= 1.0:
        raise ColorParseError(source, "alpha out of range")
    return int(round(fraction * 255))


def _parse_string(value: str) -> Color:
    text = value.strip()
    if text.lower() == "transparent":
        return TRANSPARENT

    match = _HEX_RE.match(text)
    if match:
        digits = match.group("digits")
        if len(digits) == 6:
            return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
        # ARGB order, same as the 32-bit theme values
        return Color.from_argb32(int(digits, 16))

    match = _RGB_RE.match(text)
    if match:
        channels = [int(match.group(k)) for k in ("r", "g", "b")]
        if any(c > 255 for c in channels):
            raise ColorParseError(value, "channel out of range")
        alpha = _parse_alpha(match.group("a"), value) if match.group("a") else 0xFF
        return Color(*channels, alpha)

    match = _OKLCH_RE.match(text)
    if match:
        lightness = float(match.group("l"))
        if match.group("pct"):
            lightness /= 100.0
        srgb = oklch_to_srgb(lightness, float(match.group("c")), float(match.group("h")))
        r, g, b = (int(round(c * 255)) for c in np.clip(srgb, 0.0, 1.0))
        return Color(r, g, b)

    raise ColorParseError(value)


def parse_color(value: ColorLike) -> Color:
    """
    Normalize any supported color representation into a Color.

    Raises:
        ColorParseError: when the value is not a recognizable color
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, QtGui.QColor):
        if not value.isValid():
            raise ColorParseError(value, "invalid QColor")
        return Color.from_qcolor(value)
    if isinstance(value, bool):
        raise ColorParseError(value)
    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ColorParseError(value, "not a 32-bit ARGB value")
        return Color.from_argb32(value)
    if isinstance(value, str):
        return _parse_string(value)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        return Color(*value)
    raise ColorParseError(value)


# -------------------- parsing (end)


# -------------------- formatting (start)
def to_hex(color: Color, include_alpha: bool | None = None) -> str:
    """#RRGGBB for opaque colors, #AARRGGBB otherwise (or when forced)."""
    if include_alpha is None:
        include_alpha = not color.is_opaque
    if include_alpha:
        return "#{:08X}".format(color.to_argb32())
    return "#{:02X}{:02X}{:02X}".format(*color.rgb)


def to_qss(color: Color) -> str:
    """Qt stylesheet form; QSS takes the alpha channel as an int 0-255."""
    return f"rgba({color.red}, {color.green}, {color.blue}, {color.alpha})"


# -------------------- formatting (end)
# -------------------- color_utils.py (end)
