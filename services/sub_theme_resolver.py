"""
services/sub_theme_resolver.py

Resolves the effective color of each themed component from a ThemeSettings.

Every component reads its own sub-theme setting first and falls back to a
role color from the color scheme (or a theme-level color) when unset. The
label text color of each swatch is then chosen against the background the
cards are painted on.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeVar

from config.theme_schema import ThemeSettings
from utils.color_utils import BLACK, WHITE, Color
from utils.contrast import Brightness, contrast_ratio, estimate_brightness, resolve_text_color
from utils.logger import get_logger


log = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Swatch:
    """One labeled color card: what to paint and which text color to put on it."""

    label: str
    color: Color
    text_color: Color

    @property
    def display_label(self) -> str:
        """Label on one line (card labels wrap words onto separate lines)."""
        return " ".join(self.label.split())


def first_present(*candidates: Optional[T], default: T) -> T:
    """Return the first candidate that is not None, else default."""
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return default


def effective_background(theme: ThemeSettings, on_background: Optional[Color] = None) -> Color:
    """
    Color the swatches are drawn on.

    Translucent swatches are blended with this before judging text contrast.
    Without an explicit color the cards are assumed to sit on card color.
    """
    return first_present(on_background, theme.card.color, default=theme.card_color)


def _role_colors(theme: ThemeSettings) -> list[tuple[str, Color]]:
    scheme = theme.color_scheme
    is_dark = theme.is_dark

    focus = theme.input_decoration.focus_color
    # Focus color is usually a faint overlay; the panel shows its opaque hue.
    input_decorator = focus.with_alpha(0xFF) if focus is not None else None

    return [
        ("Elevated\nButton", first_present(theme.elevated_button.background_color, default=scheme.primary)),
        ("Outlined\nButton", first_present(theme.outlined_button.foreground_color, default=scheme.primary)),
        ("Text\nButton", first_present(theme.text_button.foreground_color, default=scheme.primary)),
        ("Toggle\nButtons", first_present(theme.toggle_buttons.color, default=scheme.primary)),
        ("Switch", first_present(theme.switch.thumb_color, default=theme.toggleable_active_color)),
        ("Checkbox", first_present(theme.checkbox.fill_color, default=theme.toggleable_active_color)),
        ("Radio", first_present(theme.radio.fill_color, default=theme.toggleable_active_color)),
        (
            "Floating\nAction\nButton",
            first_present(theme.floating_action_button.background_color, default=scheme.secondary),
        ),
        ("Chips", first_present(theme.chip.background_color, default=scheme.primary)),
        ("Input\nDecorator", first_present(input_decorator, default=scheme.primary)),
        ("Tooltip", first_present(theme.tooltip.color, default=scheme.surface)),
        (
            "AppBar",
            first_present(
                theme.app_bar.background_color, default=scheme.surface if is_dark else scheme.primary
            ),
        ),
        (
            "TabBar\nitem",
            first_present(theme.tab_bar.label_color, default=scheme.on_surface if is_dark else scheme.on_primary),
        ),
        ("TabBar\nIndicator", theme.indicator_color),
        ("Dialog\nBackground", first_present(theme.dialog.background_color, default=theme.dialog_background_color)),
        (
            "Bottom\nNavigationBar\nbackground",
            first_present(theme.bottom_navigation_bar.background_color, default=scheme.background),
        ),
        (
            "Bottom\nNavigationBar\nselected",
            first_present(theme.bottom_navigation_bar.selected_item_color, default=scheme.primary),
        ),
        (
            "Navigation\nBar\nbackground",
            first_present(theme.navigation_bar.background_color, default=scheme.background),
        ),
        (
            "Navigation\nBar\nselected",
            first_present(theme.navigation_bar.selected_icon_color, default=scheme.primary),
        ),
        (
            "Navigation\nBar\nindicator",
            first_present(theme.navigation_bar.indicator_color, default=scheme.primary),
        ),
        (
            "Navigation\nRail\nbackground",
            first_present(theme.navigation_rail.background_color, default=scheme.background),
        ),
        (
            "Navigation\nRail\nselected",
            first_present(theme.navigation_rail.selected_icon_color, default=scheme.primary),
        ),
        (
            "Navigation\nRail\nindicator",
            first_present(theme.navigation_rail.indicator_color, default=scheme.primary),
        ),
    ]


def resolve_swatches(theme: ThemeSettings, on_background: Optional[Color] = None) -> list[Swatch]:
    """
    Resolve all component swatches, in display order.

    Args:
        theme: Validated theme
        on_background: Exact color the cards are drawn on, if known

    Returns:
        One Swatch per component role
    """
    background = effective_background(theme, on_background)
    swatches = [
        Swatch(label=label, color=color, text_color=resolve_text_color(color, background))
        for label, color in _role_colors(theme)
    ]
    log.debug(f"[resolve_swatches] theme={theme.name} background={background} swatches={len(swatches)}")
    return swatches


def surface_contrast_warning(theme: ThemeSettings, on_background: Optional[Color] = None) -> Optional[str]:
    """
    Warn when surface branding is strong enough to flip the expected text color.

    A dark theme normally puts light text on its surfaces and a light theme puts
    dark text on them. If the effective background says otherwise, text that
    follows the theme mode will be hard to read.
    """
    surface = effective_background(theme, on_background).with_alpha(0xFF)
    brightness = estimate_brightness(surface)
    # Text color the theme mode implies for its surfaces
    mode_text = WHITE if theme.is_dark else BLACK
    ratio = contrast_ratio(surface, mode_text)
    if theme.is_dark and brightness is Brightness.LIGHT:
        return (
            f"Surface is too light for a dark theme: light text only reaches {ratio:.1f}:1 contrast, "
            "it needs dark text instead."
        )
    if not theme.is_dark and brightness is Brightness.DARK:
        return (
            f"Surface is too dark for a light theme: dark text only reaches {ratio:.1f}:1 contrast, "
            "it needs light text instead."
        )
    return None


__all__ = [
    "Swatch",
    "first_present",
    "effective_background",
    "resolve_swatches",
    "surface_contrast_warning",
]
