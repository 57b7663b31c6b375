# File: widgets/sub_theme_colors.py
"""
ShowSubThemeColors: overview of the effective color of every component
sub-theme, drawn as a wrapping grid of labeled color cards.

Some component colors are translucent. To pick a legible label color for
those, the panel needs the exact background the cards are drawn on; when the
parent does not pass one, card color is assumed, which is usually close enough.
"""
from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore, QtWidgets
import structlog

from config.settings import CARD_RADIUS_DEFAULT
from config.theme_schema import ThemeSettings
from services.sub_theme_resolver import (
    Swatch,
    effective_background,
    resolve_swatches,
    surface_contrast_warning,
)
from utils.color_utils import Color, to_hex, to_qss
from utils.contrast import resolve_text_color
from utils.theme_mixin import ThemeAwareMixin
from widgets.color_card import ColorCard
from widgets.flow_layout import FlowLayout


log = structlog.get_logger(__name__)

TITLE = "Component sub-themes color overview"
SUBTITLE = (
    "Color settings are controlled in each component's settings panel. "
    "This shows default or selected ColorScheme based used themed color for each component."
)


class ShowSubThemeColors(QtWidgets.QWidget, ThemeAwareMixin):
    """
    Diagnostic panel for a theme's component colors.

    Public API:
        - set_theme(theme) -> None
        - set_on_background(color) -> None
        - swatches() -> list[Swatch]
        - cards() -> list[ColorCard]
    """

    def __init__(
        self,
        theme: ThemeSettings,
        on_background: Optional[Color] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._theme = theme
        self._on_background = on_background
        self._swatches: list[Swatch] = []
        self._cards: list[ColorCard] = []

        self.setObjectName("ShowSubThemeColors")
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_StyledBackground, True)
        self._build()
        self._populate()
        self._setup_theme()

    # --- construction ---
    def _build(self) -> None:
        lay = QtWidgets.QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.setSpacing(6)

        self.lbl_title = QtWidgets.QLabel(TITLE, self)
        title_font = self.lbl_title.font()
        title_font.setPixelSize(16)
        self.lbl_title.setFont(title_font)

        self.lbl_subtitle = QtWidgets.QLabel(SUBTITLE, self)
        self.lbl_subtitle.setWordWrap(True)

        self.lbl_warning = QtWidgets.QLabel("", self)
        self.lbl_warning.setWordWrap(True)
        self.lbl_warning.setVisible(False)

        self.cards_host = QtWidgets.QWidget(self)
        self.flow = FlowLayout(self.cards_host)

        lay.addWidget(self.lbl_title)
        lay.addWidget(self.lbl_subtitle)
        lay.addWidget(self.lbl_warning)
        lay.addWidget(self.cards_host, 1)

    def _card_radius(self) -> int:
        radius = self._theme.card.border_radius
        return CARD_RADIUS_DEFAULT if radius is None else radius

    def _populate(self) -> None:
        self.flow.clear()
        self._cards = []
        self._swatches = resolve_swatches(self._theme, self._on_background)

        for swatch in self._swatches:
            card = ColorCard(
                swatch.label,
                swatch.color,
                swatch.text_color,
                border_color=self._theme.divider_color,
                radius=self._card_radius(),
                parent=self.cards_host,
            )
            self.flow.addWidget(card)
            self._cards.append(card)

        self._update_warning()
        log.info(
            "sub_theme_colors.populated",
            theme=self._theme.name,
            cards=len(self._cards),
            background=to_hex(self.background()),
        )

    def _update_warning(self) -> None:
        warning = surface_contrast_warning(self._theme, self._on_background)
        self.lbl_warning.setText(warning or "")
        self.lbl_warning.setVisible(warning is not None)

    # --- ThemeAwareMixin hooks ---
    def _build_theme_stylesheet(self) -> str:
        return f"""
            QWidget#ShowSubThemeColors {{
                background: {to_qss(self.background())};
            }}
        """

    def _get_theme_children(self) -> list:
        return list(self._cards)

    def _on_theme_refresh(self) -> None:
        background = self.background()
        # Header text sits directly on the background, so it gets the same rule as the cards
        ink = resolve_text_color(background, background)
        self.lbl_title.setStyleSheet(f"color: {to_qss(ink)};")
        self.lbl_subtitle.setStyleSheet(f"color: {to_qss(ink)};")
        self.lbl_warning.setStyleSheet(f"color: {to_qss(ink)}; font-weight: 600; font-style: italic;")

    # --- Public API ---
    def background(self) -> Color:
        return effective_background(self._theme, self._on_background)

    def theme(self) -> ThemeSettings:
        return self._theme

    def swatches(self) -> list[Swatch]:
        return list(self._swatches)

    def cards(self) -> list[ColorCard]:
        return list(self._cards)

    def set_theme(self, theme: ThemeSettings) -> None:
        """Show a different theme; all cards are rebuilt."""
        self._theme = theme
        self._populate()
        self.refresh_theme()

    def set_on_background(self, color: Optional[Color]) -> None:
        """Change the background the cards are assumed to sit on; recolors labels in place."""
        self._on_background = color
        self._swatches = resolve_swatches(self._theme, color)
        for card, swatch in zip(self._cards, self._swatches):
            card.set_colors(swatch.color, swatch.text_color)
        self._update_warning()
        self.refresh_theme()
        log.debug("sub_theme_colors.background_changed", background=to_hex(self.background()))


__all__ = ["ShowSubThemeColors", "TITLE", "SUBTITLE"]
