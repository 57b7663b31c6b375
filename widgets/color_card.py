# File: widgets/color_card.py
"""
ColorCard: a small fixed-size card filled with one color and a centered label.
"""
from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore, QtWidgets
import structlog

from config.settings import CARD_HEIGHT, CARD_RADIUS_DEFAULT, CARD_WIDTH
from utils.color_utils import Color, to_hex, to_qss
from utils.theme_mixin import ThemeAwareMixin


log = structlog.get_logger(__name__)


class ColorCard(QtWidgets.QFrame, ThemeAwareMixin):
    """Swatch card: background is the swatch color, label drawn in text_color."""

    def __init__(
        self,
        label: str,
        color: Color,
        text_color: Color,
        border_color: Optional[Color] = None,
        radius: int = CARD_RADIUS_DEFAULT,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._label = label
        self._color = color
        self._text_color = text_color
        self._border_color = border_color
        self._radius = radius

        self.setObjectName("ColorCard")
        self.setFixedSize(CARD_WIDTH, CARD_HEIGHT)
        self.setToolTip(f"{' '.join(label.split())}: {to_hex(color)}")
        self._build()
        self._setup_theme()

    def _build(self) -> None:
        lay = QtWidgets.QVBoxLayout(self)
        lay.setContentsMargins(4, 4, 4, 4)
        lay.setSpacing(0)

        self.lbl = QtWidgets.QLabel(self._label, self)
        self.lbl.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.lbl.setWordWrap(True)
        font = self.lbl.font()
        font.setPixelSize(10)
        self.lbl.setFont(font)
        lay.addWidget(self.lbl, 1)

    def _build_theme_stylesheet(self) -> str:
        border = f"1px solid {to_qss(self._border_color)}" if self._border_color is not None else "none"
        return f"""
            QFrame#ColorCard {{
                background: {to_qss(self._color)};
                border: {border};
                border-radius: {int(self._radius)}px;
            }}
        """

    def _on_theme_refresh(self) -> None:
        self.lbl.setStyleSheet(f"color: {to_qss(self._text_color)}; background: transparent; border: none;")
        log.debug("color_card.refresh", label=self._label, color=to_hex(self._color), text=to_hex(self._text_color))

    # --- Public API ---
    @property
    def label(self) -> str:
        return self._label

    @property
    def color(self) -> Color:
        return self._color

    @property
    def text_color(self) -> Color:
        return self._text_color

    def set_colors(self, color: Color, text_color: Color) -> None:
        """Repaint with a new swatch color and label color."""
        self._color = color
        self._text_color = text_color
        self.setToolTip(f"{' '.join(self._label.split())}: {to_hex(color)}")
        self.refresh_theme()


__all__ = ["ColorCard"]
