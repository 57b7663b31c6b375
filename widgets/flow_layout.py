# File: widgets/flow_layout.py
"""
Wrapping layout: places items left to right and starts a new run when the
next item does not fit. Items in a run are centered on the cross axis.
"""
from __future__ import annotations

from typing import Optional

from PyQt6 import QtCore, QtWidgets

from config.settings import WRAP_RUN_SPACING, WRAP_SPACING


class FlowLayout(QtWidgets.QLayout):
    """Wrap-style layout with fixed item spacing and run spacing."""

    def __init__(
        self,
        parent: Optional[QtWidgets.QWidget] = None,
        spacing: int = WRAP_SPACING,
        run_spacing: int = WRAP_RUN_SPACING,
    ) -> None:
        super().__init__(parent)
        self._items: list[QtWidgets.QLayoutItem] = []
        self._spacing = spacing
        self._run_spacing = run_spacing
        self.setContentsMargins(0, 0, 0, 0)

    # --- QLayout API ---
    def addItem(self, item: QtWidgets.QLayoutItem) -> None:
        self._items.append(item)

    def count(self) -> int:
        return len(self._items)

    def itemAt(self, index: int) -> Optional[QtWidgets.QLayoutItem]:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def takeAt(self, index: int) -> Optional[QtWidgets.QLayoutItem]:
        if 0 <= index < len(self._items):
            return self._items.pop(index)
        return None

    def expandingDirections(self) -> QtCore.Qt.Orientation:
        return QtCore.Qt.Orientation(0)

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        return self._do_layout(QtCore.QRect(0, 0, width, 0), test_only=True)

    def setGeometry(self, rect: QtCore.QRect) -> None:
        super().setGeometry(rect)
        self._do_layout(rect, test_only=False)

    def sizeHint(self) -> QtCore.QSize:
        return self.minimumSize()

    def minimumSize(self) -> QtCore.QSize:
        size = QtCore.QSize()
        for item in self._items:
            size = size.expandedTo(item.minimumSize())
        margins = self.contentsMargins()
        size += QtCore.QSize(margins.left() + margins.right(), margins.top() + margins.bottom())
        return size

    # --- helpers ---
    def clear(self) -> None:
        """Remove all items and schedule their widgets for deletion."""
        while self._items:
            item = self._items.pop()
            widget = item.widget()
            if widget is not None:
                widget.setParent(None)
                widget.deleteLater()
        self.invalidate()

    def _do_layout(self, rect: QtCore.QRect, test_only: bool) -> int:
        margins = self.contentsMargins()
        area = rect.adjusted(margins.left(), margins.top(), -margins.right(), -margins.bottom())

        # Split items into runs first, then place each run centered on its tallest item
        runs: list[list[tuple[QtWidgets.QLayoutItem, QtCore.QSize]]] = []
        current: list[tuple[QtWidgets.QLayoutItem, QtCore.QSize]] = []
        run_width = 0
        for item in self._items:
            hint = item.sizeHint()
            needed = hint.width() if not current else run_width + self._spacing + hint.width()
            if current and needed > area.width():
                runs.append(current)
                current, run_width = [], 0
                needed = hint.width()
            current.append((item, hint))
            run_width = needed
        if current:
            runs.append(current)

        y = area.y()
        for index, run in enumerate(runs):
            run_height = max(hint.height() for _, hint in run)
            x = area.x()
            for item, hint in run:
                if not test_only:
                    offset = (run_height - hint.height()) // 2
                    item.setGeometry(QtCore.QRect(QtCore.QPoint(x, y + offset), hint))
                x += hint.width() + self._spacing
            y += run_height
            if index < len(runs) - 1:
                y += self._run_spacing

        return y - rect.y() + margins.bottom()


__all__ = ["FlowLayout"]
