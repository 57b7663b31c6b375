"""
Theme-Aware Mixin - Standardized theme refresh for widgets and panels

Usage:
    from utils.theme_mixin import ThemeAwareMixin

    class MyWidget(QtWidgets.QFrame, ThemeAwareMixin):
        def __init__(self, theme):
            super().__init__()
            self._theme = theme
            self.setObjectName("MyWidget")
            self._setup_theme()

        def _build_theme_stylesheet(self) -> str:
            return f"QFrame#MyWidget {{ background: {to_qss(self._theme.card_color)}; }}"
"""

from PyQt6 import QtWidgets


class ThemeAwareMixin:
    """
    Mixin providing standardized theme refresh functionality.

    Subclasses should override:
    - _build_theme_stylesheet() - Return widget's stylesheet (most common)
    - _get_theme_children() - Return list of children to refresh (for containers)
    - _on_theme_refresh() - Custom logic after stylesheet update (optional)
    """

    def _setup_theme(self) -> None:
        """Initialize theme support (call in __init__)."""
        self.refresh_theme()

    def refresh_theme(self) -> None:
        """
        Refresh theme styling on this widget and children.

        This is the main entry point called when the theme changes.
        """
        # Step 1: Update this widget's stylesheet
        stylesheet = self._build_theme_stylesheet()
        if stylesheet and isinstance(self, QtWidgets.QWidget):
            self.setStyleSheet(stylesheet)

        # Step 2: Refresh child widgets
        for child in self._get_theme_children():
            if hasattr(child, "refresh_theme"):
                child.refresh_theme()

        # Step 3: Custom refresh logic (hook for subclasses)
        self._on_theme_refresh()

        # Step 4: Trigger repaint if this is a widget
        if isinstance(self, QtWidgets.QWidget):
            self.update()

    def _build_theme_stylesheet(self) -> str:
        """Stylesheet for this widget, or empty string if none is needed."""
        return ""

    def _get_theme_children(self) -> list:
        """Child widgets that should have refresh_theme() called."""
        return []

    def _on_theme_refresh(self) -> None:
        pass
