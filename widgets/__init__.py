# widgets/__init__.py
"""
Expose the custom widgets used by the sub-theme color overview.
"""
from .color_card import ColorCard
from .flow_layout import FlowLayout
from .sub_theme_colors import ShowSubThemeColors
