"""
services/__init__.py

Package export surface for services layer.
"""

from .sub_theme_resolver import (
    Swatch,
    effective_background,
    first_present,
    resolve_swatches,
    surface_contrast_warning,
)
from .swatch_report import format_swatch_json, format_swatch_table, swatch_rows
