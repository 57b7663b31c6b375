"""
config/theme_schema.py

Pydantic models for theme configuration files.

A theme is a color scheme plus optional per-component sub-theme settings.
Every sub-theme color is optional: a missing value means "use the component's
default role color", which services/sub_theme_resolver.py resolves.

Color fields accept anything utils.color_utils.parse_color accepts:
    "#RRGGBB", "#AARRGGBB" (ARGB), "rgb(r, g, b)", "rgba(r, g, b, a)",
    "oklch(L% C H)", "transparent", 0xAARRGGBB ints and (r, g, b[, a]) lists.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, ValidationError, model_validator
import yaml

from utils.color_utils import Color, parse_color
from utils.error_helpers import ThemeConfigError
from utils.logger import get_logger


log = get_logger(__name__)

ThemeColor = Annotated[Color, PlainValidator(parse_color)]


class _SubTheme(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)


# ==================== Color scheme ====================


class ColorSchemeSettings(_SubTheme):
    """Base role colors every component falls back to."""

    brightness: Literal["light", "dark"] = "light"
    primary: ThemeColor
    on_primary: ThemeColor
    secondary: ThemeColor
    surface: ThemeColor
    on_surface: ThemeColor
    background: ThemeColor


# ==================== Component sub-themes ====================


class ElevatedButtonTheme(_SubTheme):
    background_color: Optional[ThemeColor] = None


class OutlinedButtonTheme(_SubTheme):
    foreground_color: Optional[ThemeColor] = None


class TextButtonTheme(_SubTheme):
    foreground_color: Optional[ThemeColor] = None


class ToggleButtonsTheme(_SubTheme):
    color: Optional[ThemeColor] = None


class FloatingActionButtonTheme(_SubTheme):
    background_color: Optional[ThemeColor] = None


class SwitchTheme(_SubTheme):
    # Selected-state thumb color
    thumb_color: Optional[ThemeColor] = None


class CheckboxTheme(_SubTheme):
    # Selected-state fill color
    fill_color: Optional[ThemeColor] = None


class RadioTheme(_SubTheme):
    # Selected-state fill color
    fill_color: Optional[ThemeColor] = None


class ChipTheme(_SubTheme):
    background_color: Optional[ThemeColor] = None


class InputDecorationTheme(_SubTheme):
    focus_color: Optional[ThemeColor] = None


class TooltipTheme(_SubTheme):
    color: Optional[ThemeColor] = None


class AppBarTheme(_SubTheme):
    background_color: Optional[ThemeColor] = None


class TabBarTheme(_SubTheme):
    label_color: Optional[ThemeColor] = None


class DialogTheme(_SubTheme):
    background_color: Optional[ThemeColor] = None


class BottomNavigationBarTheme(_SubTheme):
    background_color: Optional[ThemeColor] = None
    selected_item_color: Optional[ThemeColor] = None


class NavigationBarTheme(_SubTheme):
    background_color: Optional[ThemeColor] = None
    selected_icon_color: Optional[ThemeColor] = None
    indicator_color: Optional[ThemeColor] = None


class NavigationRailTheme(_SubTheme):
    background_color: Optional[ThemeColor] = None
    selected_icon_color: Optional[ThemeColor] = None
    indicator_color: Optional[ThemeColor] = None


class CardTheme(_SubTheme):
    color: Optional[ThemeColor] = None
    border_radius: Optional[int] = Field(default=None, ge=0)


# ==================== Theme ====================


class ThemeSettings(BaseModel):
    """
    Complete theme configuration.

    Theme-level colors left out of a file are derived from the color scheme
    after validation, so they are never None on a validated instance.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    name: str = "custom"
    color_scheme: ColorSchemeSettings

    # Theme-level colors
    card_color: Optional[ThemeColor] = None
    divider_color: Optional[ThemeColor] = None
    toggleable_active_color: Optional[ThemeColor] = None
    indicator_color: Optional[ThemeColor] = None
    dialog_background_color: Optional[ThemeColor] = None

    # Component sub-themes
    elevated_button: ElevatedButtonTheme = Field(default_factory=ElevatedButtonTheme)
    outlined_button: OutlinedButtonTheme = Field(default_factory=OutlinedButtonTheme)
    text_button: TextButtonTheme = Field(default_factory=TextButtonTheme)
    toggle_buttons: ToggleButtonsTheme = Field(default_factory=ToggleButtonsTheme)
    floating_action_button: FloatingActionButtonTheme = Field(default_factory=FloatingActionButtonTheme)
    switch: SwitchTheme = Field(default_factory=SwitchTheme)
    checkbox: CheckboxTheme = Field(default_factory=CheckboxTheme)
    radio: RadioTheme = Field(default_factory=RadioTheme)
    chip: ChipTheme = Field(default_factory=ChipTheme)
    input_decoration: InputDecorationTheme = Field(default_factory=InputDecorationTheme)
    tooltip: TooltipTheme = Field(default_factory=TooltipTheme)
    app_bar: AppBarTheme = Field(default_factory=AppBarTheme)
    tab_bar: TabBarTheme = Field(default_factory=TabBarTheme)
    dialog: DialogTheme = Field(default_factory=DialogTheme)
    bottom_navigation_bar: BottomNavigationBarTheme = Field(default_factory=BottomNavigationBarTheme)
    navigation_bar: NavigationBarTheme = Field(default_factory=NavigationBarTheme)
    navigation_rail: NavigationRailTheme = Field(default_factory=NavigationRailTheme)
    card: CardTheme = Field(default_factory=CardTheme)

    @model_validator(mode="after")
    def _fill_theme_defaults(self) -> ThemeSettings:
        scheme = self.color_scheme
        if self.card_color is None:
            self.card_color = scheme.surface
        if self.divider_color is None:
            # 12% on-surface, the usual hairline divider
            self.divider_color = scheme.on_surface.with_alpha(0x1F)
        if self.toggleable_active_color is None:
            self.toggleable_active_color = scheme.secondary
        if self.indicator_color is None:
            self.indicator_color = scheme.on_surface if self.is_dark else scheme.on_primary
        if self.dialog_background_color is None:
            self.dialog_background_color = scheme.surface
        return self

    @property
    def is_dark(self) -> bool:
        return self.color_scheme.brightness == "dark"


# ==================== Loading ====================


def parse_theme(data: Any, source: str = "<theme>") -> ThemeSettings:
    """Validate a raw mapping into ThemeSettings, raising ThemeConfigError on failure."""
    if not isinstance(data, dict):
        raise ThemeConfigError(source, f"expected a mapping at top level, got {type(data).__name__}")
    try:
        return ThemeSettings.model_validate(data)
    except ValidationError as e:
        raise ThemeConfigError(source, f"invalid theme configuration\n{e}") from e


def load_theme_file(path: Union[str, Path]) -> ThemeSettings:
    """
    Load a theme from a JSON or YAML file.

    Raises:
        ThemeConfigError: unreadable file, malformed JSON/YAML or schema violation
    """
    path = Path(path)
    source = str(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ThemeConfigError(source, f"cannot read file ({e.strerror or e})") from e
    except UnicodeDecodeError as e:
        raise ThemeConfigError(source, f"file is not valid UTF-8 ({e.reason} at byte {e.start})") from e

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ThemeConfigError(source, f"malformed {path.suffix.lstrip('.') or 'theme'} file: {e}") from e

    if isinstance(data, dict):
        data.setdefault("name", path.stem)
    theme = parse_theme(data, source)
    log.info(f"[load_theme_file] Loaded theme '{theme.name}' from {source}")
    return theme


__all__ = [
    "ThemeColor",
    "ColorSchemeSettings",
    "ThemeSettings",
    "parse_theme",
    "load_theme_file",
]
