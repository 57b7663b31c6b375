#!/usr/bin/env python3
"""
main.py

Launch the sub-theme color overview for a built-in theme or a theme file.

Usage:
    python main.py                          # built-in theme from SWATCH_THEME (default: light)
    python main.py --theme dark
    python main.py --theme my_theme.yaml --background "#FAFAFA"
    python main.py --theme dark --dump      # print the swatch table, no GUI
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from config.settings import SWATCH_THEME
from config.theme import ThemeRegistry
from config.theme_schema import ThemeSettings
from services.sub_theme_resolver import resolve_swatches, surface_contrast_warning
from services.swatch_report import format_swatch_json, format_swatch_table
from utils.color_utils import Color, parse_color
from utils.error_helpers import ColorParseError, ThemeConfigError, safe_call
from utils.logger import get_logger, setup_debug_logging


log = get_logger(__name__)

EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subtheme-swatches",
        description="Show the effective color of each component sub-theme as labeled swatches",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --theme dark
  %(prog)s --theme my_theme.json --background "#FAFAFA"
  %(prog)s --theme light --dump --format json
        """,
    )
    parser.add_argument(
        "--theme",
        "-t",
        default=SWATCH_THEME,
        help=f"Built-in theme ({', '.join(ThemeRegistry.list_available())}) or JSON/YAML theme file "
        f"(default: {SWATCH_THEME})",
    )
    parser.add_argument(
        "--background",
        "-b",
        default=None,
        help="Exact color the cards are drawn on (default: the theme's card color)",
    )
    parser.add_argument("--dump", action="store_true", help="Print the resolved swatches and exit (no GUI)")
    parser.add_argument(
        "--format", "-f", choices=["text", "json"], default="text", help="Output format for --dump (default: text)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def _load_inputs(args: argparse.Namespace) -> tuple[ThemeSettings, Optional[Color]]:
    theme = ThemeRegistry.resolve(args.theme)
    background = parse_color(args.background) if args.background else None
    return theme, background


def dump(theme: ThemeSettings, background: Optional[Color], fmt: str = "text") -> str:
    swatches = resolve_swatches(theme, background)
    if fmt == "json":
        return format_swatch_json(swatches)
    out = [f"Theme: {theme.name} ({theme.color_scheme.brightness})", format_swatch_table(swatches)]
    warning = surface_contrast_warning(theme, background)
    if warning:
        out.append(f"[WARNING] {warning}")
    return "\n".join(out)


def run_gui(theme: ThemeSettings, background: Optional[Color]) -> int:
    from PyQt6 import QtWidgets

    from widgets.sub_theme_colors import ShowSubThemeColors

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)

    win = QtWidgets.QMainWindow()
    win.setWindowTitle(f"Sub-theme colors - {theme.name}")
    win.resize(720, 520)

    central = QtWidgets.QWidget(win)
    lay = QtWidgets.QVBoxLayout(central)

    panel = ShowSubThemeColors(theme, on_background=background)

    picker = QtWidgets.QComboBox(central)
    picker.addItems(ThemeRegistry.list_available())
    if theme.name in ThemeRegistry.list_available():
        picker.setCurrentText(theme.name)
    else:
        picker.insertItem(0, theme.name)
        picker.setCurrentIndex(0)

    def _on_pick(name: str) -> None:
        if name in ThemeRegistry.list_available():
            ThemeRegistry.set_active(name)
            panel.set_theme(ThemeRegistry.get_active())
            win.setWindowTitle(f"Sub-theme colors - {name}")

    picker.currentTextChanged.connect(lambda name: safe_call(_on_pick, name))

    scroll = QtWidgets.QScrollArea(central)
    scroll.setWidgetResizable(True)
    scroll.setWidget(panel)

    lay.addWidget(picker)
    lay.addWidget(scroll, 1)
    win.setCentralWidget(central)
    win.show()
    return app.exec()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        setup_debug_logging(True)

    try:
        ThemeRegistry.compile_all()
        theme, background = _load_inputs(args)
    except (ThemeConfigError, ColorParseError) as e:
        log.error(f"[main] {e}")
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_USAGE

    if args.dump:
        print(dump(theme, background, args.format))
        return 0

    return run_gui(theme, background)


if __name__ == "__main__":
    sys.exit(main())
