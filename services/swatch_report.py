"""
services/swatch_report.py

Plain-text and JSON renderings of resolved swatches, for auditing a theme
without opening the GUI.
"""

from __future__ import annotations

import json

from services.sub_theme_resolver import Swatch
from utils.color_utils import to_hex


def swatch_rows(swatches: list[Swatch]) -> list[dict[str, str]]:
    return [
        {
            "label": s.display_label,
            "color": to_hex(s.color),
            "text_color": to_hex(s.text_color),
        }
        for s in swatches
    ]


def format_swatch_table(swatches: list[Swatch]) -> str:
    """Fixed-width table: one line per swatch, label / color / text color."""
    rows = swatch_rows(swatches)
    header = {"label": "Component", "color": "Color", "text_color": "Text"}
    label_w = max(len(r["label"]) for r in [header, *rows])
    color_w = max(len(r["color"]) for r in [header, *rows])

    lines = []
    for r in [header, *rows]:
        lines.append(f"{r['label']:<{label_w}}  {r['color']:<{color_w}}  {r['text_color']}")
    lines.insert(1, "-" * len(lines[0]))
    return "\n".join(lines)


def format_swatch_json(swatches: list[Swatch], compact: bool = False) -> str:
    data = swatch_rows(swatches)
    if compact:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=2, ensure_ascii=False)


__all__ = ["swatch_rows", "format_swatch_table", "format_swatch_json"]
