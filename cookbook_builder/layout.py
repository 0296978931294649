"""
Layout constants for the cookbook PDF.

Page geometry, line advances and typography live here so the engine and the
renderer read them from one place. Units are millimetres on an A4 page with
the origin at the top-left corner. Values are loaded from
config/cookbook.defaults.yml and may be overridden by a user YAML file.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict

from .models import TextStyle


@dataclass(frozen=True)
class LayoutConfig:
    page_width: float = 210.0
    page_height: float = 297.0

    margin_left: float = 20.0
    indent: float = 25.0
    top_margin: float = 20.0
    content_start: float = 40.0
    recipe_start_threshold: float = 250.0
    bottom_threshold: float = 280.0
    wrap_width: float = 170.0

    cover_title_y: float = 80.0
    cover_name_y: float = 100.0
    cover_date_y: float = 120.0
    legacy_title_y: float = 40.0
    legacy_notes_y: float = 55.0

    title_advance: float = 10.0
    version_advance: float = 10.0
    label_advance: float = 8.0
    line_advance: float = 6.0
    section_gap: float = 5.0
    step_gap: float = 2.0

    cover_title_size: float = 32.0
    cover_name_size: float = 24.0
    cover_date_size: float = 14.0
    section_size: float = 24.0
    title_size: float = 18.0
    body_size: float = 12.0

    font_normal: str = "Times-Roman"
    font_bold: str = "Times-Bold"
    font_italic: str = "Times-Italic"

    @property
    def center_x(self) -> float:
        return self.page_width / 2

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "LayoutConfig":
        """
        Build from the YAML shape: one level of sections whose keys are joined
        with the section name, e.g. ``cover: {title_y: 80}`` -> ``cover_title_y``.
        Top-level scalars map straight onto fields. Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            if isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    name = _SECTION_ALIASES.get(key, {}).get(sub_key, f"{key}_{sub_key}")
                    if name in known:
                        values[name] = sub_value
            elif key in known:
                values[key] = value
        return cls(**values)


# YAML sections whose keys don't follow the "<section>_<key>" naming
_SECTION_ALIASES: Dict[str, Dict[str, str]] = {
    "page": {"width": "page_width", "height": "page_height"},
    "margins": {
        "left": "margin_left",
        "indent": "indent",
        "top": "top_margin",
        "content_start": "content_start",
        "recipe_start_threshold": "recipe_start_threshold",
        "bottom_threshold": "bottom_threshold",
    },
    "advance": {
        "title": "title_advance",
        "version": "version_advance",
        "label": "label_advance",
        "line": "line_advance",
        "section_gap": "section_gap",
        "step_gap": "step_gap",
    },
    "sizes": {
        "cover_title": "cover_title_size",
        "cover_name": "cover_name_size",
        "cover_date": "cover_date_size",
        "section": "section_size",
        "title": "title_size",
        "body": "body_size",
    },
    "fonts": {"normal": "font_normal", "bold": "font_bold", "italic": "font_italic"},
}


def build_styles(config: LayoutConfig) -> Dict[TextStyle, str]:
    """
    Return the font name used for each semantic text style.
    """
    return {
        TextStyle.NORMAL: config.font_normal,
        TextStyle.BOLD: config.font_bold,
        TextStyle.ITALIC: config.font_italic,
    }


__all__ = ["LayoutConfig", "build_styles"]
