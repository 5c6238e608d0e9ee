"""Figma variable collection exporter.

Variable ids are derived from the section id and shade name, so the same
palette always produces the same ids and re-imports update variables in
place instead of duplicating them.
"""

import json
from typing import Any, Final

from colors_api.design_system.color_space import parse_color_channels
from colors_api.domain.colors import (
    ColorShade,
    ExportFormatInfo,
    ExportMode,
    ExportOptions,
    Palette,
)
from colors_api.exporters.base import (
    Exporter,
    format_section_name,
    format_token_name,
    modes_for,
)

COLLECTION_ID: Final = "VariableCollectionId:307:15216"
COLLECTION_NAME: Final = "Colors"
MODE_IDS: Final[dict[ExportMode, str]] = {
    ExportMode.LIGHT: "307:0",
    ExportMode.DARK: "3006:0",
}
MODE_NAMES: Final[dict[ExportMode, str]] = {
    ExportMode.LIGHT: "Light Mode",
    ExportMode.DARK: "Dark Mode",
}


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def string_hash(value: str) -> int:
    """32-bit signed rolling hash (``h * 31 + code``), wrapping on overflow."""
    result = 0
    for char in value:
        result = _to_int32((result << 5) - result + ord(char))
    return result


def variable_id(section: str, name: str) -> str:
    """Deterministic ``VariableID:{base}:{suffix}`` for a shade.

    ``section`` is the raw group id (``interfaceBg``), independent of the
    requested case style.
    """
    magnitude = abs(string_hash(f"{section}-{name}"))
    return f"VariableID:{magnitude % 2000 + 3000}:{magnitude % 40000 + 10000}"


def color_to_rgba(value: str) -> dict[str, float]:
    """Figma color object with channels in [0, 1].

    Values that cannot be resolved, such as ``var(--x)`` references,
    become opaque black.
    """
    channels = parse_color_channels(value)
    if channels is None:
        return {"r": 0, "g": 0, "b": 0, "a": 1}
    r, g, b, alpha = channels
    return {"r": r / 255, "g": g / 255, "b": b / 255, "a": alpha}


class FigmaExporter(Exporter):
    info = ExportFormatInfo(
        id="figma",
        name="Figma Tokens",
        description="Design tokens compatible with Figma",
        extension=".json",
        content_type="application/json",
    )

    def _variable(
        self, section: str, shade: ColorShade, options: ExportOptions
    ) -> dict[str, Any]:
        values_by_mode: dict[str, Any] = {}
        resolved_by_mode: dict[str, Any] = {}
        for mode in modes_for(options.mode):
            color = color_to_rgba(self.value(shade, mode))
            values_by_mode[MODE_IDS[mode]] = color
            resolved_by_mode[MODE_IDS[mode]] = {"resolvedValue": color, "alias": None}

        return {
            "id": variable_id(section, shade.name),
            "name": (
                f"{format_section_name(section, options.case_style)}/"
                f"{format_token_name(shade.name, options.prefix)}"
            ),
            "description": shade.description or "",
            "type": "COLOR",
            "valuesByMode": values_by_mode,
            "resolvedValuesByMode": resolved_by_mode,
            "scopes": ["ALL_SCOPES"],
            "hiddenFromPublishing": False,
            "codeSyntax": {},
        }

    def build(self, palette: Palette, options: ExportOptions) -> dict[str, Any]:
        variables = [
            self._variable(section, shade, options)
            for section, shades in palette.sections()
            for shade in shades
        ]
        return {
            "id": COLLECTION_ID,
            "name": COLLECTION_NAME,
            "modes": {MODE_IDS[mode]: MODE_NAMES[mode] for mode in modes_for(options.mode)},
            "variableIds": [variable["id"] for variable in variables],
            "variables": variables,
        }

    def render(self, palette: Palette, options: ExportOptions) -> str:
        return json.dumps(self.build(palette, options), indent=2, ensure_ascii=False)
