"""JSON token exporter.

Two layouts are supported:

``sections``::

    {"primary": {"--primary-05": {"value": "#3b82f6", "description": "..."}}}

``themes``::

    {"cssVariables": {"light": {"list": [{"key": "--primary-05", "value": "#3b82f6"}]}}}

With mode ``both`` the sections layout is wrapped in ``light``/``dark``
keys; the themes layout always keys by mode.
"""

import json
from typing import Any

from colors_api.domain.colors import (
    ExportFormatInfo,
    ExportMode,
    ExportOptions,
    JsonStructure,
    Palette,
)
from colors_api.exporters.base import (
    Exporter,
    format_section_name,
    format_variable_name,
    modes_for,
)


class JsonTokensExporter(Exporter):
    info = ExportFormatInfo(
        id="json",
        name="JSON Tokens",
        description="Structured color tokens in JSON format",
        extension=".json",
        content_type="application/json",
    )

    def _sections(
        self, palette: Palette, options: ExportOptions, mode: ExportMode
    ) -> dict[str, dict[str, dict[str, str]]]:
        tokens: dict[str, dict[str, dict[str, str]]] = {}
        for section, shades in palette.sections():
            tokens[format_section_name(section, options.case_style)] = {
                format_variable_name(shade.name, options.prefix): {
                    "value": self.value(shade, mode),
                    "description": shade.description or "",
                }
                for shade in shades
            }
        return tokens

    def _theme_list(
        self, palette: Palette, options: ExportOptions, mode: ExportMode
    ) -> dict[str, list[dict[str, str]]]:
        return {
            "list": [
                {
                    "key": format_variable_name(shade.name, options.prefix),
                    "value": self.value(shade, mode),
                }
                for _, shades in palette.sections()
                for shade in shades
            ]
        }

    def build(self, palette: Palette, options: ExportOptions) -> dict[str, Any]:
        if options.structure == JsonStructure.THEMES:
            return {
                "cssVariables": {
                    mode.value: self._theme_list(palette, options, mode)
                    for mode in modes_for(options.mode)
                }
            }
        return self.by_mode(
            options.mode, lambda mode: self._sections(palette, options, mode)
        )

    def render(self, palette: Palette, options: ExportOptions) -> str:
        return json.dumps(self.build(palette, options), indent=2, ensure_ascii=False)
