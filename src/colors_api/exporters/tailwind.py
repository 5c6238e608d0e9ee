"""Tailwind CSS config exporter."""

import json
import textwrap

from colors_api.domain.colors import ExportFormatInfo, ExportMode, ExportOptions, Palette
from colors_api.exporters.base import Exporter, format_section_name, format_token_name


class TailwindExporter(Exporter):
    info = ExportFormatInfo(
        id="tailwind",
        name="Tailwind Config",
        description="Tailwind CSS configuration file",
        extension=".js",
        content_type="text/javascript",
    )

    def _colors(
        self, palette: Palette, options: ExportOptions, mode: ExportMode
    ) -> dict[str, dict[str, str]]:
        return {
            format_section_name(section, options.case_style): {
                format_token_name(shade.name, options.prefix): self.value(shade, mode)
                for shade in shades
            }
            for section, shades in palette.sections()
        }

    def render(self, palette: Palette, options: ExportOptions) -> str:
        colors = self.by_mode(
            options.mode, lambda mode: self._colors(palette, options, mode)
        )
        body = json.dumps(colors, indent=6, ensure_ascii=False)
        return textwrap.dedent(
            """\
            module.exports = {
              theme: {
                extend: {
                  colors: %s
                }
              }
            }"""
        ) % body
