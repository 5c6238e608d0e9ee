"""SCSS variable exporter."""

from colors_api.domain.colors import ExportFormatInfo, ExportMode, ExportOptions, Palette
from colors_api.exporters.base import Exporter, format_token_name, section_display_name


class ScssExporter(Exporter):
    info = ExportFormatInfo(
        id="scss",
        name="SCSS Variables",
        description="Sass variables for preprocessing",
        extension=".scss",
        content_type="text/scss",
    )

    def _variables(self, palette: Palette, options: ExportOptions, mode: ExportMode) -> str:
        lines: list[str] = []
        for section, shades in palette.sections():
            lines.append(f"// {section_display_name(section)}")
            for shade in shades:
                name = format_token_name(shade.name, options.prefix)
                lines.append(f"${name}: {self.value(shade, mode)};")
            lines.append("")
        return "\n".join(lines)

    def render(self, palette: Palette, options: ExportOptions) -> str:
        if options.mode != ExportMode.BOTH:
            return self._variables(palette, options, options.mode)
        light = self._variables(palette, options, ExportMode.LIGHT)
        dark = self._variables(palette, options, ExportMode.DARK)
        return f"// Light theme\n{light}\n\n// Dark theme\n{dark}"
