"""CSS custom property exporter."""

from colors_api.domain.colors import ExportFormatInfo, ExportMode, ExportOptions, Palette
from colors_api.exporters.base import Exporter, format_variable_name, section_display_name


class CssExporter(Exporter):
    """Emit ``:root`` custom properties.

    With mode ``both`` the dark values are repeated for the three usual
    ways of switching themes: a ``.dark`` class, a ``data-theme``
    attribute and the ``prefers-color-scheme`` media query.
    """

    info = ExportFormatInfo(
        id="css",
        name="CSS Variables",
        description="CSS custom properties with light/dark mode support",
        extension=".css",
        content_type="text/css",
    )

    def _declarations(self, palette: Palette, options: ExportOptions, mode: ExportMode) -> str:
        lines: list[str] = []
        for section, shades in palette.sections():
            lines.append(f"  /* {section_display_name(section)} */")
            for shade in shades:
                name = format_variable_name(shade.name, options.prefix)
                lines.append(f"  {name}: {self.value(shade, mode)};")
            lines.append("")
        return "\n".join(lines)

    def render(self, palette: Palette, options: ExportOptions) -> str:
        if options.mode != ExportMode.BOTH:
            title = options.mode.value.capitalize()
            body = self._declarations(palette, options, options.mode)
            return f"/* {title} Theme */\n:root {{\n{body}\n}}"

        light = self._declarations(palette, options, ExportMode.LIGHT)
        dark = self._declarations(palette, options, ExportMode.DARK)
        return (
            f"/* Light Theme (Default) */\n:root {{\n{light}\n}}\n\n"
            f"/* Dark Theme */\n.dark {{\n{dark}\n}}\n\n"
            f'/* Alternative: Using data-theme attribute */\n[data-theme="dark"] {{\n{dark}\n}}\n\n'
            f"/* Alternative: Using media query */\n"
            f"@media (prefers-color-scheme: dark) {{\n  :root {{\n{dark}\n  }}\n}}"
        )
