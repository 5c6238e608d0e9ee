"""CSV table exporter.

One row per shade. Fields are written with the csv module, so values
such as ``rgba(255, 255, 255, 0.1)`` are quoted rather than split.
"""

import csv
import io

from colors_api.domain.colors import ExportFormatInfo, ExportMode, ExportOptions, Palette
from colors_api.exporters.base import Exporter, format_section_name, format_variable_name

BOTH_MODES_HEADER = ["Section", "Variable Name", "Light Value", "Dark Value", "Description"]
SINGLE_MODE_HEADER = ["Section", "Variable Name", "Value", "Description"]


class CsvExporter(Exporter):
    info = ExportFormatInfo(
        id="csv",
        name="CSV Table",
        description="Comma-separated values for spreadsheet import",
        extension=".csv",
        content_type="text/csv",
    )

    def rows(self, palette: Palette, options: ExportOptions) -> list[list[str]]:
        both = options.mode == ExportMode.BOTH
        rows = [list(BOTH_MODES_HEADER if both else SINGLE_MODE_HEADER)]
        for section, shades in palette.sections():
            section_name = format_section_name(section, options.case_style)
            for shade in shades:
                name = format_variable_name(shade.name, options.prefix)
                values = [shade.light, shade.dark] if both else [self.value(shade, options.mode)]
                rows.append([section_name, name, *values, shade.description or ""])
        return rows

    def render(self, palette: Palette, options: ExportOptions) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerows(self.rows(palette, options))
        return buffer.getvalue().removesuffix("\n")
