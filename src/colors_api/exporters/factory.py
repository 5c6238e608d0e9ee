"""Lookup of exporters by format id."""

from colors_api.domain.colors import ExportFormat, ExportFormatInfo
from colors_api.exceptions import UnsupportedExportFormatError
from colors_api.exporters.base import Exporter
from colors_api.exporters.css import CssExporter
from colors_api.exporters.csv_exporter import CsvExporter
from colors_api.exporters.figma import FigmaExporter
from colors_api.exporters.json_tokens import JsonTokensExporter
from colors_api.exporters.scss import ScssExporter
from colors_api.exporters.tailwind import TailwindExporter


class ExporterFactory:
    """Registry of exporter classes keyed by format id.

    Registration order is the order formats are listed to clients.
    """

    _exporters: dict[str, type[Exporter]] = {
        exporter_cls.info.id: exporter_cls
        for exporter_cls in (
            CssExporter,
            ScssExporter,
            JsonTokensExporter,
            FigmaExporter,
            TailwindExporter,
            CsvExporter,
        )
    }

    @classmethod
    def get_exporter(cls, format_id: str | ExportFormat) -> Exporter:
        """Instantiate the exporter for a format id.

        Raises:
            UnsupportedExportFormatError: If no exporter is registered for the id.
        """
        key = format_id.value if isinstance(format_id, ExportFormat) else format_id
        exporter_cls = cls._exporters.get(key)
        if exporter_cls is None:
            raise UnsupportedExportFormatError(format_id, cls.supported_formats())
        return exporter_cls()

    @classmethod
    def supported_formats(cls) -> list[str]:
        return list(cls._exporters)

    @classmethod
    def format_infos(cls) -> list[ExportFormatInfo]:
        return [exporter_cls.info for exporter_cls in cls._exporters.values()]
