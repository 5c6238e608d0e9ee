"""Export of assembled palettes to text formats."""

from __future__ import annotations

from colors_api.domain.colors import (
    CaseStyle,
    ExportFormat,
    ExportFormatInfo,
    ExportOptions,
    Palette,
)
from colors_api.exporters.factory import ExporterFactory
from colors_api.logging_config import get_logger
from colors_api.services.interfaces import ExportService

logger = get_logger(__name__)


class ExportServiceImpl(ExportService):
    def __init__(self, factory: type[ExporterFactory] = ExporterFactory) -> None:
        self._factory = factory

    def export_palette(
        self, palette: Palette, format_id: str, options: ExportOptions | None = None
    ) -> str:
        """Render a palette in the requested format.

        Raises:
            UnsupportedExportFormatError: If the format id is unknown.
        """
        options = options or ExportOptions()
        exporter = self._factory.get_exporter(format_id)
        content = exporter.render(palette, options)
        logger.info(
            "palette_exported",
            format=exporter.format_id,
            mode=options.mode.value,
            case_style=options.case_style.value,
            structure=options.structure.value,
            size=len(content),
        )
        return content

    def list_export_formats(self) -> list[ExportFormatInfo]:
        return self._factory.format_infos()

    def get_format_info(self, format_id: str) -> ExportFormatInfo:
        return self._factory.get_exporter(format_id).info

    def build_filename(self, format_id: str, options: ExportOptions) -> str:
        """Download name, e.g. ``colors-both-themes-camelCase.json``."""
        info = self.get_format_info(format_id)
        filename = f"colors-{options.mode.value}"
        if info.id == ExportFormat.JSON.value:
            filename += f"-{options.structure.value}"
        if options.case_style == CaseStyle.CAMEL_CASE:
            filename += "-camelCase"
        return filename + info.extension


_default_service = ExportServiceImpl()


def export_palette(
    palette: Palette, format_id: str, options: ExportOptions | None = None
) -> str:
    return _default_service.export_palette(palette, format_id, options)


def list_export_formats() -> list[ExportFormatInfo]:
    return _default_service.list_export_formats()
