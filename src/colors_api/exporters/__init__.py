from colors_api.exporters.base import (
    SECTION_DISPLAY_NAMES,
    Exporter,
    camel_to_snake,
    format_section_name,
    format_token_name,
    format_variable_name,
)
from colors_api.exporters.css import CssExporter
from colors_api.exporters.csv_exporter import CsvExporter
from colors_api.exporters.factory import ExporterFactory
from colors_api.exporters.figma import FigmaExporter, variable_id
from colors_api.exporters.json_tokens import JsonTokensExporter
from colors_api.exporters.scss import ScssExporter
from colors_api.exporters.tailwind import TailwindExporter

__all__ = [
    "SECTION_DISPLAY_NAMES",
    "CssExporter",
    "CsvExporter",
    "Exporter",
    "ExporterFactory",
    "FigmaExporter",
    "JsonTokensExporter",
    "ScssExporter",
    "TailwindExporter",
    "camel_to_snake",
    "format_section_name",
    "format_token_name",
    "format_variable_name",
    "variable_id",
]
