from colors_api.domain.colors import (
    CaseStyle,
    ColorShade,
    ColorSuggestion,
    ExportMode,
    ExportOptions,
    JsonStructure,
    Palette,
    ThemeOption,
)
from colors_api.services.export import export_palette, list_export_formats
from colors_api.services.palette import generate_palette, generate_suggestions

__all__ = [
    "CaseStyle",
    "ColorShade",
    "ColorSuggestion",
    "ExportMode",
    "ExportOptions",
    "JsonStructure",
    "Palette",
    "ThemeOption",
    "export_palette",
    "generate_palette",
    "generate_suggestions",
    "list_export_formats",
]

__version__ = "1.0.0"
