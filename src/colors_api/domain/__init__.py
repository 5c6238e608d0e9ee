from colors_api.domain.colors import (
    GROUP_NAMES,
    CaseStyle,
    ColorShade,
    ColorSuggestion,
    ExportFormat,
    ExportFormatInfo,
    ExportMode,
    ExportOptions,
    HarmonyBase,
    JsonStructure,
    Palette,
    PaletteMetadata,
    ThemeHarmony,
    ThemeInfo,
    ThemeOption,
)

__all__ = [
    "GROUP_NAMES",
    "CaseStyle",
    "ColorShade",
    "ColorSuggestion",
    "ExportFormat",
    "ExportFormatInfo",
    "ExportMode",
    "ExportOptions",
    "HarmonyBase",
    "JsonStructure",
    "Palette",
    "PaletteMetadata",
    "ThemeHarmony",
    "ThemeInfo",
    "ThemeOption",
]
