from colors_api.services.export import (
    ExportServiceImpl,
    export_palette,
    list_export_formats,
)
from colors_api.services.interfaces import (
    ExportService,
    PaletteService,
    PaletteSession,
    PaletteSessionStore,
)
from colors_api.services.palette import (
    PaletteServiceImpl,
    generate_palette,
    generate_suggestions,
)
from colors_api.services.sessions import InMemoryPaletteSessionStore

__all__ = [
    "ExportService",
    "ExportServiceImpl",
    "InMemoryPaletteSessionStore",
    "PaletteService",
    "PaletteServiceImpl",
    "PaletteSession",
    "PaletteSessionStore",
    "export_palette",
    "generate_palette",
    "generate_suggestions",
    "list_export_formats",
]
