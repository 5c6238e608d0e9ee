"""API routes for the Colors API."""

import time
from datetime import datetime
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Query, Response

from colors_api.api.schemas import (
    ColorSuggestionResponse,
    ExportFormatResponse,
    FormatsData,
    FormatsResponse,
    GenerateData,
    GenerateRequest,
    GenerateResponse,
    HealthResponse,
    MessageResponse,
    PaletteStats,
    SessionData,
    SessionResponse,
    SuggestionsData,
    SuggestionsRequest,
    SuggestionsResponse,
    ThemeInfoResponse,
    ThemesData,
    ThemesResponse,
)
from colors_api.config import Settings
from colors_api.container import (
    get_app_settings,
    get_export_service,
    get_palette_service,
    get_session_store,
)
from colors_api.design_system.themes import BACKGROUND_THEMES, GRAY_THEMES
from colors_api.domain.colors import (
    ExportFormat,
    ExportFormatInfo,
    ExportOptions,
    Palette,
    ThemeInfo,
)
from colors_api.logging_config import LogContext
from colors_api.services.interfaces import (
    ExportService,
    PaletteService,
    PaletteSession,
    PaletteSessionStore,
)
from colors_api.services.palette import utc_timestamp

_STARTED_AT = time.monotonic()

# Create routers
general_router = APIRouter(tags=["general"])
colors_router = APIRouter(prefix="/api/colors", tags=["colors"])

PaletteServiceDep = Annotated[PaletteService, Depends(get_palette_service)]
ExportServiceDep = Annotated[ExportService, Depends(get_export_service)]
SessionStoreDep = Annotated[PaletteSessionStore, Depends(get_session_store)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]

COLOR_ENDPOINTS: list[dict[str, str]] = [
    {"method": "POST", "path": "/api/colors/suggestions", "description": "Generate secondary color suggestions"},
    {"method": "POST", "path": "/api/colors/generate", "description": "Generate complete color system"},
    {"method": "GET", "path": "/api/colors/export/{format}", "description": "Export color system in specified format"},
    {"method": "GET", "path": "/api/colors/session/{sessionId}", "description": "Get cached color system"},
    {"method": "GET", "path": "/api/colors/formats", "description": "Get available export formats"},
    {"method": "GET", "path": "/api/colors/themes", "description": "Get available theme options"},
    {"method": "DELETE", "path": "/api/colors/session/{sessionId}", "description": "Delete cached session"},
]


# Helper functions
def _iso(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _palette_stats(palette: Palette, *, include_generated_at: bool) -> PaletteStats:
    return PaletteStats(
        total_colors=palette.total_colors,
        sections=palette.section_count,
        generated_at=palette.metadata.generated_at if include_generated_at else None,
    )


def _format_to_response(info: ExportFormatInfo) -> ExportFormatResponse:
    return ExportFormatResponse(
        id=info.id,
        name=info.name,
        description=info.description,
        extension=info.extension,
        content_type=info.content_type,
    )


def _theme_to_response(theme: ThemeInfo) -> ThemeInfoResponse:
    return ThemeInfoResponse(
        id=theme.id, name=theme.name, description=theme.description, icon=theme.icon
    )


def _session_to_response(session: PaletteSession) -> SessionData:
    return SessionData(
        session_id=session.session_id,
        color_system=session.palette.to_dict(),
        generated_at=_iso(session.created_at),
        expires_at=_iso(session.expires_at),
        stats=_palette_stats(session.palette, include_generated_at=False),
    )


# General endpoints
@general_router.get("/")
def home() -> dict[str, Any]:
    return {
        "message": "Welcome to the Colors API!",
        "status": "success",
        "timestamp": utc_timestamp(),
        "endpoints": {"home": "/", "health": "/health", "api": "/api"},
    }


@general_router.get("/health", response_model=HealthResponse)
def health_check(settings: SettingsDep, store: SessionStoreDep) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        uptime=round(time.monotonic() - _STARTED_AT, 3),
        timestamp=utc_timestamp(),
        version=settings.app_version,
        sessions=len(store),
    )


@general_router.get("/api")
def api_info(settings: SettingsDep) -> dict[str, Any]:
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "API for comprehensive color system generation",
        "features": [
            "Secondary color suggestions based on color theory",
            "Complete color system generation",
            "Advanced theme options (Gray & Background)",
            "Multiple export formats (CSS, SCSS, JSON, Figma, Tailwind, CSV)",
            "Session-based color system caching",
            "WCAG accessibility compliance",
        ],
        "endpoints": {
            "general": [
                {"method": "GET", "path": "/", "description": "Home endpoint"},
                {"method": "GET", "path": "/health", "description": "Health check"},
                {"method": "GET", "path": "/api", "description": "API information"},
            ],
            "colors": COLOR_ENDPOINTS,
        },
    }


# Color endpoints
@colors_router.post("/suggestions", response_model=SuggestionsResponse)
def create_suggestions(
    request: SuggestionsRequest, service: PaletteServiceDep
) -> SuggestionsResponse:
    """Suggest secondary colors for a primary color."""
    suggestions = service.generate_secondary_color_suggestions(request.primary_color)
    return SuggestionsResponse(
        data=SuggestionsData(
            primary_color=request.primary_color,
            suggestions=[
                ColorSuggestionResponse(
                    color=s.color, name=s.name, description=s.description
                )
                for s in suggestions
            ],
            generated_at=utc_timestamp(),
        )
    )


@colors_router.post("/generate", response_model=GenerateResponse)
def generate_color_system(
    request: GenerateRequest,
    service: PaletteServiceDep,
    store: SessionStoreDep,
    settings: SettingsDep,
) -> GenerateResponse:
    """Generate a complete palette and cache it for export."""
    palette = service.generate_complete_color_system(
        request.primary_color,
        request.secondary_color,
        gray_theme=request.gray_theme or settings.default_gray_theme,
        background_theme=request.background_theme or settings.default_background_theme,
    )
    session_id = request.session_id or store.new_session_id()
    store.put(session_id, palette, settings.session_ttl)
    store.sweep_expired()

    return GenerateResponse(
        data=GenerateData(
            session_id=session_id,
            color_system=palette.to_dict(),
            stats=_palette_stats(palette, include_generated_at=True),
        )
    )


@colors_router.get("/export/{format_id}")
def export_color_system(
    format_id: Annotated[str, Path(description="Export format id")],
    export_service: ExportServiceDep,
    store: SessionStoreDep,
    session_id: Annotated[str, Query(alias="sessionId", min_length=1)],
    prefix: Annotated[str, Query(pattern=r"^[a-zA-Z0-9\-_]*$", max_length=50)] = "--",
    case_style: Annotated[str, Query(alias="caseStyle")] = "snake_case",
    mode: str = "both",
    structure: str = "sections",
) -> Response:
    """Download a cached palette in the requested format."""
    info = export_service.get_format_info(format_id)
    options = ExportOptions.from_values(
        prefix=prefix,
        case_style=case_style,
        mode=mode,
        structure=structure if info.id == ExportFormat.JSON.value else None,
    )
    session = store.get(session_id)

    with LogContext(session_id=session_id):
        content = export_service.export_palette(session.palette, info.id, options)
        filename = export_service.build_filename(info.id, options)

    return Response(
        content=content,
        media_type=info.content_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@colors_router.get("/session/{session_id}", response_model=SessionResponse)
def get_session(session_id: str, store: SessionStoreDep) -> SessionResponse:
    return SessionResponse(data=_session_to_response(store.get(session_id)))


@colors_router.delete("/session/{session_id}", response_model=MessageResponse)
def delete_session(session_id: str, store: SessionStoreDep) -> MessageResponse:
    store.delete(session_id)
    return MessageResponse(message="Session deleted successfully")


@colors_router.get("/formats", response_model=FormatsResponse)
def list_formats(export_service: ExportServiceDep) -> FormatsResponse:
    formats = [_format_to_response(info) for info in export_service.list_export_formats()]
    return FormatsResponse(data=FormatsData(formats=formats, total_formats=len(formats)))


@colors_router.get("/themes", response_model=ThemesResponse)
def list_themes() -> ThemesResponse:
    return ThemesResponse(
        data=ThemesData(
            gray_themes=[_theme_to_response(t) for t in GRAY_THEMES],
            background_themes=[_theme_to_response(t) for t in BACKGROUND_THEMES],
        )
    )
