"""Pydantic v2 schemas for API request/response models.

Wire names are camelCase; Python attributes are snake_case.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# Request Schemas
class SuggestionsRequest(CamelModel):
    """Body of POST /api/colors/suggestions."""

    primary_color: str = Field(..., min_length=1, examples=["#3B82F6"])


class GenerateRequest(CamelModel):
    """Body of POST /api/colors/generate."""

    primary_color: str = Field(..., min_length=1, examples=["#3B82F6"])
    secondary_color: str = Field(..., min_length=1, examples=["#10B981"])
    gray_theme: str | None = Field(default=None, examples=["blue"])
    background_theme: str | None = Field(default=None, examples=["auto"])
    session_id: str | None = Field(default=None, max_length=128)


# Response Schemas
class ColorSuggestionResponse(CamelModel):
    color: str
    name: str
    description: str


class SuggestionsData(CamelModel):
    primary_color: str
    suggestions: list[ColorSuggestionResponse]
    generated_at: str


class SuggestionsResponse(CamelModel):
    success: bool = True
    data: SuggestionsData


class PaletteStats(CamelModel):
    total_colors: int
    sections: int
    generated_at: str | None = None


class GenerateData(CamelModel):
    session_id: str
    color_system: dict[str, Any]
    stats: PaletteStats


class GenerateResponse(CamelModel):
    success: bool = True
    data: GenerateData


class SessionData(CamelModel):
    session_id: str
    color_system: dict[str, Any]
    generated_at: str
    expires_at: str
    stats: PaletteStats


class SessionResponse(CamelModel):
    success: bool = True
    data: SessionData


class MessageResponse(CamelModel):
    success: bool = True
    message: str


class ExportFormatResponse(CamelModel):
    id: str
    name: str
    description: str
    extension: str
    content_type: str


class FormatsData(CamelModel):
    formats: list[ExportFormatResponse]
    total_formats: int


class FormatsResponse(CamelModel):
    success: bool = True
    data: FormatsData


class ThemeInfoResponse(CamelModel):
    id: str
    name: str
    description: str
    icon: str


class ThemesData(CamelModel):
    gray_themes: list[ThemeInfoResponse]
    background_themes: list[ThemeInfoResponse]


class ThemesResponse(CamelModel):
    success: bool = True
    data: ThemesData


class HealthResponse(BaseModel):
    """Schema for health check response."""

    status: str
    uptime: float
    timestamp: str
    version: str
    sessions: int
