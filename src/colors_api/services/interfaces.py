from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta

from colors_api.domain.colors import (
    ColorSuggestion,
    ExportFormatInfo,
    ExportOptions,
    Palette,
    ThemeOption,
)


@dataclass(frozen=True)
class PaletteSession:
    session_id: str
    palette: Palette
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now


class PaletteService(ABC):
    @abstractmethod
    def generate_complete_color_system(
        self,
        primary_color: str,
        secondary_color: str,
        *,
        gray_theme: str | ThemeOption = ThemeOption.AUTO,
        background_theme: str | ThemeOption = ThemeOption.AUTO,
    ) -> Palette:
        pass

    @abstractmethod
    def generate_secondary_color_suggestions(
        self, primary_color: str
    ) -> list[ColorSuggestion]:
        pass


class ExportService(ABC):
    @abstractmethod
    def export_palette(
        self, palette: Palette, format_id: str, options: ExportOptions | None = None
    ) -> str:
        pass

    @abstractmethod
    def list_export_formats(self) -> list[ExportFormatInfo]:
        pass

    @abstractmethod
    def get_format_info(self, format_id: str) -> ExportFormatInfo:
        pass

    @abstractmethod
    def build_filename(self, format_id: str, options: ExportOptions) -> str:
        pass


class PaletteSessionStore(ABC):
    @abstractmethod
    def new_session_id(self) -> str:
        pass

    @abstractmethod
    def put(
        self, session_id: str, palette: Palette, ttl: timedelta
    ) -> PaletteSession:
        pass

    @abstractmethod
    def get(self, session_id: str) -> PaletteSession:
        pass

    @abstractmethod
    def delete(self, session_id: str) -> None:
        pass

    @abstractmethod
    def sweep_expired(self, now: datetime | None = None) -> int:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
