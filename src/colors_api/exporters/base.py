"""Shared naming rules and the exporter interface."""

import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar, Final

from colors_api.domain.colors import (
    CaseStyle,
    ColorShade,
    ExportFormatInfo,
    ExportMode,
    ExportOptions,
    Palette,
)

SECTION_DISPLAY_NAMES: Final[dict[str, str]] = {
    "base": "Base Colors",
    "primary": "Primary Colors",
    "secondary": "Secondary Colors",
    "gray": "Gray Scale",
    "error": "Error Colors",
    "warning": "Warning Colors",
    "success": "Success Colors",
    "info": "Info Colors",
    "interfaceBg": "Interface Backgrounds",
    "text": "Text Colors",
    "icon": "Icon Colors",
    "border": "Border Colors",
    "card": "Card Colors",
    "input": "Input Colors",
    "buttonPrimary": "Primary Buttons",
    "buttonSecondary": "Secondary Buttons",
    "buttonTertiary": "Tertiary Buttons",
    "buttonQuaternary": "Quaternary Buttons",
    "buttonQuinary": "Quinary Buttons",
    "buttonSenary": "Senary Buttons",
    "buttonSeptenary": "Septenary Buttons",
    "header": "Header Navigation",
    "odds": "Odds Display",
    "sidebarNav": "Sidebar Navigation",
    "sidebarButton": "Sidebar Buttons",
    "transparency": "Transparency Effects",
}

_UPPERCASE = re.compile(r"[A-Z]")


def camel_to_snake(value: str) -> str:
    return _UPPERCASE.sub(lambda match: f"_{match.group(0).lower()}", value)


def section_display_name(section: str) -> str:
    return SECTION_DISPLAY_NAMES.get(section, section)


def format_section_name(section: str, case_style: CaseStyle) -> str:
    """Re-case a section id; shade names are never re-cased."""
    if case_style == CaseStyle.SNAKE_CASE:
        return camel_to_snake(section)
    return section


def format_variable_name(name: str, prefix: str = "--") -> str:
    """Prefix a shade name for CSS-style variables.

    A ``-`` separator is appended when the prefix ends with neither
    ``-`` nor ``_``, so ``my-app`` yields ``my-app-primary-05``.
    """
    if not prefix.endswith(("-", "_")):
        prefix += "-"
    return f"{prefix}{name}"


def format_token_name(name: str, prefix: str = "") -> str:
    """Prefix a shade name for identifier-style tokens (SCSS, Tailwind, Figma).

    A leading ``--`` and one trailing ``-`` are dropped from the prefix.
    A non-empty result without a trailing separator gets ``_``.
    """
    cleaned = prefix.removeprefix("--").removesuffix("-")
    if cleaned and not cleaned.endswith(("_", "-")):
        cleaned += "_"
    return f"{cleaned}{name}"


def modes_for(mode: ExportMode) -> tuple[ExportMode, ...]:
    """Concrete modes to render, light first."""
    if mode == ExportMode.BOTH:
        return (ExportMode.LIGHT, ExportMode.DARK)
    return (mode,)


class Exporter(ABC):
    """Renders a palette into one text format."""

    info: ClassVar[ExportFormatInfo]

    @property
    def format_id(self) -> str:
        return self.info.id

    @abstractmethod
    def render(self, palette: Palette, options: ExportOptions) -> str:
        """Render the whole palette.

        Args:
            palette: Assembled palette.
            options: Naming and mode options.

        Returns:
            The exported document as text.
        """
        ...

    @staticmethod
    def value(shade: ColorShade, mode: ExportMode) -> str:
        return shade.value_for(mode)

    @staticmethod
    def by_mode(mode: ExportMode, build: Callable[[ExportMode], Any]) -> Any:
        """Call ``build(mode)`` once, or wrap light/dark results for ``both``."""
        if mode == ExportMode.BOTH:
            return {"light": build(ExportMode.LIGHT), "dark": build(ExportMode.DARK)}
        return build(mode)
