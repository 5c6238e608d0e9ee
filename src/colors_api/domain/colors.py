from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from colors_api.exceptions import InvalidExportOptionError


class ThemeOption(str, Enum):
    AUTO = "auto"
    BLUE = "blue"
    GREEN_BROWN = "green-brown"
    BLACK = "black"
    NEUTRAL = "neutral"


class ExportFormat(str, Enum):
    CSS = "css"
    SCSS = "scss"
    JSON = "json"
    FIGMA = "figma"
    TAILWIND = "tailwind"
    CSV = "csv"


class ExportMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    BOTH = "both"


class CaseStyle(str, Enum):
    CAMEL_CASE = "camelCase"
    SNAKE_CASE = "snake_case"


class JsonStructure(str, Enum):
    SECTIONS = "sections"
    THEMES = "themes"


# Section order is part of every export, keep it stable.
GROUP_NAMES: tuple[str, ...] = (
    "base",
    "primary",
    "secondary",
    "gray",
    "error",
    "warning",
    "success",
    "info",
    "interfaceBg",
    "text",
    "icon",
    "border",
    "card",
    "input",
    "buttonPrimary",
    "buttonSecondary",
    "buttonTertiary",
    "buttonQuaternary",
    "buttonQuinary",
    "buttonSenary",
    "buttonSeptenary",
    "header",
    "odds",
    "sidebarNav",
    "sidebarButton",
    "transparency",
)


@dataclass(frozen=True)
class ColorShade:
    """One named color with its light-mode and dark-mode values.

    Values are ``#rrggbb`` hex strings, ``var(--name)`` references or
    ``rgba(...)`` literals. References are never resolved.
    """

    name: str
    light: str
    dark: str
    description: str

    def value_for(self, mode: "ExportMode") -> str:
        return self.dark if mode == ExportMode.DARK else self.light

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "light": self.light,
            "dark": self.dark,
            "description": self.description,
        }


@dataclass(frozen=True)
class PaletteMetadata:
    primary_color: str
    secondary_color: str
    gray_theme: str
    background_theme: str
    generated_at: str

    def to_dict(self) -> dict[str, str]:
        return {
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "grayTheme": self.gray_theme,
            "backgroundTheme": self.background_theme,
            "generatedAt": self.generated_at,
        }


@dataclass(frozen=True)
class Palette:
    """A fully assembled color system.

    ``groups`` holds every id of GROUP_NAMES. Iteration through
    ``sections()`` always follows GROUP_NAMES order regardless of how the
    mapping was built.
    """

    groups: Mapping[str, tuple[ColorShade, ...]]
    metadata: PaletteMetadata

    def __post_init__(self) -> None:
        missing = [name for name in GROUP_NAMES if name not in self.groups]
        if missing:
            raise ValueError(f"Palette is missing groups: {', '.join(missing)}")
        object.__setattr__(self, "groups", MappingProxyType(dict(self.groups)))

    def sections(self) -> Iterator[tuple[str, tuple[ColorShade, ...]]]:
        for name in GROUP_NAMES:
            yield name, self.groups[name]

    def group(self, name: str) -> tuple[ColorShade, ...]:
        return self.groups[name]

    @property
    def total_colors(self) -> int:
        return sum(len(shades) for _, shades in self.sections())

    @property
    def section_count(self) -> int:
        return len(GROUP_NAMES)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            name: [shade.to_dict() for shade in shades]
            for name, shades in self.sections()
        }
        data["metadata"] = self.metadata.to_dict()
        return data


@dataclass(frozen=True)
class ThemeHarmony:
    hue: float
    gray_saturation: float
    background_saturation: float
    description: str


@dataclass(frozen=True)
class HarmonyBase:
    """Resolved hue and saturation feeding the gray or background generator."""

    hue: float
    saturation: float
    label: str


@dataclass(frozen=True)
class ColorSuggestion:
    color: str
    name: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {"color": self.color, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class ThemeInfo:
    id: str
    name: str
    description: str
    icon: str

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
        }


@dataclass(frozen=True)
class ExportFormatInfo:
    id: str
    name: str
    description: str
    extension: str
    content_type: str

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "extension": self.extension,
            "contentType": self.content_type,
        }


def _coerce(enum_cls: type[Enum], option: str, value: Any) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidExportOptionError(
            option, value, [member.value for member in enum_cls]
        ) from None


@dataclass(frozen=True)
class ExportOptions:
    prefix: str = "--"
    case_style: CaseStyle = CaseStyle.SNAKE_CASE
    mode: ExportMode = ExportMode.BOTH
    structure: JsonStructure = JsonStructure.SECTIONS

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "case_style", _coerce(CaseStyle, "caseStyle", self.case_style)
        )
        object.__setattr__(self, "mode", _coerce(ExportMode, "mode", self.mode))
        object.__setattr__(
            self, "structure", _coerce(JsonStructure, "structure", self.structure)
        )

    @classmethod
    def from_values(
        cls,
        *,
        prefix: str | None = None,
        case_style: str | CaseStyle | None = None,
        mode: str | ExportMode | None = None,
        structure: str | JsonStructure | None = None,
    ) -> "ExportOptions":
        """Build options from raw request values, applying defaults for None."""
        return cls(
            prefix="--" if prefix is None else prefix,
            case_style=case_style or CaseStyle.SNAKE_CASE,
            mode=mode or ExportMode.BOTH,
            structure=structure or JsonStructure.SECTIONS,
        )
