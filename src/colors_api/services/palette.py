"""Palette assembly and secondary color suggestions."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from colors_api.design_system.color_space import hex_to_hsl, hsl_to_hex, is_valid_hex_color
from colors_api.design_system.components import (
    generate_primary_button_colors,
    generate_quaternary_button_colors,
    generate_quinary_button_colors,
    generate_secondary_button_colors,
    generate_senary_button_colors,
    generate_septenary_button_colors,
    generate_sidebar_button_colors,
    generate_tertiary_button_colors,
)
from colors_api.design_system.shades import (
    generate_base_colors,
    generate_error_colors,
    generate_gray_shades,
    generate_info_colors,
    generate_interface_backgrounds,
    generate_shades,
    generate_success_colors,
    generate_warning_colors,
)
from colors_api.design_system.themes import parse_theme_option
from colors_api.design_system.tokens import (
    generate_border_colors,
    generate_card_colors,
    generate_header_colors,
    generate_icon_colors,
    generate_input_colors,
    generate_odds_colors,
    generate_sidebar_nav_colors,
    generate_text_colors,
    generate_transparency_colors,
)
from colors_api.domain.colors import (
    GROUP_NAMES,
    ColorShade,
    ColorSuggestion,
    Palette,
    PaletteMetadata,
    ThemeOption,
)
from colors_api.exceptions import InvalidColorFormatError
from colors_api.logging_config import get_logger
from colors_api.services.interfaces import PaletteService

logger = get_logger(__name__)

# (name, hue rotation in degrees, description)
SUGGESTION_RULES: tuple[tuple[str, float, str], ...] = (
    ("Complementary", 180, "High contrast, professional"),
    ("Triadic", 120, "Vibrant, creative energy"),
    ("Split-Complementary", 150, "Harmonious, sophisticated"),
)


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _require_hex(value: str, field: str) -> None:
    if not is_valid_hex_color(value):
        raise InvalidColorFormatError(value, field=field)


class PaletteServiceImpl(PaletteService):
    def __init__(self, clock: Callable[[], str] = utc_timestamp) -> None:
        self._clock = clock

    def generate_complete_color_system(
        self,
        primary_color: str,
        secondary_color: str,
        *,
        gray_theme: str | ThemeOption = ThemeOption.AUTO,
        background_theme: str | ThemeOption = ThemeOption.AUTO,
    ) -> Palette:
        """Build every color group from two seeds.

        All inputs are validated before any group is generated, so a bad
        request never yields a partial palette.

        Raises:
            InvalidColorFormatError: If either seed is not ``#rrggbb``.
            InvalidThemeOptionError: If either theme keyword is unknown.
        """
        _require_hex(primary_color, "primaryColor")
        _require_hex(secondary_color, "secondaryColor")
        gray = parse_theme_option(gray_theme, field="grayTheme")
        background = parse_theme_option(background_theme, field="backgroundTheme")

        generators: dict[str, Callable[[], tuple[ColorShade, ...]]] = {
            "base": lambda: generate_base_colors(primary_color),
            "primary": lambda: generate_shades(primary_color, "primary"),
            "secondary": lambda: generate_shades(secondary_color, "secondary"),
            "gray": lambda: generate_gray_shades(primary_color, gray),
            "error": generate_error_colors,
            "warning": generate_warning_colors,
            "success": generate_success_colors,
            "info": generate_info_colors,
            "interfaceBg": lambda: generate_interface_backgrounds(primary_color, background),
            "text": generate_text_colors,
            "icon": generate_icon_colors,
            "border": generate_border_colors,
            "card": generate_card_colors,
            "input": generate_input_colors,
            "buttonPrimary": lambda: generate_primary_button_colors(primary_color),
            "buttonSecondary": lambda: generate_secondary_button_colors(secondary_color),
            "buttonTertiary": generate_tertiary_button_colors,
            "buttonQuaternary": generate_quaternary_button_colors,
            "buttonQuinary": generate_quinary_button_colors,
            "buttonSenary": generate_senary_button_colors,
            "buttonSeptenary": generate_septenary_button_colors,
            "header": generate_header_colors,
            "odds": generate_odds_colors,
            "sidebarNav": generate_sidebar_nav_colors,
            "sidebarButton": generate_sidebar_button_colors,
            "transparency": generate_transparency_colors,
        }
        groups = {name: generators[name]() for name in GROUP_NAMES}

        palette = Palette(
            groups=groups,
            metadata=PaletteMetadata(
                primary_color=primary_color,
                secondary_color=secondary_color,
                gray_theme=gray.value,
                background_theme=background.value,
                generated_at=self._clock(),
            ),
        )
        logger.info(
            "palette_generated",
            primary=primary_color,
            secondary=secondary_color,
            gray_theme=gray.value,
            background_theme=background.value,
            total_colors=palette.total_colors,
        )
        return palette

    def generate_secondary_color_suggestions(
        self, primary_color: str
    ) -> list[ColorSuggestion]:
        _require_hex(primary_color, "primaryColor")
        hue, saturation, lightness = hex_to_hsl(primary_color)
        suggestions = [
            ColorSuggestion(
                color=hsl_to_hex((hue + rotation) % 360, saturation, lightness),
                name=name,
                description=description,
            )
            for name, rotation, description in SUGGESTION_RULES
        ]
        logger.debug(
            "suggestions_generated", primary=primary_color, count=len(suggestions)
        )
        return suggestions


_default_service = PaletteServiceImpl()


def generate_palette(
    primary_color: str,
    secondary_color: str,
    gray_theme: str | ThemeOption = ThemeOption.AUTO,
    background_theme: str | ThemeOption = ThemeOption.AUTO,
) -> Palette:
    return _default_service.generate_complete_color_system(
        primary_color,
        secondary_color,
        gray_theme=gray_theme,
        background_theme=background_theme,
    )


def generate_suggestions(primary_color: str) -> list[ColorSuggestion]:
    return _default_service.generate_secondary_color_suggestions(primary_color)
