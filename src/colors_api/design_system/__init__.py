"""Palette generation engine.

Turns two seed colors and two theme options into every color group of
the design system: seed shade scales, semantic families, grays,
interface backgrounds, and the fixed component tokens.

Usage:
    from colors_api.design_system import generate_shades, hex_to_hsl

    shades = generate_shades("#3B82F6", "primary")
    print(shades[4].light)  # "#3B82F6", shade 5 is the seed itself
"""

from colors_api.design_system.color_space import (
    get_optimal_text_color,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    is_valid_hex_color,
    parse_color_channels,
)
from colors_api.design_system.shades import (
    DARKER_CURVE,
    LIGHTER_CURVE,
    SEMANTIC_FAMILIES,
    CurveRates,
    generate_shades,
    semantic_step,
)
from colors_api.design_system.themes import (
    THEME_HARMONIES,
    get_available_themes,
    resolve_background_base,
    resolve_gray_base,
    resolve_theme_harmony,
)

__all__ = [
    "DARKER_CURVE",
    "LIGHTER_CURVE",
    "SEMANTIC_FAMILIES",
    "THEME_HARMONIES",
    "CurveRates",
    "generate_shades",
    "get_available_themes",
    "get_optimal_text_color",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "is_valid_hex_color",
    "parse_color_channels",
    "resolve_background_base",
    "resolve_gray_base",
    "resolve_theme_harmony",
    "semantic_step",
]
