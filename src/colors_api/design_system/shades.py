"""Seed-driven and semantic shade generators.

Every generator returns an ordered tuple of ColorShade. Position in the
tuple is the shade step, and names carry the step zero-padded to two
digits (``primary-05``).
"""

from dataclasses import dataclass
from typing import Final

from colors_api.design_system.color_space import hex_to_hsl, hsl_to_hex
from colors_api.design_system.themes import resolve_background_base, resolve_gray_base
from colors_api.domain.colors import ColorShade, ThemeOption

SEED_INDEX: Final = 5
SHADE_COUNT: Final = 10


def _step_name(group: str, index: int) -> str:
    return f"{group}-{index:02d}"


# =============================================================================
# Seed shade curve
# =============================================================================


@dataclass(frozen=True)
class CurveRates:
    """Per-step lightness/saturation deltas and clamps for one side of the seed.

    ``*_lightness_rate`` and ``*_saturation_rate`` are signed deltas per
    step away from the seed. Clamps are applied with min() when the rate
    is positive and max() when it is negative.
    """

    light_lightness_rate: float
    light_lightness_clamp: float
    light_saturation_rate: float
    light_saturation_clamp: float
    dark_lightness_rate: float
    dark_lightness_clamp: float
    dark_saturation_rate: float
    dark_saturation_clamp: float


LIGHTER_CURVE: Final = CurveRates(
    light_lightness_rate=12,
    light_lightness_clamp=95,
    light_saturation_rate=-8,
    light_saturation_clamp=15,
    dark_lightness_rate=10,
    dark_lightness_clamp=90,
    dark_saturation_rate=-6,
    dark_saturation_clamp=20,
)

DARKER_CURVE: Final = CurveRates(
    light_lightness_rate=-10,
    light_lightness_clamp=8,
    light_saturation_rate=5,
    light_saturation_clamp=95,
    dark_lightness_rate=-8,
    dark_lightness_clamp=12,
    dark_saturation_rate=4,
    dark_saturation_clamp=90,
)


def _move(value: float, rate: float, steps: int, clamp: float) -> float:
    moved = value + rate * steps
    return min(moved, clamp) if rate > 0 else max(moved, clamp)


def _curve_point(
    curve: CurveRates, saturation: float, lightness: float, steps: int
) -> tuple[tuple[float, float], tuple[float, float]]:
    light = (
        _move(saturation, curve.light_saturation_rate, steps, curve.light_saturation_clamp),
        _move(lightness, curve.light_lightness_rate, steps, curve.light_lightness_clamp),
    )
    dark = (
        _move(saturation, curve.dark_saturation_rate, steps, curve.dark_saturation_clamp),
        _move(lightness, curve.dark_lightness_rate, steps, curve.dark_lightness_clamp),
    )
    return light, dark


def generate_shades(seed_hex: str, group_name: str) -> tuple[ColorShade, ...]:
    """Expand a seed color into ten light/dark shades.

    Shade 5 is the seed string itself in both modes. Shades 1-4 get
    lighter and less saturated, shades 6-10 darker and more saturated,
    with gentler rates in dark mode. Hue never changes.

    Args:
        seed_hex: Seed color as ``#rrggbb``.
        group_name: Prefix for shade names, e.g. ``primary``.

    Raises:
        InvalidColorFormatError: If the seed is not a six digit hex color.
    """
    hue, saturation, lightness = hex_to_hsl(seed_hex)
    title = group_name[:1].upper() + group_name[1:]

    shades = []
    for index in range(1, SHADE_COUNT + 1):
        name = _step_name(group_name, index)
        if index == SEED_INDEX:
            shades.append(
                ColorShade(name, seed_hex, seed_hex, f"{title} base color (exact input)")
            )
            continue

        if index < SEED_INDEX:
            curve, steps = LIGHTER_CURVE, SEED_INDEX - index
        else:
            curve, steps = DARKER_CURVE, index - SEED_INDEX
        (light_s, light_l), (dark_s, dark_l) = _curve_point(
            curve, saturation, lightness, steps
        )
        shades.append(
            ColorShade(
                name,
                hsl_to_hex(hue, light_s, light_l),
                hsl_to_hex(hue, dark_s, dark_l),
                f"{title} color shade {index:02d}",
            )
        )
    return tuple(shades)


# =============================================================================
# Semantic families
# =============================================================================


@dataclass(frozen=True)
class SemanticFamily:
    """A fixed 8-step curve: rows of (light L, light S, dark L, dark S)."""

    name: str
    hue: float
    dark_hue_offset: float
    steps: tuple[tuple[float, float, float, float], ...]


# Out-of-range step indices fall back to this row.
DEFAULT_SEMANTIC_STEP: Final = 6

SEMANTIC_FAMILIES: Final[dict[str, SemanticFamily]] = {
    "error": SemanticFamily(
        "error",
        hue=2,
        dark_hue_offset=2,
        steps=(
            (97, 20, 15, 35),
            (93, 35, 22, 45),
            (85, 50, 30, 55),
            (72, 65, 40, 65),
            (62, 78, 52, 75),
            (55, 85, 55, 85),
            (45, 85, 65, 80),
            (35, 80, 75, 70),
        ),
    ),
    "warning": SemanticFamily(
        "warning",
        hue=35,
        dark_hue_offset=3,
        steps=(
            (97, 25, 12, 40),
            (92, 40, 18, 50),
            (84, 55, 26, 60),
            (70, 70, 36, 70),
            (58, 85, 48, 80),
            (50, 95, 50, 95),
            (42, 90, 60, 85),
            (32, 85, 70, 75),
        ),
    ),
    "success": SemanticFamily(
        "success",
        hue=140,
        dark_hue_offset=-5,
        steps=(
            (97, 30, 10, 45),
            (91, 45, 16, 55),
            (82, 60, 24, 65),
            (68, 75, 34, 75),
            (52, 85, 46, 80),
            (42, 85, 42, 85),
            (34, 80, 52, 80),
            (26, 75, 62, 70),
        ),
    ),
    "info": SemanticFamily(
        "info",
        hue=210,
        dark_hue_offset=5,
        steps=(
            (97, 25, 12, 40),
            (92, 40, 20, 50),
            (84, 55, 30, 60),
            (72, 70, 42, 70),
            (62, 85, 52, 80),
            (52, 85, 52, 85),
            (42, 80, 62, 80),
            (32, 75, 72, 70),
        ),
    ),
}


def semantic_step(family: str, index: int) -> tuple[float, float, float, float]:
    """Return (light L, light S, dark L, dark S) for a 1-based step."""
    steps = SEMANTIC_FAMILIES[family].steps
    if not 1 <= index <= len(steps):
        index = DEFAULT_SEMANTIC_STEP
    return steps[index - 1]


def generate_semantic_colors(family: str) -> tuple[ColorShade, ...]:
    curve = SEMANTIC_FAMILIES[family]
    title = family.capitalize()
    shades = []
    for index in range(1, len(curve.steps) + 1):
        light_l, light_s, dark_l, dark_s = semantic_step(family, index)
        shades.append(
            ColorShade(
                _step_name(family, index),
                hsl_to_hex(curve.hue, light_s, light_l),
                hsl_to_hex(curve.hue + curve.dark_hue_offset, dark_s, dark_l),
                f"{title} color shade {index:02d} - optimized for accessibility and contrast",
            )
        )
    return tuple(shades)


def generate_error_colors() -> tuple[ColorShade, ...]:
    return generate_semantic_colors("error")


def generate_warning_colors() -> tuple[ColorShade, ...]:
    return generate_semantic_colors("warning")


def generate_success_colors() -> tuple[ColorShade, ...]:
    return generate_semantic_colors("success")


def generate_info_colors() -> tuple[ColorShade, ...]:
    return generate_semantic_colors("info")


# =============================================================================
# Base, gray and interface backgrounds
# =============================================================================


def _base_hues(hue: float) -> tuple[float, float]:
    """(black hue, white hue) for the primary hue family."""
    if 270 <= hue <= 330:
        return 240, 240
    if hue >= 330 or hue <= 30:
        return 0, 0
    if 30 <= hue <= 90:
        return 30, 45
    if 90 <= hue <= 150:
        return 210, 210
    return hue, hue


def generate_base_colors(primary_hex: str) -> tuple[ColorShade, ...]:
    """Black and white, tinted toward the primary color family."""
    hue, saturation, _ = hex_to_hsl(primary_hex)
    black_hue, white_hue = _base_hues(hue)
    tint = min(saturation * 0.08, 6)

    return (
        ColorShade(
            "black",
            hsl_to_hex(black_hue, tint, 5),
            hsl_to_hex(black_hue, tint * 1.2, 3),
            "Smart harmonized black based on primary color family",
        ),
        ColorShade(
            "white",
            "#FFFFFF",
            hsl_to_hex(white_hue, tint * 0.6, 98),
            "Pure white (light) / Smart harmonized white (dark)",
        ),
    )


def generate_gray_shades(
    primary_hex: str, theme: str | ThemeOption = ThemeOption.AUTO
) -> tuple[ColorShade, ...]:
    base = resolve_gray_base(theme, primary_hex)
    shades = []
    for index in range(1, SHADE_COUNT + 1):
        light_l = 95 - (index - 1) * 9
        dark_l = 8 + (index - 1) * 8.5
        shades.append(
            ColorShade(
                _step_name("gray", index),
                hsl_to_hex(base.hue, base.saturation, light_l),
                hsl_to_hex(base.hue, base.saturation, dark_l),
                f"Gray color shade {index:02d}",
            )
        )
    return tuple(shades)


# (name, light L, dark L, saturation factor, description)
INTERFACE_BACKGROUNDS: Final[tuple[tuple[str, float, float, float, str], ...]] = (
    ("bg-quinary", 98, 7, 1.0, "Primary interface background ({harmony} harmony)"),
    ("bg-quinary_alt", 96, 10, 0.9, "Alternative primary background"),
    ("bg-senary", 94, 13, 0.85, "Secondary interface background"),
    ("bg-senary_alt", 92, 16, 0.8, "Alternative secondary background"),
    ("bg-septenary", 89, 20, 0.75, "Tertiary interface background"),
    ("bg-active", 85, 25, 1.2, "Active state background"),
)


def generate_interface_backgrounds(
    primary_hex: str, theme: str | ThemeOption = ThemeOption.AUTO
) -> tuple[ColorShade, ...]:
    base = resolve_background_base(theme, primary_hex)
    return tuple(
        ColorShade(
            name,
            hsl_to_hex(base.hue, base.saturation * factor, light_l),
            hsl_to_hex(base.hue, base.saturation * factor, dark_l),
            description.format(harmony=base.label),
        )
        for name, light_l, dark_l, factor, description in INTERFACE_BACKGROUNDS
    )
