"""Theme harmony resolution for gray scales and interface backgrounds.

A theme keyword selects a fixed hue and derives saturation from the
primary color. ``auto`` instead buckets the primary hue and picks a
harmonizing hue per bucket.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from colors_api.design_system.color_space import hex_to_hsl
from colors_api.domain.colors import HarmonyBase, ThemeHarmony, ThemeInfo, ThemeOption
from colors_api.exceptions import InvalidThemeOptionError

# Background saturation never drops below this floor.
MIN_BACKGROUND_SATURATION: Final = 8.0


@dataclass(frozen=True)
class _HarmonyRule:
    hue: float
    gray_factor: float
    gray_cap: float
    background_factor: float
    background_cap: float
    description: str

    def apply(self, saturation: float) -> ThemeHarmony:
        return ThemeHarmony(
            hue=self.hue,
            gray_saturation=min(saturation * self.gray_factor, self.gray_cap),
            background_saturation=min(
                saturation * self.background_factor, self.background_cap
            ),
            description=self.description,
        )


THEME_HARMONIES: Final[dict[ThemeOption, _HarmonyRule]] = {
    ThemeOption.BLUE: _HarmonyRule(220, 0.3, 25, 0.4, 35, "Cool blue professional tone"),
    ThemeOption.GREEN_BROWN: _HarmonyRule(
        30, 0.25, 20, 0.35, 30, "Warm earth tones with brown & green undertones"
    ),
    ThemeOption.BLACK: _HarmonyRule(0, 0, 0, 0, 0, "Pure monochrome classic"),
    ThemeOption.NEUTRAL: _HarmonyRule(0, 0, 0, 0, 0, "Pure balanced grays"),
}


def parse_theme_option(value: str | ThemeOption, field: str | None = None) -> ThemeOption:
    """Coerce a raw theme keyword.

    Raises:
        InvalidThemeOptionError: If the keyword is not a known theme.
    """
    if isinstance(value, ThemeOption):
        return value
    try:
        return ThemeOption(value)
    except ValueError:
        raise InvalidThemeOptionError(
            value, [option.value for option in ThemeOption], field=field
        ) from None


def resolve_theme_harmony(
    theme: str | ThemeOption, primary_hex: str
) -> ThemeHarmony | None:
    """Return the fixed harmony for a theme keyword, or None for ``auto``."""
    option = parse_theme_option(theme)
    if option is ThemeOption.AUTO:
        return None
    _, saturation, _ = hex_to_hsl(primary_hex)
    return THEME_HARMONIES[option].apply(saturation)


# =============================================================================
# Gray scale
# =============================================================================


def _auto_gray_base(hue: float, saturation: float) -> HarmonyBase:
    if 200 <= hue <= 260:
        return HarmonyBase(hue, min(saturation * 0.3, 25), "primary-hue (auto)")
    if 30 <= hue <= 90:
        return HarmonyBase(30, min(saturation * 0.25, 20), "warm (auto)")
    return HarmonyBase(220, min(saturation * 0.3, 25), "cool (auto)")


def resolve_gray_base(theme: str | ThemeOption, primary_hex: str) -> HarmonyBase:
    """Hue and saturation for the 10-step gray scale."""
    hue, saturation, _ = hex_to_hsl(primary_hex)
    harmony = resolve_theme_harmony(theme, primary_hex)
    if harmony is None:
        return _auto_gray_base(hue, saturation)
    return HarmonyBase(harmony.hue, harmony.gray_saturation, harmony.description)


# =============================================================================
# Interface backgrounds
# =============================================================================

# (matches hue, base hue from primary hue, saturation factor, cap, label)
# Ranges share their edges, so order matters: first match wins.
_BACKGROUND_BUCKETS: Final[
    tuple[tuple[Callable[[float], bool], Callable[[float], float], float, float, str], ...]
] = (
    (lambda h: 300 <= h <= 340, lambda h: 220, 0.6, 45, "complementary-blue"),
    (lambda h: h >= 340 or h <= 20, lambda h: 210, 0.5, 35, "cool-complement"),
    (lambda h: 270 <= h < 300, lambda h: 230, 0.55, 40, "analogous-cool"),
    (lambda h: 20 <= h <= 60, lambda h: 35, 0.25, 20, "warm-neutral"),
    (lambda h: 60 <= h <= 120, lambda h: 200, 0.3, 25, "cool-balance"),
    (lambda h: 120 <= h <= 180, lambda h: 25, 0.35, 30, "warm-balance"),
    (lambda h: 180 <= h <= 240, lambda h: h + 15, 0.4, 35, "analogous-blue"),
)
_BACKGROUND_FALLBACK: Final = (220, 0.5, 40, "monochromatic-deep")


def _auto_background_base(hue: float, saturation: float) -> HarmonyBase:
    for matches, base_hue, factor, cap, label in _BACKGROUND_BUCKETS:
        if matches(hue):
            return HarmonyBase(base_hue(hue), min(saturation * factor, cap), f"{label} (auto)")
    fixed_hue, factor, cap, label = _BACKGROUND_FALLBACK
    return HarmonyBase(fixed_hue, min(saturation * factor, cap), f"{label} (auto)")


def resolve_background_base(
    theme: str | ThemeOption, primary_hex: str
) -> HarmonyBase:
    """Hue and saturation for the interface background group.

    The saturation is floor-clamped to MIN_BACKGROUND_SATURATION, so even
    the monochrome themes end up with a faint tint.
    """
    hue, saturation, _ = hex_to_hsl(primary_hex)
    harmony = resolve_theme_harmony(theme, primary_hex)
    if harmony is None:
        base = _auto_background_base(hue, saturation)
    else:
        base = HarmonyBase(
            harmony.hue,
            harmony.background_saturation,
            f"{harmony.description} (matches gray)",
        )
    return HarmonyBase(
        base.hue, max(base.saturation, MIN_BACKGROUND_SATURATION), base.label
    )


# =============================================================================
# Theme listings
# =============================================================================

GRAY_THEMES: Final[tuple[ThemeInfo, ...]] = (
    ThemeInfo("auto", "Smart Auto", "Based on primary color", "🔗"),
    ThemeInfo("blue", "Blue Grays", "Cool professional tone", "❄️"),
    ThemeInfo("green-brown", "Warm Earth", "Brown & green undertones", "🌿"),
    ThemeInfo("black", "Pure Black", "Classic monochrome", "⚫"),
    ThemeInfo("neutral", "Neutral Gray", "Pure balanced grays", "⚪"),
)

BACKGROUND_THEMES: Final[tuple[ThemeInfo, ...]] = (
    ThemeInfo("auto", "Smart Auto", "Complementary harmony", "🔗"),
    ThemeInfo("blue", "Deep Blue", "Navy & midnight tones", "🌊"),
    ThemeInfo("green-brown", "Earth Tones", "Warm charcoal & brown", "🏔️"),
    ThemeInfo("black", "Pure Black", "Classic dark theme", "🌚"),
    ThemeInfo("neutral", "Neutral Gray", "Balanced dark grays", "🌫️"),
)


def get_available_themes() -> dict[str, list[dict[str, str]]]:
    return {
        "grayThemes": [theme.to_dict() for theme in GRAY_THEMES],
        "backgroundThemes": [theme.to_dict() for theme in BACKGROUND_THEMES],
    }
