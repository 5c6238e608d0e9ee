"""Tests for theme harmony resolution."""

import pytest

from colors_api.design_system.color_space import hex_to_hsl
from colors_api.design_system.themes import (
    BACKGROUND_THEMES,
    GRAY_THEMES,
    MIN_BACKGROUND_SATURATION,
    get_available_themes,
    parse_theme_option,
    resolve_background_base,
    resolve_gray_base,
    resolve_theme_harmony,
)
from colors_api.domain.colors import ThemeOption
from colors_api.exceptions import InvalidThemeOptionError


class TestParseThemeOption:
    @pytest.mark.parametrize("value", ["auto", "blue", "green-brown", "black", "neutral"])
    def test_accepts_known_keywords(self, value: str) -> None:
        assert parse_theme_option(value).value == value

    def test_passes_enum_through(self) -> None:
        assert parse_theme_option(ThemeOption.BLUE) is ThemeOption.BLUE

    def test_unknown_keyword_raises_with_field(self) -> None:
        with pytest.raises(InvalidThemeOptionError) as exc_info:
            parse_theme_option("purple", field="grayTheme")

        error = exc_info.value
        assert error.status_code == 400
        assert error.context["field"] == "grayTheme"
        assert "neutral" in error.context["allowed"]
        assert "grayTheme" in error.message


class TestResolveThemeHarmony:
    def test_auto_has_no_fixed_harmony(self) -> None:
        assert resolve_theme_harmony("auto", "#3b82f6") is None

    def test_blue_caps_saturation(self) -> None:
        harmony = resolve_theme_harmony("blue", "#3b82f6")

        assert harmony is not None
        assert harmony.hue == 220
        assert harmony.gray_saturation == 25
        assert harmony.background_saturation == 35

    def test_green_brown_scales_low_saturation_primary(self) -> None:
        _, saturation, _ = hex_to_hsl("#806060")
        harmony = resolve_theme_harmony("green-brown", "#806060")

        assert harmony is not None
        assert harmony.hue == 30
        assert harmony.gray_saturation == pytest.approx(saturation * 0.25)
        assert harmony.background_saturation == pytest.approx(saturation * 0.35)

    @pytest.mark.parametrize("theme", ["black", "neutral"])
    def test_monochrome_themes_have_no_saturation(self, theme: str) -> None:
        harmony = resolve_theme_harmony(theme, "#3b82f6")

        assert harmony is not None
        assert harmony.gray_saturation == 0
        assert harmony.background_saturation == 0


class TestResolveGrayBase:
    def test_auto_blue_primary_keeps_its_hue(self) -> None:
        hue, _, _ = hex_to_hsl("#3b82f6")
        base = resolve_gray_base("auto", "#3b82f6")

        assert base.hue == pytest.approx(hue)
        assert base.saturation == 25
        assert base.label == "primary-hue (auto)"

    def test_auto_yellow_primary_is_warm(self) -> None:
        base = resolve_gray_base("auto", "#ffff00")

        assert base.hue == 30
        assert base.saturation == 20
        assert base.label == "warm (auto)"

    def test_auto_red_primary_is_cool(self) -> None:
        base = resolve_gray_base("auto", "#ff0000")

        assert base.hue == 220
        assert base.saturation == 25
        assert base.label == "cool (auto)"

    def test_explicit_theme_uses_description_as_label(self) -> None:
        base = resolve_gray_base(ThemeOption.NEUTRAL, "#ff0000")

        assert base.saturation == 0
        assert base.label == "Pure balanced grays"


class TestResolveBackgroundBase:
    @pytest.mark.parametrize(
        "primary,hue,saturation,label",
        [
            ("#ff0000", 210, 35, "cool-complement (auto)"),
            ("#00ff00", 200, 25, "cool-balance (auto)"),
            ("#0000ff", 255, 35, "analogous-blue (auto)"),
            ("#5500ff", 220, 40, "monochromatic-deep (auto)"),
        ],
    )
    def test_auto_buckets(
        self, primary: str, hue: float, saturation: float, label: str
    ) -> None:
        base = resolve_background_base("auto", primary)

        assert base.hue == pytest.approx(hue)
        assert base.saturation == pytest.approx(saturation)
        assert base.label == label

    def test_magenta_gets_complementary_blue(self) -> None:
        base = resolve_background_base("auto", "#ff00aa")

        assert base.hue == 220
        assert base.label == "complementary-blue (auto)"

    def test_gray_primary_is_floored(self) -> None:
        base = resolve_background_base("auto", "#808080")

        assert base.saturation == MIN_BACKGROUND_SATURATION

    def test_explicit_theme_matches_gray(self) -> None:
        base = resolve_background_base("black", "#3b82f6")

        assert base.hue == 0
        assert base.saturation == MIN_BACKGROUND_SATURATION
        assert base.label == "Pure monochrome classic (matches gray)"


class TestThemeListings:
    def test_five_themes_each(self) -> None:
        assert [t.id for t in GRAY_THEMES] == [o.value for o in ThemeOption]
        assert [t.id for t in BACKGROUND_THEMES] == [o.value for o in ThemeOption]

    def test_available_themes_shape(self) -> None:
        themes = get_available_themes()

        assert set(themes) == {"grayThemes", "backgroundThemes"}
        assert themes["grayThemes"][0] == {
            "id": "auto",
            "name": "Smart Auto",
            "description": "Based on primary color",
            "icon": "🔗",
        }
