"""Tests for fixed token groups and button families."""

import pytest

from colors_api.design_system.color_space import BLACK_TEXT, WHITE_TEXT
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


def _by_name(shades) -> dict:
    return {shade.name: shade for shade in shades}


class TestFixedTokenGroups:
    @pytest.mark.parametrize(
        "generator,count",
        [
            (generate_text_colors, 4),
            (generate_icon_colors, 4),
            (generate_border_colors, 4),
            (generate_card_colors, 4),
            (generate_input_colors, 12),
            (generate_header_colors, 14),
            (generate_odds_colors, 7),
            (generate_sidebar_nav_colors, 12),
            (generate_transparency_colors, 27),
        ],
    )
    def test_group_sizes(self, generator, count: int) -> None:
        assert len(generator()) == count

    def test_text_tokens(self) -> None:
        text = _by_name(generate_text_colors())

        assert text["txt-01"].light == "#0C111D"
        assert text["txt-01"].dark == "#FFFFFF"
        assert text["txt-03"].light == "var(--primary-05)"
        assert text["txt-03"].dark == "var(--primary-06)"

    def test_references_are_kept_verbatim(self) -> None:
        borders = _by_name(generate_border_colors())

        assert borders["border-primary"].light == "var(--transparent-04)"

    def test_header_covers_main_bottom_and_promotion(self) -> None:
        names = [shade.name for shade in generate_header_colors()]

        assert names[0] == "nav-main-bg"
        assert "nav-bottom-sticky-border" in names
        assert names[-1] == "nav-promotion-txt"


class TestTransparency:
    def test_white_overlay_levels(self) -> None:
        shades = _by_name(generate_transparency_colors())

        assert shades["transparent-01"].light == "rgba(255, 255, 255, 0.03)"
        assert shades["transparent-03"].light == "rgba(255, 255, 255, 0.1)"
        assert shades["transparent-10"].dark == "rgba(255, 255, 255, 0.45)"

    def test_tints_render_short_opacity(self) -> None:
        shades = _by_name(generate_transparency_colors())

        assert shades["black-10"].light == "rgba(12, 17, 29, 0.1)"
        assert shades["black-50"].light == "rgba(12, 17, 29, 0.5)"
        assert shades["white-20"].dark == "rgba(255, 255, 255, 0.2)"

    def test_accent_and_shadow_entries(self) -> None:
        shades = generate_transparency_colors()
        by_name = _by_name(shades)

        assert by_name["transparent-0-bg"].light == "rgba(12, 17, 29, 0)"
        assert shades[-1].name == "shadow-01"
        assert shades[-1].light == "rgba(0, 0, 0, 0.2)"

    def test_light_and_dark_are_identical(self) -> None:
        for shade in generate_transparency_colors():
            assert shade.light == shade.dark


class TestSeededButtons:
    def test_sixteen_entries_in_four_blocks(self) -> None:
        names = [shade.name for shade in generate_primary_button_colors("#3b82f6")]

        assert len(names) == 16
        assert names[:4] == [
            "btn-primary-bg-default",
            "btn-primary-bg-hover",
            "btn-primary-bg-pressed",
            "btn-primary-bg-disabled",
        ]
        assert names[4] == "btn-primary-text-default"
        assert names[8] == "btn-primary-icon-default"
        assert names[12] == "btn-primary-border-default"

    def test_backgrounds_reference_shade_scale(self) -> None:
        colors = _by_name(generate_secondary_button_colors("#10b981"))

        assert colors["btn-secondary-bg-default"].light == "var(--secondary-05)"
        assert colors["btn-secondary-bg-hover"].light == "var(--secondary-06)"
        assert colors["btn-secondary-bg-pressed"].light == "var(--secondary-07)"
        assert colors["btn-secondary-bg-disabled"].light == "var(--secondary-09)"

    def test_text_contrasts_with_seed(self) -> None:
        dark_seed = _by_name(generate_primary_button_colors("#1e3a8a"))
        light_seed = _by_name(generate_primary_button_colors("#fde68a"))

        assert dark_seed["btn-primary-text-default"].light == WHITE_TEXT
        assert light_seed["btn-primary-text-default"].light == BLACK_TEXT

    def test_icons_and_borders_chain_to_text_and_background(self) -> None:
        colors = _by_name(generate_primary_button_colors("#3b82f6"))

        assert colors["btn-primary-icon-hover"].light == "var(--btn-primary-text-hover)"
        assert colors["btn-primary-border-pressed"].dark == "var(--btn-primary-bg-pressed)"


class TestNeutralButtons:
    def test_tertiary_default_text_is_black_for_reference_background(self) -> None:
        colors = _by_name(generate_tertiary_button_colors())

        assert colors["btn-tertiary-bg-default"].light == "var(--white)"
        assert colors["btn-tertiary-text-default"].light == BLACK_TEXT
        assert colors["btn-tertiary-text-hover"].light == "var(--primary-05)"
        assert colors["btn-tertiary-border-disabled"].light == (
            "var(--btn-tertiary-bg-disabled)"
        )

    def test_quaternary(self) -> None:
        colors = _by_name(generate_quaternary_button_colors())

        assert len(colors) == 16
        assert colors["btn-quaternary-bg-default"].light == "var(--black)"
        assert colors["btn-quaternary-text-disabled"].light == "var(--gray-04)"
        assert colors["btn-quaternary-border-hover"].light == (
            "var(--btn-quaternary-bg-hover)"
        )


class TestStatusButtons:
    @pytest.mark.parametrize(
        "generator,prefix,expected",
        [
            (generate_quinary_button_colors, "btn-quinary", ["#FFFFFF", "#FFFFFF", "#FFFFFF", "#000000"]),
            (generate_senary_button_colors, "btn-senary", ["#FFFFFF", "#000000", "#FFFFFF", "#000000"]),
            (generate_septenary_button_colors, "btn-septenary", ["#FFFFFF", "#FFFFFF", "#FFFFFF", "#000000"]),
        ],
    )
    def test_text_colors_per_state(self, generator, prefix: str, expected: list[str]) -> None:
        colors = _by_name(generator())
        states = ["default", "hover", "pressed", "disabled"]

        assert [colors[f"{prefix}-text-{state}"].light for state in states] == expected

    def test_borders_repeat_backgrounds(self) -> None:
        colors = _by_name(generate_quinary_button_colors())

        assert colors["btn-quinary-bg-default"].light == "rgba(240, 68, 56, 1)"
        assert colors["btn-quinary-border-default"].light == "rgba(240, 68, 56, 1)"

    def test_icons_are_white_until_disabled(self) -> None:
        colors = _by_name(generate_septenary_button_colors())

        assert colors["btn-septenary-icon-hover"].light == "rgba(255, 255, 255, 1)"
        assert colors["btn-septenary-icon-disabled"].light == "rgba(236, 253, 243, 1)"

    def test_description_puts_state_first(self) -> None:
        colors = _by_name(generate_senary_button_colors())

        assert colors["btn-senary-text-hover"].description == "Senary button hover text"


class TestSidebarButtons:
    def test_twenty_two_entries(self) -> None:
        assert len(generate_sidebar_button_colors()) == 22

    def test_active_backgrounds_per_variant(self) -> None:
        colors = _by_name(generate_sidebar_button_colors())

        assert colors["sidebar-primary-btn-bg-active"].light == "var(--success-06)"
        assert colors["sidebar-secondary-btn-bg-active"].light == "var(--warning-06)"
        assert colors["sidebar-tertiary-btn-bg-active"].light == "var(--primary-06)"

    def test_text_over_references_is_black(self) -> None:
        colors = _by_name(generate_sidebar_button_colors())

        assert colors["sidebar-primary-btn-text-default"].light == BLACK_TEXT
        assert colors["sidebar-primary-btn-text-default"].description == (
            "Sidebar primary button text default - WCAG optimized"
        )

    def test_icon_entries_differ_by_mode(self) -> None:
        colors = _by_name(generate_sidebar_button_colors())

        assert colors["sidebar-button-icon-default"].light == "var(--gray-07)"
        assert colors["sidebar-button-icon-default"].dark == "var(--gray-08)"
