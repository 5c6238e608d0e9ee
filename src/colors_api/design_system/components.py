"""Component color groups: buttons and sidebar buttons.

Every button family has 16 entries in four blocks of four states:
background, text, icon and border. Text colors are computed with
get_optimal_text_color against the background they sit on.
"""

from dataclasses import dataclass
from typing import Final

from colors_api.design_system.color_space import get_optimal_text_color
from colors_api.design_system.shades import generate_shades
from colors_api.domain.colors import ColorShade

BUTTON_STATES: Final = ("default", "hover", "pressed", "disabled")

# Seed shade steps backing the default/hover/pressed/disabled backgrounds.
SEEDED_BUTTON_STEPS: Final = (5, 6, 7, 9)


def _var(name: str) -> str:
    return f"var(--{name})"


def _same(name: str, value: str, description: str) -> ColorShade:
    return ColorShade(name, value, value, description)


def _seeded_button_colors(seed_hex: str, group: str) -> tuple[ColorShade, ...]:
    """Buttons whose backgrounds reference the seed's shade scale."""
    shades = generate_shades(seed_hex, group)
    title = group.capitalize()
    prefix = f"btn-{group}"

    backgrounds = [_var(f"{group}-{step:02d}") for step in SEEDED_BUTTON_STEPS]
    texts = [get_optimal_text_color(shades[step - 1].light) for step in SEEDED_BUTTON_STEPS]

    colors: list[ColorShade] = []
    for state, value in zip(BUTTON_STATES, backgrounds):
        colors.append(_same(f"{prefix}-bg-{state}", value, f"{title} button background {state}"))
    for state, value in zip(BUTTON_STATES, texts):
        colors.append(_same(f"{prefix}-text-{state}", value, f"{title} button text {state}"))
    for state in BUTTON_STATES:
        colors.append(
            _same(f"{prefix}-icon-{state}", _var(f"{prefix}-text-{state}"), f"{title} button icon {state}")
        )
    for state in BUTTON_STATES:
        colors.append(
            _same(f"{prefix}-border-{state}", _var(f"{prefix}-bg-{state}"), f"{title} button border {state}")
        )
    return tuple(colors)


def generate_primary_button_colors(primary_hex: str) -> tuple[ColorShade, ...]:
    return _seeded_button_colors(primary_hex, "primary")


def generate_secondary_button_colors(secondary_hex: str) -> tuple[ColorShade, ...]:
    return _seeded_button_colors(secondary_hex, "secondary")


# =============================================================================
# Neutral buttons
# =============================================================================


@dataclass(frozen=True)
class NeutralButton:
    """A button family built from palette references.

    Only the default text color is computed; the other text states are
    fixed references.
    """

    name: str
    backgrounds: tuple[str, str, str, str]
    text_states: tuple[str, str, str]
    borders: tuple[str, str, str, str]

    def colors(self) -> tuple[ColorShade, ...]:
        title = self.name.capitalize()
        prefix = f"btn-{self.name}"
        texts = (get_optimal_text_color(self.backgrounds[0]), *self.text_states)

        colors: list[ColorShade] = []
        for state, value in zip(BUTTON_STATES, self.backgrounds):
            colors.append(_same(f"{prefix}-bg-{state}", value, f"{title} button background {state}"))
        for state, value in zip(BUTTON_STATES, texts):
            colors.append(_same(f"{prefix}-text-{state}", value, f"{title} button text {state}"))
        for state in BUTTON_STATES:
            colors.append(
                _same(f"{prefix}-icon-{state}", _var(f"{prefix}-text-{state}"), f"{title} button icon {state}")
            )
        for state, value in zip(BUTTON_STATES, self.borders):
            colors.append(_same(f"{prefix}-border-{state}", value, f"{title} button border {state}"))
        return tuple(colors)


TERTIARY_BUTTON: Final = NeutralButton(
    name="tertiary",
    backgrounds=(_var("white"), _var("gray-01"), _var("gray-02"), _var("white")),
    text_states=(_var("primary-05"), _var("primary-06"), _var("gray-02")),
    borders=(_var("gray-02"), _var("gray-03"), _var("gray-04"), _var("btn-tertiary-bg-disabled")),
)

QUATERNARY_BUTTON: Final = NeutralButton(
    name="quaternary",
    backgrounds=(_var("black"), _var("gray-09"), _var("gray-08"), _var("gray-06")),
    text_states=(_var("primary-05"), _var("primary-04"), _var("gray-04")),
    borders=(
        _var("gray-08"),
        _var("btn-quaternary-bg-hover"),
        _var("btn-quaternary-bg-pressed"),
        _var("btn-quaternary-bg-disabled"),
    ),
)


def generate_tertiary_button_colors() -> tuple[ColorShade, ...]:
    return TERTIARY_BUTTON.colors()


def generate_quaternary_button_colors() -> tuple[ColorShade, ...]:
    return QUATERNARY_BUTTON.colors()


# =============================================================================
# Status buttons
# =============================================================================


@dataclass(frozen=True)
class StatusButton:
    """A button family with literal rgba backgrounds.

    Borders repeat the backgrounds. Descriptions put the state before the
    part ("Quinary button hover text").
    """

    name: str
    backgrounds: tuple[str, str, str, str]
    disabled_icon: str

    def colors(self) -> tuple[ColorShade, ...]:
        title = self.name.capitalize()
        prefix = f"btn-{self.name}"
        icons = ("rgba(255, 255, 255, 1)",) * 3 + (self.disabled_icon,)

        colors: list[ColorShade] = []
        for state, value in zip(BUTTON_STATES, self.backgrounds):
            colors.append(_same(f"{prefix}-bg-{state}", value, f"{title} button {state} background"))
        for state, value in zip(BUTTON_STATES, self.backgrounds):
            colors.append(
                _same(f"{prefix}-text-{state}", get_optimal_text_color(value), f"{title} button {state} text")
            )
        for state, value in zip(BUTTON_STATES, icons):
            colors.append(_same(f"{prefix}-icon-{state}", value, f"{title} button {state} icon"))
        for state, value in zip(BUTTON_STATES, self.backgrounds):
            colors.append(_same(f"{prefix}-border-{state}", value, f"{title} button {state} border"))
        return tuple(colors)


QUINARY_BUTTON: Final = StatusButton(
    name="quinary",
    backgrounds=(
        "rgba(240, 68, 56, 1)",
        "rgba(217, 45, 32, 1)",
        "rgba(180, 35, 24, 1)",
        "rgba(254, 243, 242, 1)",
    ),
    disabled_icon="rgba(254, 228, 226, 1)",
)

SENARY_BUTTON: Final = StatusButton(
    name="senary",
    backgrounds=(
        "rgba(46, 144, 250, 1)",
        "rgba(83, 177, 253, 1)",
        "rgba(21, 112, 239, 1)",
        "rgba(209, 233, 255, 1)",
    ),
    disabled_icon="rgba(239, 248, 255, 1)",
)

SEPTENARY_BUTTON: Final = StatusButton(
    name="septenary",
    backgrounds=(
        "rgba(23, 178, 106, 1)",
        "rgba(7, 148, 85, 1)",
        "rgba(6, 118, 71, 1)",
        "rgba(220, 250, 230, 1)",
    ),
    disabled_icon="rgba(236, 253, 243, 1)",
)


def generate_quinary_button_colors() -> tuple[ColorShade, ...]:
    return QUINARY_BUTTON.colors()


def generate_senary_button_colors() -> tuple[ColorShade, ...]:
    return SENARY_BUTTON.colors()


def generate_septenary_button_colors() -> tuple[ColorShade, ...]:
    return SEPTENARY_BUTTON.colors()


# =============================================================================
# Sidebar buttons
# =============================================================================

# (variant, active background)
SIDEBAR_BUTTON_VARIANTS: Final = (
    ("primary", _var("success-06")),
    ("secondary", _var("warning-06")),
    ("tertiary", _var("primary-06")),
)


def generate_sidebar_button_colors() -> tuple[ColorShade, ...]:
    colors: list[ColorShade] = [
        ColorShade("sidebar-button-icon-default", _var("gray-07"), _var("gray-08"), "Sidebar button icon default"),
        ColorShade("sidebar-button-icon-hover", _var("gray-06"), _var("gray-09"), "Sidebar button icon hover"),
        _same("sidebar-button-icon-active", _var("icon-01"), "Sidebar button icon active"),
        ColorShade(
            "sidebar-background-icon", _var("transparent-03"), _var("transparent-04"), "Sidebar background icon"
        ),
    ]
    for variant, active in SIDEBAR_BUTTON_VARIANTS:
        states = (("default", _var("gray-02")), ("hover", _var("gray-03")), ("active", active))
        prefix = f"sidebar-{variant}-btn"
        label = f"Sidebar {variant} button"
        for state, value in states:
            colors.append(_same(f"{prefix}-bg-{state}", value, f"{label} background {state}"))
        for state, value in states:
            colors.append(
                _same(
                    f"{prefix}-text-{state}",
                    get_optimal_text_color(value),
                    f"{label} text {state} - WCAG optimized",
                )
            )
    return tuple(colors)
