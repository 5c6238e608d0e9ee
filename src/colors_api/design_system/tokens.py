"""Fixed design tokens.

These groups do not depend on the seed colors. Values are absolute
colors or ``var(--name)`` references to other palette variables and are
emitted verbatim by every exporter.

Each row is (name, light, dark, description).
"""

from typing import Final

from colors_api.domain.colors import ColorShade

TokenRow = tuple[str, str, str, str]


def _rows_to_shades(rows: tuple[TokenRow, ...]) -> tuple[ColorShade, ...]:
    return tuple(ColorShade(*row) for row in rows)


# =============================================================================
# Text, icon, border and card
# =============================================================================

TEXT_TOKENS: Final[tuple[TokenRow, ...]] = (
    ("txt-01", "#0C111D", "#FFFFFF", "Primary text color"),
    ("txt-02", "#575E6F", "#C1C6DC", "Secondary text color"),
    ("txt-03", "var(--primary-05)", "var(--primary-06)", "Accent text color"),
    ("txt-04", "var(--secondary-05)", "var(--secondary-06)", "Secondary accent text color"),
)

ICON_TOKENS: Final[tuple[TokenRow, ...]] = (
    ("icon-01", "#0C111D", "#FFFFFF", "Primary icon color"),
    ("icon-02", "var(--gray-05)", "var(--gray-07)", "Secondary icon color"),
    ("icon-03", "var(--secondary-05)", "var(--secondary-06)", "Tertiary icon color"),
    ("icon-04", "var(--primary-06)", "var(--primary-06)", "Quaternary icon color"),
)

BORDER_TOKENS: Final[tuple[TokenRow, ...]] = (
    ("border-primary", "var(--transparent-04)", "var(--transparent-04)", "Primary border color"),
    ("border-secondary", "var(--bg-senary)", "var(--bg-senary)", "Secondary border color"),
    ("border-tertiary", "var(--bg-senary_alt)", "var(--bg-senary_alt)", "Tertiary border color"),
    ("border-active", "var(--primary-05)", "var(--primary-06)", "Active border color"),
)

CARD_TOKENS: Final[tuple[TokenRow, ...]] = (
    ("card-bg-01", "var(--bg-quinary_alt)", "var(--bg-quinary_alt)", "Card background 01"),
    ("card-bg-02", "var(--secondary-06)", "var(--gray-02)", "Card background 02"),
    ("card-bg-03", "var(--secondary-06)", "var(--gray-03)", "Card background 03"),
    ("card-bg-04", "var(--bg-senary)", "var(--bg-senary)", "Card background 04"),
)

# =============================================================================
# Inputs
# =============================================================================

INPUT_TOKENS: Final[tuple[TokenRow, ...]] = (
    ("inp-bg-default", "var(--gray-01)", "var(--bg-quinary_alt)", "Input background default"),
    ("inp-bg-hover", "var(--bg-senary)", "var(--bg-senary)", "Input background hover"),
    ("inp-bg-pressed", "var(--bg-quinary)", "var(--bg-quinary)", "Input background pressed"),
    ("inp-bg-disabled", "var(--transparent-02)", "var(--transparent-02)", "Input background disabled"),
    ("inp-text-default", "var(--transparent-04)", "var(--transparent-04)", "Input text default"),
    ("inp-text-hover", "var(--transparent-10)", "var(--transparent-10)", "Input text hover"),
    ("inp-text-pressed", "var(--txt-01)", "var(--txt-01)", "Input text pressed"),
    ("inp-text-disabled", "var(--transparent-03)", "var(--transparent-03)", "Input text disabled"),
    ("inp-icon-default", "var(--txt-01)", "var(--txt-01)", "Input icon default"),
    ("inp-icon-hover", "var(--primary-05)", "var(--primary-05)", "Input icon hover"),
    ("inp-icon-pressed", "var(--primary-07)", "var(--primary-07)", "Input icon pressed"),
    ("inp-icon-disabled", "var(--transparent-03)", "var(--transparent-03)", "Input icon disabled"),
)

# =============================================================================
# Navigation
# =============================================================================

HEADER_TOKENS: Final[tuple[TokenRow, ...]] = (
    # Main navigation
    ("nav-main-bg", "var(--bg-quinary_alt)", "var(--bg-quinary_alt)", "Main navigation background"),
    ("nav-main-sticky-bg", "var(--white)", "var(--transparent-07)", "Main navigation sticky background"),
    ("nav-main-txt", "var(--black)", "var(--white)", "Main navigation text"),
    ("nav-main-sticky-txt", "var(--white)", "var(--white)", "Main navigation sticky text"),
    ("nav-main-border", "var(--transparent-01)", "var(--transparent-01)", "Main navigation border"),
    ("nav-main-sticky-border", "var(--transparent-02)", "var(--transparent-02)", "Main navigation sticky border"),
    # Bottom navigation
    ("nav-bottom-bg", "var(--bg-senary_alt)", "var(--bg-senary)", "Bottom navigation background"),
    ("nav-bottom-sticky-bg", "var(--white)", "var(--white)", "Bottom navigation sticky background"),
    ("nav-bottom-txt", "var(--black)", "var(--white)", "Bottom navigation text"),
    ("nav-bottom-sticky-txt", "var(--white)", "var(--white)", "Bottom navigation sticky text"),
    ("nav-bottom-border", "var(--transparent-01)", "var(--transparent-01)", "Bottom navigation border"),
    ("nav-bottom-sticky-border", "var(--white)", "var(--white)", "Bottom navigation sticky border"),
    # Promotion
    ("nav-promotion-bg", "var(--secondary-06)", "var(--secondary-06)", "Navigation promotion background"),
    ("nav-promotion-txt", "var(--white)", "var(--white)", "Navigation promotion text"),
)

ODDS_TOKENS: Final[tuple[TokenRow, ...]] = (
    ("odd-bg-column-1", "var(--gray-03)", "var(--secondary-04)", "Odds column 1 background"),
    ("odd-bg-column-2", "var(--gray-02)", "var(--secondary-03)", "Odds column 2 background"),
    ("odd-title", "var(--bg-quinary_alt)", "var(--bg-quinary_alt)", "Odds title background"),
    ("odd-bg-red", "var(--error-04)", "var(--error-02)", "Odds red background"),
    ("odd-bg-green", "var(--success-04)", "var(--success-02)", "Odds green background"),
    ("odd-bg-disabled", "var(--bg-senary)", "var(--bg-senary)", "Odds disabled background"),
    ("odd-bg-hover", "var(--gray-04)", "var(--secondary-02)", "Odds hover background"),
)

SIDEBAR_NAV_TOKENS: Final[tuple[TokenRow, ...]] = (
    ("sidebar-item-icon-default", "var(--gray-07)", "var(--gray-08)", "Sidebar nav item icon default"),
    ("sidebar-item-icon-hover", "var(--gray-06)", "var(--gray-09)", "Sidebar nav item icon hover"),
    ("sidebar-item-icon-active", "var(--primary-06)", "var(--primary-06)", "Sidebar nav item icon active"),
    ("sidebar-item-icon-bg-default", "var(--transparent-01)", "var(--transparent-01)", "Sidebar nav item icon background default"),
    ("sidebar-item-icon-bg-hover", "var(--transparent-02)", "var(--transparent-02)", "Sidebar nav item icon background hover"),
    ("sidebar-item-icon-bg-active", "var(--primary-10)", "var(--primary-10)", "Sidebar nav item icon background active"),
    ("sidebar-item-text-default", "var(--gray-08)", "var(--gray-08)", "Sidebar nav item text default"),
    ("sidebar-item-text-hover", "var(--gray-06)", "var(--gray-09)", "Sidebar nav item text hover"),
    ("sidebar-item-text-active", "var(--primary-06)", "var(--primary-06)", "Sidebar nav item text active"),
    ("sidebar-item-bg-default", "var(--transparent-0-bg)", "var(--transparent-0-bg)", "Sidebar nav item background default"),
    ("sidebar-item-bg-hover", "var(--transparent-02)", "var(--transparent-02)", "Sidebar nav item background hover"),
    ("sidebar-item-bg-active", "var(--primary-10)", "var(--primary-10)", "Sidebar nav item background active"),
)

# =============================================================================
# Transparency
# =============================================================================

WHITE_OVERLAY_LEVELS: Final[tuple[tuple[str, str], ...]] = (
    ("01", "0.03"),
    ("02", "0.07"),
    ("03", "0.1"),
    ("04", "0.15"),
    ("05", "0.2"),
    ("06", "0.25"),
    ("07", "0.3"),
    ("08", "0.35"),
    ("09", "0.4"),
    ("10", "0.45"),
)

ACCENT_TRANSPARENCY_TOKENS: Final[tuple[TokenRow, ...]] = (
    ("transparent-primary-10", "rgba(250, 121, 30, 0.1)", "rgba(250, 121, 30, 0.1)", "Primary color 10% transparency"),
    ("transparent-primary-50", "rgba(250, 121, 30, 0.5)", "rgba(250, 121, 30, 0.5)", "Primary color 50% transparency"),
    ("transparent-warning-10", "rgba(247, 144, 9, 0.1)", "rgba(247, 144, 9, 0.1)", "Warning color 10% transparency"),
    ("transparent-error-10", "rgba(240, 68, 56, 0.1)", "rgba(240, 68, 56, 0.1)", "Error color 10% transparency"),
    ("transparent-0-bg", "rgba(12, 17, 29, 0)", "rgba(12, 17, 29, 0)", "Transparent background 0%"),
    ("transparent-50-bg", "rgba(12, 17, 29, 0.5)", "rgba(12, 17, 29, 0.5)", "Transparent background 50%"),
)

TINT_PERCENTAGES: Final[tuple[int, ...]] = (10, 20, 30, 40, 50)
INK_RGB: Final = "12, 17, 29"
WHITE_RGB: Final = "255, 255, 255"
SHADOW_TOKEN: Final[TokenRow] = (
    "shadow-01",
    "rgba(0, 0, 0, 0.2)",
    "rgba(0, 0, 0, 0.2)",
    "Shadow transparency 01",
)


def _opacity(percent: int) -> str:
    """Render 10 as ``0.1`` and 50 as ``0.5``, never ``0.10``."""
    return f"{percent / 100:g}"


def _transparency_rows() -> tuple[TokenRow, ...]:
    rows: list[TokenRow] = []
    for level, opacity in WHITE_OVERLAY_LEVELS:
        value = f"rgba({WHITE_RGB}, {opacity})"
        rows.append((f"transparent-{level}", value, value, f"Transparency level {level}"))
    rows.extend(ACCENT_TRANSPARENCY_TOKENS)
    for percent in TINT_PERCENTAGES:
        value = f"rgba({INK_RGB}, {_opacity(percent)})"
        rows.append((f"black-{percent}", value, value, f"Black {percent}% transparency"))
    for percent in TINT_PERCENTAGES:
        value = f"rgba({WHITE_RGB}, {_opacity(percent)})"
        rows.append((f"white-{percent}", value, value, f"White {percent}% transparency"))
    rows.append(SHADOW_TOKEN)
    return tuple(rows)


TRANSPARENCY_TOKENS: Final[tuple[TokenRow, ...]] = _transparency_rows()


def generate_text_colors() -> tuple[ColorShade, ...]:
    return _rows_to_shades(TEXT_TOKENS)


def generate_icon_colors() -> tuple[ColorShade, ...]:
    return _rows_to_shades(ICON_TOKENS)


def generate_border_colors() -> tuple[ColorShade, ...]:
    return _rows_to_shades(BORDER_TOKENS)


def generate_card_colors() -> tuple[ColorShade, ...]:
    return _rows_to_shades(CARD_TOKENS)


def generate_input_colors() -> tuple[ColorShade, ...]:
    return _rows_to_shades(INPUT_TOKENS)


def generate_header_colors() -> tuple[ColorShade, ...]:
    return _rows_to_shades(HEADER_TOKENS)


def generate_odds_colors() -> tuple[ColorShade, ...]:
    return _rows_to_shades(ODDS_TOKENS)


def generate_sidebar_nav_colors() -> tuple[ColorShade, ...]:
    return _rows_to_shades(SIDEBAR_NAV_TOKENS)


def generate_transparency_colors() -> tuple[ColorShade, ...]:
    return _rows_to_shades(TRANSPARENCY_TOKENS)
