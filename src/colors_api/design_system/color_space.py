"""Color-space conversion helpers.

Hex strings are always ``#rrggbb``. HSL triples use degrees for hue
(0-360) and percentages for saturation and lightness (0-100), which is
the scale every generator in this package works in.
"""

import math
import re
from typing import Final

from colors_api.exceptions import InvalidColorFormatError

HEX_COLOR_PATTERN: Final = re.compile(r"^#[0-9A-Fa-f]{6}$")
_RGB_FUNCTION_PATTERN: Final = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([\d.]+)\s*)?\)$"
)

WHITE_TEXT: Final = "#FFFFFF"
BLACK_TEXT: Final = "#000000"


def is_valid_hex_color(value: object) -> bool:
    """Return True for ``#`` followed by exactly six hex digits."""
    return isinstance(value, str) and HEX_COLOR_PATTERN.match(value) is not None


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    if not is_valid_hex_color(hex_color):
        raise InvalidColorFormatError(hex_color)
    return (
        int(hex_color[1:3], 16),
        int(hex_color[3:5], 16),
        int(hex_color[5:7], 16),
    )


def hex_to_hsl(hex_color: str) -> tuple[float, float, float]:
    """Convert ``#rrggbb`` to (hue, saturation, lightness).

    Raises:
        InvalidColorFormatError: If the value is not a six digit hex color.
    """
    r, g, b = (channel / 255 for channel in hex_to_rgb(hex_color))

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)

        # Ties resolve red first, then green.
        if high == r:
            hue = (g - b) / delta + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
        hue /= 6

    return hue * 360, saturation * 100, lightness * 100


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _channel_to_hex(channel: float) -> str:
    # Half-up rounding; Python's round() would round half to even.
    value = math.floor(channel * 255 + 0.5)
    return f"{min(max(value, 0), 255):02x}"


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Convert HSL to a lowercase ``#rrggbb`` string.

    Inputs are not range checked. Channels are clamped to 0..255 after
    rounding.
    """
    h = hue / 360
    s = saturation / 100
    lum = lightness / 100

    q = lum * (1 + s) if lum < 0.5 else lum + s - lum * s
    p = 2 * lum - q

    red = _hue_to_rgb(p, q, h + 1 / 3)
    green = _hue_to_rgb(p, q, h)
    blue = _hue_to_rgb(p, q, h - 1 / 3)

    return f"#{_channel_to_hex(red)}{_channel_to_hex(green)}{_channel_to_hex(blue)}"


def parse_color_channels(value: str) -> tuple[int, int, int, float] | None:
    """Parse a hex or ``rgb()``/``rgba()`` literal into (r, g, b, alpha).

    Returns None for anything that cannot be resolved locally, such as a
    ``var(--name)`` reference.
    """
    if is_valid_hex_color(value):
        r, g, b = hex_to_rgb(value)
        return r, g, b, 1.0

    match = _RGB_FUNCTION_PATTERN.match(value.strip())
    if match is None:
        return None

    r, g, b = (min(int(part), 255) for part in match.group(1, 2, 3))
    alpha = float(match.group(4)) if match.group(4) is not None else 1.0
    return r, g, b, min(max(alpha, 0.0), 1.0)


def relative_luminance(r: int, g: int, b: int) -> float:
    """Perceived brightness on the 0-255 scale."""
    return 0.299 * r + 0.587 * g + 0.114 * b


def get_optimal_text_color(background: str) -> str:
    """Pick white or black text for a background color.

    Backgrounds that cannot be resolved (``var(--...)`` references) get
    black text.
    """
    channels = parse_color_channels(background)
    if channels is None:
        return BLACK_TEXT

    r, g, b, _ = channels
    if relative_luminance(r, g, b) / 255 < 0.5:
        return WHITE_TEXT
    return BLACK_TEXT
