"""Utility helpers for working with color values."""

from __future__ import annotations

from typing import NamedTuple, Optional, Tuple
import colorsys
import math
import re

HEX_COLOR_REGEX = re.compile(r"^#?(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")

# Backgrounds lighter than this are treated as "light mode".
LIGHTNESS_THRESHOLD = 55

COLOR_DEFAULTS = {
    "TEXT_DARK": "#171717",
    "TEXT_LIGHT": "#FAFAFA",
    "SURFACE": "#F5F5F5",
    "PRIMARY": "#000000",
    "ACCENT": "#555555",
    "WHITE": "#FFFFFF",
}


class HSL(NamedTuple):
    """Hue in degrees (0-360), saturation and lightness in percent (0-100)."""

    hue: float
    saturation: float
    lightness: float


def is_valid_hex(value: object) -> bool:
    """Return ``True`` for 3- or 6-digit hex strings with an optional ``#``."""

    return isinstance(value, str) and HEX_COLOR_REGEX.match(value) is not None


def normalize_hex_color(color: Optional[str]) -> Optional[str]:
    """Return a normalized ``#RRGGBB`` color string or ``None`` if invalid."""

    if color is None:
        return None
    value = str(color).strip()
    if not value:
        return None
    if not HEX_COLOR_REGEX.match(value):
        return None
    if value.startswith("#"):
        value = value[1:]
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    return f"#{value.upper()}"


def hex_to_rgb(color: str) -> Optional[Tuple[int, int, int]]:
    if not is_valid_hex(color):
        return None
    value = color[1:] if color.startswith("#") else color
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    return f"#{red:02X}{green:02X}{blue:02X}"


def hex_to_hsl(color: str) -> HSL:
    """Convert a hex color to HSL.

    Invalid input yields ``HSL(0, 0, 0)`` instead of raising; callers that care
    should check :func:`is_valid_hex` first.
    """

    rgb = hex_to_rgb(color)
    if rgb is None:
        return HSL(0.0, 0.0, 0.0)
    r, g, b = (channel / 255 for channel in rgb)
    hue, lightness, saturation = colorsys.rgb_to_hls(r, g, b)
    return HSL(hue * 360, saturation * 100, lightness * 100)


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _to_channel(value: float) -> int:
    return int(max(0, min(255, math.floor(value * 255 + 0.5))))


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Convert HSL values to an uppercase ``#RRGGBB`` string."""

    h = (hue % 360) / 360
    s = _clamp(saturation) / 100
    light = _clamp(lightness) / 100
    r, g, b = colorsys.hls_to_rgb(h, light, s)
    return rgb_to_hex(_to_channel(r), _to_channel(g), _to_channel(b))


def _linearize(channel: float) -> float:
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """WCAG relative luminance of ``color``; ``0.0`` for invalid input."""

    rgb = hex_to_rgb(color)
    if rgb is None:
        return 0.0
    r_lin, g_lin, b_lin = (_linearize(channel / 255) for channel in rgb)
    return 0.2126 * r_lin + 0.7152 * g_lin + 0.0722 * b_lin


def pick_contrast_color(color: str) -> str:
    """Return black or white depending on background luminance."""

    normalized = normalize_hex_color(color)
    if not normalized:
        return COLOR_DEFAULTS["WHITE"]
    return "#000000" if relative_luminance(normalized) > 0.5 else COLOR_DEFAULTS["WHITE"]


def adaptive_text_color(
    background: str, light_color: str, dark_color: str, threshold: float = LIGHTNESS_THRESHOLD
) -> str:
    """Return ``light_color`` when ``background`` is light, else ``dark_color``."""

    return light_color if hex_to_hsl(background).lightness > threshold else dark_color
