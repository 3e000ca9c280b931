"""Turn raw hex strings into annotated color samples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .colors import hex_to_hsl, is_valid_hex, normalize_hex_color


@dataclass(slots=True, frozen=True)
class ColorSample:
    """A validated palette color with its HSL coordinates."""

    hex: str
    hue: float
    saturation: float
    lightness: float

    @classmethod
    def from_hex(cls, color: str) -> "ColorSample":
        normalized = normalize_hex_color(color) or "#000000"
        hue, saturation, lightness = hex_to_hsl(normalized)
        return cls(hex=normalized, hue=hue, saturation=saturation, lightness=lightness)


def analyze_colors(colors: Iterable[object]) -> List[ColorSample]:
    """Validate, normalize and annotate ``colors``, preserving order.

    Entries that are not 3- or 6-digit hex strings are dropped silently.
    """

    return [ColorSample.from_hex(color) for color in colors if is_valid_hex(color)]


def vibrancy_score(sample: ColorSample) -> float:
    """Score how strongly a color can carry brand identity (0 to ~1).

    Near-white (> 85) and near-black (< 15) colors score zero. Otherwise the
    score is the saturation weighted towards mid lightness, with a floor of
    half the saturation for colors far from L=50.
    """

    if sample.lightness > 85 or sample.lightness < 15:
        return 0.0
    proximity = 1 - abs(sample.lightness - 50) / 50
    return sample.saturation / 100 * (0.5 + 0.5 * proximity)


def is_distinct_hue(first: float, second: float, threshold: float = 30) -> bool:
    """True when two hues are more than ``threshold`` degrees apart on the wheel."""

    diff = abs(first - second)
    return threshold < diff < 360 - threshold
