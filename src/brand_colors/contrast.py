"""WCAG contrast helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .colors import relative_luminance


class ContrastRequirement:
    """Minimum contrast of each brand role against the background."""

    TEXT = 4.5
    PRIMARY = 3.0
    # Product choice for badges and highlights, not a WCAG level.
    ACCENT = 2.5


LARGE_TEXT_PX = 24


@dataclass(slots=True)
class ContrastResult:
    ratio: float
    aa: bool
    aaa: bool
    level: Literal["AAA", "AA", "fail"]


def contrast_ratio(color_a: str, color_b: str) -> float:
    """Return the WCAG contrast ratio between two hex colors (1 to 21)."""

    lum_a = relative_luminance(color_a)
    lum_b = relative_luminance(color_b)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def check_contrast(foreground: str, background: str, font_size: float = 16) -> ContrastResult:
    """Grade ``foreground`` on ``background`` against WCAG AA and AAA.

    Text at ``LARGE_TEXT_PX`` (18pt) or more uses the large-text thresholds.
    """

    ratio = contrast_ratio(foreground, background)
    large = font_size >= LARGE_TEXT_PX
    aa = ratio >= (3.0 if large else 4.5)
    aaa = ratio >= (4.5 if large else 7.0)
    if aaa:
        level: Literal["AAA", "AA", "fail"] = "AAA"
    elif aa:
        level = "AA"
    else:
        level = "fail"
    return ContrastResult(ratio=round(ratio, 2), aa=aa, aaa=aaa, level=level)
