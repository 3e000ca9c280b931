"""Bring text, primary and accent colors up to their contrast floors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
import logging

from .colors import hex_to_hsl, hsl_to_hex, normalize_hex_color
from .contrast import ContrastRequirement, contrast_ratio

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from .mapping import BrandColorMapping

logger = logging.getLogger(__name__)

MAX_SEARCH_STEPS = 12
BLACK = "#000000"
WHITE = "#FFFFFF"


@dataclass(slots=True)
class MappingValidation:
    text_background: float
    primary_background: float
    accent_background: float
    passes_aa: bool
    meets_requirements: bool


def adjust_for_contrast(color: str, against: str, min_ratio: float) -> str:
    """Return ``color`` with its lightness moved until it meets ``min_ratio``.

    Hue and saturation are kept. Lightness moves towards whichever pole (black
    or white) contrasts more with ``against``, and a bisection finds the
    lightness closest to the original that still passes. Luminance is monotonic
    in lightness at fixed hue and saturation, so the passing region is a single
    interval ending at the pole.
    """

    normalized = normalize_hex_color(color) or BLACK
    if contrast_ratio(normalized, against) >= min_ratio:
        return normalized

    hue, saturation, lightness = hex_to_hsl(normalized)
    darken = contrast_ratio(BLACK, against) >= contrast_ratio(WHITE, against)
    pole = 0.0 if darken else 100.0

    def passes(value: float) -> bool:
        return contrast_ratio(hsl_to_hex(hue, saturation, value), against) >= min_ratio

    if not passes(pole):
        # The floor exceeds what this background allows; the pole is the best we can do.
        best = BLACK if darken else WHITE
        logger.debug(
            "Contrast %.2f unreachable against %s; using %s", min_ratio, against, best
        )
        return best

    good, bad = pole, lightness
    for _ in range(MAX_SEARCH_STEPS):
        middle = (good + bad) / 2
        if passes(middle):
            good = middle
        else:
            bad = middle

    adjusted = hsl_to_hex(hue, saturation, good)
    logger.debug(
        "Adjusted %s to %s for %.1f:1 against %s", normalized, adjusted, min_ratio, against
    )
    return adjusted


def enforce_contrast(mapping: "BrandColorMapping") -> "BrandColorMapping":
    """Adjust ``mapping`` in place so every role meets its floor; returns it.

    Background and surfaces are never changed.
    """

    background = mapping.background
    mapping.text = adjust_for_contrast(mapping.text, background, ContrastRequirement.TEXT)
    mapping.primary = adjust_for_contrast(
        mapping.primary, background, ContrastRequirement.PRIMARY
    )
    mapping.accent = adjust_for_contrast(
        mapping.accent, background, ContrastRequirement.ACCENT
    )
    mapping.surface = mapping.surfaces[0] if mapping.surfaces else background
    return mapping


def validate_mapping(mapping: "BrandColorMapping") -> MappingValidation:
    text_ratio = contrast_ratio(mapping.text, mapping.background)
    primary_ratio = contrast_ratio(mapping.primary, mapping.background)
    accent_ratio = contrast_ratio(mapping.accent, mapping.background)
    return MappingValidation(
        text_background=text_ratio,
        primary_background=primary_ratio,
        accent_background=accent_ratio,
        passes_aa=text_ratio >= ContrastRequirement.TEXT,
        meets_requirements=(
            text_ratio >= ContrastRequirement.TEXT
            and primary_ratio >= ContrastRequirement.PRIMARY
            and accent_ratio >= ContrastRequirement.ACCENT
        ),
    )
