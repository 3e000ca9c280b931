"""Map palette colors to brand roles.

The mapper picks a background, a neutral text color, a vibrant primary, an
accent with a different hue, and an ordered list of surface colors for tile
backgrounds. :func:`derive_brand_mapping` runs the mapper and then the
contrast enforcer, and is the entry point the rest of an application should
use.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set
import logging
import math

from .analysis import ColorSample, analyze_colors, is_distinct_hue, vibrancy_score
from .colors import COLOR_DEFAULTS, LIGHTNESS_THRESHOLD
from .enforcement import enforce_contrast
from .styles import PaletteStyle, parse_style

logger = logging.getLogger(__name__)

MAX_SURFACES = 8
MAX_NEUTRAL_SURFACES = 3
MAX_ACCENT_SURFACES = 2


@dataclass(slots=True)
class BrandColorMapping:
    """Hex colors for each brand role.

    ``surface`` mirrors ``surfaces[0]`` (or ``background`` when there are no
    surfaces).
    """

    background: str
    text: str
    primary: str
    accent: str
    surface: str
    surfaces: List[str] = field(default_factory=list)
    source_palette: List[str] = field(default_factory=list)


def default_mapping() -> BrandColorMapping:
    surfaces = [COLOR_DEFAULTS["SURFACE"], COLOR_DEFAULTS["TEXT_LIGHT"], COLOR_DEFAULTS["WHITE"]]
    return BrandColorMapping(
        background=COLOR_DEFAULTS["WHITE"],
        text=COLOR_DEFAULTS["TEXT_DARK"],
        primary=COLOR_DEFAULTS["PRIMARY"],
        accent=COLOR_DEFAULTS["ACCENT"],
        surface=surfaces[0],
        surfaces=surfaces,
        source_palette=[],
    )


def is_light_background(sample: ColorSample) -> bool:
    return sample.lightness > LIGHTNESS_THRESHOLD


def _select_background(
    samples: Sequence[ColorSample], style: Optional[PaletteStyle]
) -> ColorSample:
    if style in (PaletteStyle.DARK, PaletteStyle.NEON):
        darkest_first = sorted(samples, key=lambda s: s.lightness)
        if style is PaletteStyle.DARK:
            match = next(
                (s for s in darkest_first if s.lightness <= 25 and s.saturation < 20), None
            )
        else:
            match = next((s for s in darkest_first if s.lightness <= 20), None)
        return match or darkest_first[0]

    lightest_first = sorted(samples, key=lambda s: s.lightness, reverse=True)
    candidates = [s for s in lightest_first if s.lightness >= 85]
    if candidates:
        return min(candidates, key=lambda s: s.saturation)
    return lightest_first[0]


def _select_text(background: ColorSample, samples: Sequence[ColorSample]) -> str:
    if is_light_background(background):
        match = next((s for s in samples if s.saturation < 10 and s.lightness < 25), None)
        return match.hex if match else COLOR_DEFAULTS["TEXT_DARK"]
    match = next((s for s in samples if s.saturation < 10 and s.lightness > 85), None)
    return match.hex if match else COLOR_DEFAULTS["TEXT_LIGHT"]


def _hue_bucket(hue: float) -> int:
    # 60 degree slices centred on red, yellow, green, cyan, blue, magenta.
    return int(math.floor(hue / 60 + 0.5)) % 6


def _moderate_saturation(sample: ColorSample) -> float:
    return 100 - sample.saturation if sample.saturation > 50 else sample.saturation


def _neutral_distance(sample: ColorSample, background: ColorSample) -> float:
    # 5-20 points away from the background reads as a distinct but calm surface.
    diff = abs(sample.lightness - background.lightness)
    return 0.0 if 5 <= diff <= 20 else abs(diff - 12)


def extract_surface_colors(
    samples: Sequence[ColorSample], background: ColorSample
) -> List[str]:
    """Return up to eight unique surface colors, ordered tinted, neutral, accent."""

    light_mode = is_light_background(background)
    surfaces: List[str] = []
    seen: Set[str] = set()

    def add(color: str) -> None:
        if color not in seen and len(surfaces) < MAX_SURFACES:
            surfaces.append(color)
            seen.add(color)

    others = [s for s in samples if s.hex != background.hex]

    if light_mode:
        tinted = [s for s in others if 60 <= s.lightness <= 95 and s.saturation >= 5]
    else:
        tinted = [s for s in others if 8 <= s.lightness <= 40 and s.saturation >= 5]
    buckets: Set[int] = set()
    for sample in sorted(tinted, key=_moderate_saturation, reverse=True):
        bucket = _hue_bucket(sample.hue)
        if bucket not in buckets:
            buckets.add(bucket)
            add(sample.hex)

    if light_mode:
        neutrals = [s for s in others if s.saturation < 15 and 50 <= s.lightness <= 98]
    else:
        neutrals = [s for s in others if s.saturation < 15 and 5 <= s.lightness <= 50]
    neutrals = [s for s in neutrals if s.hex not in seen]
    neutrals.sort(key=lambda s: _neutral_distance(s, background))
    for sample in neutrals[:MAX_NEUTRAL_SURFACES]:
        add(sample.hex)

    if light_mode:
        accents = [s for s in others if s.saturation >= 30 and 45 <= s.lightness <= 85]
    else:
        accents = [s for s in others if s.saturation >= 30 and 15 <= s.lightness <= 55]
    accents = [s for s in accents if s.hex not in seen]
    for sample in accents[:MAX_ACCENT_SURFACES]:
        add(sample.hex)

    if not surfaces:
        add(background.hex)
    return surfaces


def map_samples_to_brand(
    samples: Sequence[ColorSample], style: Optional[PaletteStyle] = None
) -> BrandColorMapping:
    """Assign roles to analyzed samples without touching contrast."""

    if not samples:
        return default_mapping()

    by_vibrancy = sorted(samples, key=vibrancy_score, reverse=True)

    background = _select_background(samples, style)
    text = _select_text(background, samples)

    non_background = [s for s in by_vibrancy if s.hex != background.hex]
    scored = [s for s in non_background if vibrancy_score(s) > 0]
    if scored:
        primary = scored[0]
    elif non_background:
        primary = non_background[0]
    else:
        primary = background

    remaining = [s for s in non_background if s.hex != primary.hex]
    if remaining:
        accent = next(
            (s for s in remaining if is_distinct_hue(s.hue, primary.hue)), remaining[0]
        )
    else:
        accent = primary

    surfaces = extract_surface_colors(samples, background)
    logger.debug(
        "Mapped roles: background=%s text=%s primary=%s accent=%s surfaces=%s",
        background.hex,
        text,
        primary.hex,
        accent.hex,
        surfaces,
    )
    return BrandColorMapping(
        background=background.hex,
        text=text,
        primary=primary.hex,
        accent=accent.hex,
        surface=surfaces[0] if surfaces else background.hex,
        surfaces=surfaces,
        source_palette=[sample.hex for sample in samples],
    )


def map_palette_to_brand(
    colors: Iterable[object], style: str | PaletteStyle | None = None
) -> BrandColorMapping:
    """Assign roles to raw hex strings.

    The result is not contrast-safe; use :func:`derive_brand_mapping` unless
    the raw picks are what you want.
    """

    return map_samples_to_brand(analyze_colors(colors), parse_style(style) if style else None)


def derive_brand_mapping(
    colors: Iterable[object], style: str | PaletteStyle | None = None
) -> BrandColorMapping:
    """Map ``colors`` to brand roles and enforce contrast floors on the result."""

    return enforce_contrast(map_palette_to_brand(colors, style))
