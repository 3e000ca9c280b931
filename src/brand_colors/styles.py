"""Classify whole palettes into visual style categories."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence
import logging
import threading

from .analysis import ColorSample, analyze_colors

logger = logging.getLogger(__name__)


class PaletteStyle(str, Enum):
    PASTEL = "pastel"
    VINTAGE = "vintage"
    NEON = "neon"
    WARM = "warm"
    COLD = "cold"
    LIGHT = "light"
    DARK = "dark"
    MINIMAL = "minimal"

    @property
    def label(self) -> str:
        return STYLE_LABELS[self]


STYLE_LABELS: Dict[PaletteStyle, str] = {style: style.value.title() for style in PaletteStyle}

STYLE_ORDER: List[PaletteStyle] = [
    PaletteStyle.PASTEL,
    PaletteStyle.VINTAGE,
    PaletteStyle.NEON,
    PaletteStyle.WARM,
    PaletteStyle.COLD,
    PaletteStyle.LIGHT,
    PaletteStyle.DARK,
    PaletteStyle.MINIMAL,
]

# Default category for each curated section id.
SECTION_HINTS: Dict[str, PaletteStyle] = {
    "neutrals": PaletteStyle.MINIMAL,
    "fresh": PaletteStyle.NEON,
    "vibrant": PaletteStyle.NEON,
    "bold": PaletteStyle.DARK,
    "muted": PaletteStyle.PASTEL,
    "earthy": PaletteStyle.WARM,
    "elegant": PaletteStyle.LIGHT,
    "playful": PaletteStyle.PASTEL,
    "heritage": PaletteStyle.VINTAGE,
    "retro": PaletteStyle.VINTAGE,
    "clash": PaletteStyle.NEON,
    "corporate": PaletteStyle.COLD,
}

HIGH_ENERGY_HINTS = frozenset({"fresh", "vibrant", "clash"})
HERITAGE_HINTS = frozenset({"heritage", "retro"})
WARM_HINTS = frozenset({"earthy", "playful", "bold"})
COLD_HINTS = frozenset({"corporate", "fresh", "elegant"})


def parse_style(value: str | PaletteStyle) -> PaletteStyle:
    """Return the :class:`PaletteStyle` named by ``value``.

    Raises ``ValueError`` for unknown names.
    """

    if isinstance(value, PaletteStyle):
        return value
    return PaletteStyle(str(value).strip().lower())


def _normalize_hint(section_hint: Optional[str]) -> str:
    return (section_hint or "").strip().lower()


def default_style_for_hint(section_hint: Optional[str]) -> PaletteStyle:
    return SECTION_HINTS.get(_normalize_hint(section_hint), PaletteStyle.LIGHT)


@dataclass(slots=True)
class ColorStats:
    avg_hue: float
    avg_saturation: float
    avg_lightness: float
    max_saturation: float
    min_lightness: float
    max_lightness: float
    warm_ratio: float
    neutral_ratio: float
    light_ratio: float
    dark_ratio: float
    color_count: int


def _is_warm_hue(hue: float) -> bool:
    return hue < 60 or hue > 300


def compute_stats(samples: Sequence[ColorSample]) -> ColorStats:
    """Summarize a non-empty palette for classification."""

    if not samples:
        raise ValueError("Cannot compute statistics for an empty palette.")

    count = len(samples)
    # Hue is noise on near-grays, so hue statistics use chromatic samples only.
    chromatic = [sample for sample in samples if sample.saturation >= 10]
    avg_hue = sum(s.hue for s in chromatic) / len(chromatic) if chromatic else 0.0
    warm_count = sum(1 for s in chromatic if _is_warm_hue(s.hue))

    return ColorStats(
        avg_hue=avg_hue,
        avg_saturation=sum(s.saturation for s in samples) / count,
        avg_lightness=sum(s.lightness for s in samples) / count,
        max_saturation=max(s.saturation for s in samples),
        min_lightness=min(s.lightness for s in samples),
        max_lightness=max(s.lightness for s in samples),
        warm_ratio=warm_count / len(chromatic) if chromatic else 0.0,
        neutral_ratio=sum(1 for s in samples if s.saturation < 15) / count,
        light_ratio=sum(1 for s in samples if s.lightness > 70) / count,
        dark_ratio=sum(1 for s in samples if s.lightness < 30) / count,
        color_count=count,
    )


def classify_stats(stats: ColorStats, section_hint: Optional[str] = None) -> PaletteStyle:
    """Apply the classification rules in order; the first match wins."""

    hint = _normalize_hint(section_hint)

    if stats.neutral_ratio > 0.7 or (stats.avg_saturation < 12 and stats.color_count <= 11):
        return PaletteStyle.MINIMAL

    if stats.dark_ratio > 0.5 or (stats.avg_lightness < 30 and stats.max_lightness < 60):
        return PaletteStyle.DARK

    if stats.avg_saturation > 80 and stats.max_saturation > 95:
        return PaletteStyle.NEON
    if stats.avg_saturation > 65 and stats.max_saturation > 90 and hint in HIGH_ENERGY_HINTS:
        return PaletteStyle.NEON

    if stats.light_ratio > 0.3 and stats.avg_saturation < 30:
        return PaletteStyle.LIGHT

    if (
        stats.avg_lightness > 55
        and 10 < stats.avg_saturation < 55
        and stats.light_ratio > 0.2
    ):
        return PaletteStyle.PASTEL

    if stats.light_ratio > 0.45 and stats.avg_saturation < 50:
        return PaletteStyle.LIGHT

    if hint in HERITAGE_HINTS:
        return PaletteStyle.VINTAGE
    if 20 < stats.avg_saturation < 50 and 35 < stats.avg_lightness < 55:
        return PaletteStyle.VINTAGE

    if stats.warm_ratio > 0.5:
        return PaletteStyle.WARM

    if stats.warm_ratio < 0.35 and stats.avg_saturation > 15:
        return PaletteStyle.COLD

    if stats.avg_saturation > 50:
        if hint in WARM_HINTS:
            return PaletteStyle.WARM
        if hint in COLD_HINTS:
            return PaletteStyle.COLD
        return PaletteStyle.WARM if stats.warm_ratio > 0.45 else PaletteStyle.COLD

    if stats.warm_ratio > 0.45:
        return PaletteStyle.WARM
    return default_style_for_hint(hint)


def classify_samples(
    samples: Sequence[ColorSample], section_hint: Optional[str] = None
) -> PaletteStyle:
    if not samples:
        return default_style_for_hint(section_hint)
    return classify_stats(compute_stats(samples), section_hint)


class StyleCache:
    """Thread-safe memo of palette styles keyed by an opaque palette id.

    Keys are ids, not contents: callers must use a distinct id per distinct
    palette.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, PaletteStyle] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[PaletteStyle]:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, style: PaletteStyle) -> None:
        with self._lock:
            self._entries[key] = style

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def classify_palette_style(
    colors: Iterable[object],
    section_hint: Optional[str] = None,
    cache_key: Optional[str] = None,
    *,
    cache: Optional[StyleCache] = None,
) -> PaletteStyle:
    """Classify ``colors`` into one of the eight palette styles.

    Invalid entries are ignored. An empty palette returns the default style of
    ``section_hint``. When both ``cache_key`` and ``cache`` are given, the
    result is memoized under ``cache_key``.
    """

    if cache is not None and cache_key:
        cached = cache.get(cache_key)
        if cached is not None:
            logger.debug("Style cache hit for %s: %s", cache_key, cached.value)
            return cached

    style = classify_samples(analyze_colors(colors), section_hint)
    logger.debug("Classified palette %s as %s", cache_key or "<anonymous>", style.value)

    if cache is not None and cache_key:
        cache.set(cache_key, style)
    return style
