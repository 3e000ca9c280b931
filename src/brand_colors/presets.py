"""Generate four-role palettes from base colors using named presets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List

from .analysis import ColorSample, analyze_colors
from .colors import hsl_to_hex

DEFAULT_PRIMARY = "#2563EB"


@dataclass(slots=True)
class PresetPalette:
    primary: str
    accent: str
    background: str
    text: str


def _most_saturated(samples: List[ColorSample]) -> ColorSample:
    if not samples:
        return ColorSample.from_hex(DEFAULT_PRIMARY)
    best = samples[0]
    for sample in samples[1:]:
        if sample.saturation > best.saturation:
            best = sample
    return best


def shift_hue(color: str, degrees: float) -> str:
    sample = ColorSample.from_hex(color)
    return hsl_to_hex((sample.hue + degrees) % 360, sample.saturation, sample.lightness)


def scale_saturation(color: str, factor: float) -> str:
    sample = ColorSample.from_hex(color)
    saturation = max(0.0, min(100.0, sample.saturation * factor))
    return hsl_to_hex(sample.hue, saturation, sample.lightness)


def _original(samples: List[ColorSample]) -> PresetPalette:
    primary = _most_saturated(samples).hex
    remaining = [s for s in samples if s.hex != primary]
    by_lightness = sorted(remaining, key=lambda s: s.lightness)
    return PresetPalette(
        primary=primary,
        accent=remaining[0].hex if len(remaining) > 1 else shift_hue(primary, 30),
        background=by_lightness[-1].hex if by_lightness else "#F5F5F5",
        text=by_lightness[0].hex if by_lightness else "#111111",
    )


def _warm(samples: List[ColorSample]) -> PresetPalette:
    primary = shift_hue(_most_saturated(samples).hex, 15)
    return PresetPalette(
        primary=primary, accent=shift_hue(primary, -30), background="#FFF9F5", text="#2C1810"
    )


def _cool(samples: List[ColorSample]) -> PresetPalette:
    primary = shift_hue(_most_saturated(samples).hex, -15)
    return PresetPalette(
        primary=primary, accent=shift_hue(primary, 30), background="#F5F9FF", text="#0F1C2E"
    )


def _bold(samples: List[ColorSample]) -> PresetPalette:
    primary = scale_saturation(_most_saturated(samples).hex, 1.3)
    return PresetPalette(
        primary=primary, accent=shift_hue(primary, 180), background="#FFFFFF", text="#000000"
    )


def _muted(samples: List[ColorSample]) -> PresetPalette:
    primary = scale_saturation(_most_saturated(samples).hex, 0.5)
    return PresetPalette(
        primary=primary,
        accent=scale_saturation(shift_hue(primary, 180), 0.4),
        background="#FFFCF5",
        text="#1A1814",
    )


PRESETS: Dict[str, Callable[[List[ColorSample]], PresetPalette]] = {
    "original": _original,
    "warm": _warm,
    "cool": _cool,
    "bold": _bold,
    "muted": _muted,
}

PRESET_LABELS: Dict[str, str] = {
    "original": "Extracted",
    "warm": "Warm Neutral",
    "cool": "Cool Professional",
    "bold": "Bold Saturated",
    "muted": "Muted Editorial",
}


def generate_palette(base_colors: Iterable[object], preset: str = "original") -> PresetPalette:
    """Build a palette from ``base_colors``; unknown presets fall back to ``original``."""

    generator = PRESETS.get(preset, _original)
    return generator(analyze_colors(base_colors))


def default_preset_palette() -> PresetPalette:
    return PresetPalette(
        primary=DEFAULT_PRIMARY, accent="#7C3AED", background="#F5F5F5", text="#111111"
    )
