"""Shared command implementations used by the CLI, API, and MCP layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .analysis import analyze_colors
from .colors import normalize_hex_color
from .contrast import check_contrast
from .enforcement import MappingValidation, validate_mapping
from .mapping import BrandColorMapping, derive_brand_mapping
from .parsing import parse_palette_input
from .presets import PRESET_LABELS, PRESETS, PresetPalette, generate_palette
from .runtime import Services
from .styles import (
    ColorStats,
    PaletteStyle,
    classify_palette_style,
    compute_stats,
    parse_style,
)


class CommandError(RuntimeError):
    """Raised when command parameters are invalid."""


@dataclass(slots=True)
class DeriveParams:
    colors: List[str] = field(default_factory=list)
    style: Optional[str] = None
    section_hint: Optional[str] = None
    palette_id: Optional[str] = None


@dataclass(slots=True)
class DeriveResponse:
    mapping: BrandColorMapping
    style: Optional[str]
    valid_colors: int
    validation: MappingValidation


@dataclass(slots=True)
class ClassifyParams:
    colors: List[str] = field(default_factory=list)
    section_hint: Optional[str] = None
    palette_id: Optional[str] = None


@dataclass(slots=True)
class ClassifyResponse:
    style: str
    label: str
    valid_colors: int
    stats: Optional[ColorStats]


@dataclass(slots=True)
class ContrastParams:
    foreground: str
    background: str
    font_size: float = 16


@dataclass(slots=True)
class ContrastResponse:
    foreground: str
    background: str
    ratio: float
    aa: bool
    aaa: bool
    level: str


@dataclass(slots=True)
class ParseParams:
    text: str


@dataclass(slots=True)
class ParseResponse:
    colors: List[str]
    error: Optional[str]


@dataclass(slots=True)
class CatalogParams:
    style: Optional[str] = None
    section: Optional[str] = None


@dataclass(slots=True)
class StyledPaletteSummary:
    id: str
    name: str
    section_id: str
    section_name: str
    style: str
    colors: List[str]


@dataclass(slots=True)
class CatalogResponse:
    palettes: List[StyledPaletteSummary]


@dataclass(slots=True)
class PresetParams:
    colors: List[str]
    preset: str = "original"


@dataclass(slots=True)
class PresetResponse:
    preset: str
    label: str
    palette: PresetPalette


def resolve_style(value: Optional[str]) -> Optional[PaletteStyle]:
    if not value:
        return None
    try:
        return parse_style(value)
    except ValueError as exc:
        choices = ", ".join(style.value for style in PaletteStyle)
        raise CommandError(f"Unknown style '{value}'. Choose one of: {choices}.") from exc


def _resolve_palette(
    services: Services,
    colors: List[str],
    section_hint: Optional[str],
    palette_id: Optional[str],
) -> tuple[List[str], Optional[str], Optional[str]]:
    """Return the colors, hint and style cache key to use.

    The cache key is the palette id only when both the colors and the hint are
    the catalog's own; the cache is shared with the catalog, so anything else
    is classified without it.
    """

    hint = section_hint or services.config.default_section_hint or None
    if colors:
        return list(colors), hint, None
    if not palette_id:
        raise CommandError("Supply colors or a catalog palette id.")
    palette = services.catalog.get(palette_id)
    if palette is None:
        raise CommandError(f"Unknown palette id '{palette_id}'.")
    section = services.catalog.section_for(palette_id)
    section_id = section.id if section else None
    hint = section_hint or section_id or hint
    cache_key = palette_id if hint == section_id else None
    return list(palette.colors), hint, cache_key


def derive_mapping(services: Services, params: DeriveParams) -> DeriveResponse:
    colors, hint, cache_key = _resolve_palette(
        services, params.colors, params.section_hint, params.palette_id
    )
    style = resolve_style(params.style)
    if style is None and hint:
        style = classify_palette_style(colors, hint, cache_key, cache=services.style_cache)

    mapping = derive_brand_mapping(colors, style)
    return DeriveResponse(
        mapping=mapping,
        style=style.value if style else None,
        valid_colors=len(mapping.source_palette),
        validation=validate_mapping(mapping),
    )


def classify_palette(services: Services, params: ClassifyParams) -> ClassifyResponse:
    colors, hint, cache_key = _resolve_palette(
        services, params.colors, params.section_hint, params.palette_id
    )
    samples = analyze_colors(colors)
    style = classify_palette_style(colors, hint, cache_key, cache=services.style_cache)
    return ClassifyResponse(
        style=style.value,
        label=style.label,
        valid_colors=len(samples),
        stats=compute_stats(samples) if samples else None,
    )


def check_colors(params: ContrastParams) -> ContrastResponse:
    foreground = normalize_hex_color(params.foreground)
    background = normalize_hex_color(params.background)
    if foreground is None:
        raise CommandError(f"Invalid foreground color '{params.foreground}'.")
    if background is None:
        raise CommandError(f"Invalid background color '{params.background}'.")
    if params.font_size <= 0:
        raise CommandError("Font size must be greater than zero.")
    result = check_contrast(foreground, background, params.font_size)
    return ContrastResponse(
        foreground=foreground,
        background=background,
        ratio=result.ratio,
        aa=result.aa,
        aaa=result.aaa,
        level=result.level,
    )


def parse_palette(params: ParseParams) -> ParseResponse:
    result = parse_palette_input(params.text)
    return ParseResponse(colors=result.colors, error=result.error)


def list_catalog(services: Services, params: CatalogParams) -> CatalogResponse:
    style = resolve_style(params.style)
    section = (params.section or "").strip().lower() or None
    if section and section not in {item.id for item in services.catalog.sections}:
        raise CommandError(f"Unknown catalog section '{params.section}'.")

    palettes = []
    for item in services.catalog.styled_palettes():
        if style is not None and item.style is not style:
            continue
        if section and item.section_id != section:
            continue
        palettes.append(
            StyledPaletteSummary(
                id=item.id,
                name=item.name,
                section_id=item.section_id,
                section_name=item.section_name,
                style=item.style.value,
                colors=item.colors,
            )
        )
    return CatalogResponse(palettes=palettes)


def generate_preset(params: PresetParams) -> PresetResponse:
    if params.preset not in PRESETS:
        choices = ", ".join(PRESETS)
        raise CommandError(f"Unknown preset '{params.preset}'. Choose one of: {choices}.")
    return PresetResponse(
        preset=params.preset,
        label=PRESET_LABELS[params.preset],
        palette=generate_palette(params.colors, params.preset),
    )
