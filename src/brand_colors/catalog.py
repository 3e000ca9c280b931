"""Curated palette catalog grouped into sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Dict, List, Optional
import json
import logging

from .styles import STYLE_ORDER, PaletteStyle, StyleCache, classify_palette_style

logger = logging.getLogger(__name__)

BUNDLED_CATALOG = "palettes.json"


class CatalogError(ValueError):
    """Raised when a catalog file cannot be parsed."""


@dataclass(slots=True)
class Palette:
    id: str
    name: str
    colors: List[str]


@dataclass(slots=True)
class PaletteSection:
    id: str
    name: str
    personality: str = ""
    palettes: List[Palette] = field(default_factory=list)


@dataclass(slots=True)
class StyledPalette:
    id: str
    name: str
    colors: List[str]
    style: PaletteStyle
    section_id: str
    section_name: str


def _parse_palette(raw: object) -> Palette:
    if not isinstance(raw, dict) or "id" not in raw:
        raise CatalogError(f"Palette entry must be an object with an id: {raw!r}")
    colors = raw.get("colors", [])
    if not isinstance(colors, list):
        raise CatalogError(f"Palette {raw['id']} colors must be a list.")
    return Palette(
        id=str(raw["id"]),
        name=str(raw.get("name", raw["id"])),
        colors=[str(color) for color in colors],
    )


def _parse_sections(payload: object) -> List[PaletteSection]:
    if not isinstance(payload, dict) or not isinstance(payload.get("sections"), list):
        raise CatalogError("Catalog must be an object with a 'sections' list.")
    sections = []
    for raw in payload["sections"]:
        if not isinstance(raw, dict) or "id" not in raw:
            raise CatalogError(f"Section entry must be an object with an id: {raw!r}")
        sections.append(
            PaletteSection(
                id=str(raw["id"]),
                name=str(raw.get("name", raw["id"])),
                personality=str(raw.get("personality", "")),
                palettes=[_parse_palette(item) for item in raw.get("palettes", [])],
            )
        )
    return sections


class PaletteCatalog:
    """Sections of named palettes with lazily classified styles."""

    def __init__(
        self, sections: List[PaletteSection], *, style_cache: Optional[StyleCache] = None
    ) -> None:
        self.sections = sections
        self.style_cache = style_cache
        self._palettes: Dict[str, Palette] = {}
        self._section_by_palette: Dict[str, PaletteSection] = {}
        for section in sections:
            for palette in section.palettes:
                if palette.id in self._palettes:
                    logger.warning("Duplicate palette id %s in catalog; keeping the first", palette.id)
                    continue
                self._palettes[palette.id] = palette
                self._section_by_palette[palette.id] = section

    @classmethod
    def load(
        cls, path: Optional[Path] = None, *, style_cache: Optional[StyleCache] = None
    ) -> "PaletteCatalog":
        try:
            if path is None:
                text = (
                    resources.files("brand_colors")
                    .joinpath("data", BUNDLED_CATALOG)
                    .read_text(encoding="utf-8")
                )
            else:
                text = Path(path).read_text(encoding="utf-8")
            payload = json.loads(text)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogError(f"Unable to read palette catalog: {exc}") from exc
        return cls(_parse_sections(payload), style_cache=style_cache)

    def palettes(self) -> List[Palette]:
        return list(self._palettes.values())

    def get(self, palette_id: str) -> Optional[Palette]:
        return self._palettes.get(palette_id)

    def section_for(self, palette_id: str) -> Optional[PaletteSection]:
        return self._section_by_palette.get(palette_id)

    def style_for(self, palette_id: str) -> PaletteStyle:
        palette = self._palettes.get(palette_id)
        if palette is None:
            return PaletteStyle.LIGHT
        section = self._section_by_palette[palette_id]
        return classify_palette_style(
            palette.colors, section.id, palette.id, cache=self.style_cache
        )

    def styled_palettes(self) -> List[StyledPalette]:
        result = []
        for section in self.sections:
            for palette in section.palettes:
                if self._section_by_palette.get(palette.id) is not section:
                    continue
                result.append(
                    StyledPalette(
                        id=palette.id,
                        name=palette.name,
                        colors=list(palette.colors),
                        style=self.style_for(palette.id),
                        section_id=section.id,
                        section_name=section.name,
                    )
                )
        return result

    def palettes_by_style(self, style: PaletteStyle) -> List[StyledPalette]:
        return [palette for palette in self.styled_palettes() if palette.style is style]

    def style_groups(self) -> Dict[PaletteStyle, List[StyledPalette]]:
        groups: Dict[PaletteStyle, List[StyledPalette]] = {style: [] for style in STYLE_ORDER}
        for palette in self.styled_palettes():
            groups[palette.style].append(palette)
        return groups
