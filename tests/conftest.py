from __future__ import annotations

import pytest

from brand_colors.catalog import Palette, PaletteCatalog, PaletteSection
from brand_colors.config import Config
from brand_colors.runtime import Services
from brand_colors.styles import StyleCache

NEON_PARTY = ["#0D0D0D", "#FF00FF", "#00FF00", "#FFFF00", "#00FFFF"]
NIGHT_SKY = ["#1A1A2E", "#16213E", "#0F3460", "#E94560", "#F5F5F5"]
PAPER = ["#FFFFFF", "#F5F5F5", "#E5E5E5", "#171717"]


def make_services(config: Config | None = None) -> Services:
    cache = StyleCache()
    sections = [
        PaletteSection(
            id="vibrant",
            name="Vibrant",
            palettes=[
                Palette(id="neon-party", name="Neon Party", colors=list(NEON_PARTY)),
                Palette(id="night-sky", name="Night Sky", colors=list(NIGHT_SKY)),
            ],
        ),
        PaletteSection(
            id="neutrals",
            name="Neutrals",
            palettes=[Palette(id="paper", name="Paper", colors=list(PAPER))],
        ),
    ]
    return Services(
        config=config or Config(),
        catalog=PaletteCatalog(sections, style_cache=cache),
        style_cache=cache,
    )


@pytest.fixture
def services() -> Services:
    return make_services()
