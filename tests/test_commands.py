"""Tests for the shared command implementations."""

from __future__ import annotations

import pytest

from brand_colors.commands import (
    CatalogParams,
    ClassifyParams,
    CommandError,
    ContrastParams,
    DeriveParams,
    ParseParams,
    PresetParams,
    check_colors,
    classify_palette,
    derive_mapping,
    generate_preset,
    list_catalog,
    parse_palette,
    resolve_style,
)
from brand_colors.config import Config
from brand_colors.mapping import default_mapping
from brand_colors.parsing import NO_COLORS_MESSAGE
from brand_colors.styles import PaletteStyle

from conftest import NEON_PARTY, NIGHT_SKY, make_services


def test_derive_mapping_from_explicit_colors(services) -> None:
    result = derive_mapping(services, DeriveParams(colors=NIGHT_SKY))

    assert result.style is None
    assert result.valid_colors == 5
    assert result.mapping.background == "#F5F5F5"
    assert result.mapping.primary == "#E94560"
    assert result.validation.meets_requirements is True


def test_derive_mapping_from_catalog_palette_uses_section_hint(services) -> None:
    result = derive_mapping(services, DeriveParams(palette_id="neon-party"))

    assert result.style == "neon"
    assert result.mapping.background == "#0D0D0D"
    assert services.style_cache.get("neon-party") is PaletteStyle.NEON


def test_derive_mapping_explicit_style_wins_over_hint(services) -> None:
    result = derive_mapping(
        services, DeriveParams(colors=NEON_PARTY, style="light", section_hint="vibrant")
    )
    assert result.style == "light"
    assert result.mapping.background == "#FF00FF"


def test_derive_mapping_uses_configured_default_hint() -> None:
    services = make_services(Config(default_section_hint="vibrant"))
    result = derive_mapping(services, DeriveParams(colors=NEON_PARTY))
    assert result.style == "neon"


def test_derive_mapping_with_only_invalid_colors_returns_defaults(services) -> None:
    result = derive_mapping(services, DeriveParams(colors=["nope", "#12"]))
    assert result.valid_colors == 0
    assert result.mapping == default_mapping()


@pytest.mark.parametrize(
    "params, message",
    [
        (DeriveParams(), "Supply colors"),
        (DeriveParams(palette_id="missing"), "Unknown palette id"),
        (DeriveParams(colors=NIGHT_SKY, style="sparkly"), "Unknown style"),
    ],
)
def test_derive_mapping_errors(services, params, message) -> None:
    with pytest.raises(CommandError) as exc:
        derive_mapping(services, params)
    assert message in str(exc.value)


def test_classify_palette_reports_stats(services) -> None:
    result = classify_palette(services, ClassifyParams(palette_id="paper"))

    assert result.style == "minimal"
    assert result.label == "Minimal"
    assert result.valid_colors == 4
    assert result.stats is not None
    assert result.stats.color_count == 4
    assert "paper" in services.style_cache


def test_classify_palette_without_valid_colors_uses_hint(services) -> None:
    result = classify_palette(services, ClassifyParams(colors=["nope"], section_hint="earthy"))
    assert result.style == "warm"
    assert result.valid_colors == 0
    assert result.stats is None


def test_check_colors_normalizes_input() -> None:
    result = check_colors(ContrastParams(foreground="000", background="#ffffff"))
    assert result.foreground == "#000000"
    assert result.background == "#FFFFFF"
    assert result.ratio == 21.0
    assert result.level == "AAA"


@pytest.mark.parametrize(
    "params",
    [
        ContrastParams(foreground="nope", background="#FFFFFF"),
        ContrastParams(foreground="#000000", background="#12"),
        ContrastParams(foreground="#000000", background="#FFFFFF", font_size=0),
    ],
)
def test_check_colors_rejects_bad_input(params) -> None:
    with pytest.raises(CommandError):
        check_colors(params)


def test_parse_palette_passes_errors_through() -> None:
    assert parse_palette(ParseParams(text="#264653 #2A9D8F")).colors == ["#264653", "#2A9D8F"]
    assert parse_palette(ParseParams(text="hello")).error == NO_COLORS_MESSAGE


def test_list_catalog_filters(services) -> None:
    everything = list_catalog(services, CatalogParams())
    assert [item.id for item in everything.palettes] == ["neon-party", "night-sky", "paper"]

    minimal = list_catalog(services, CatalogParams(style="minimal"))
    assert [item.id for item in minimal.palettes] == ["paper"]

    vibrant = list_catalog(services, CatalogParams(section="Vibrant"))
    assert {item.section_id for item in vibrant.palettes} == {"vibrant"}
    assert {item.style for item in vibrant.palettes} == {"neon", "dark"}


def test_list_catalog_rejects_unknown_section(services) -> None:
    with pytest.raises(CommandError):
        list_catalog(services, CatalogParams(section="sparkly"))


def test_generate_preset() -> None:
    result = generate_preset(PresetParams(colors=["#FF0000", "#FFFFFF"], preset="bold"))
    assert result.preset == "bold"
    assert result.palette.accent == "#00FFFF"

    with pytest.raises(CommandError):
        generate_preset(PresetParams(colors=["#FF0000"], preset="sparkly"))


def test_resolve_style() -> None:
    assert resolve_style(None) is None
    assert resolve_style("Dark") is PaletteStyle.DARK


def test_custom_colors_under_catalog_id_leave_catalog_style_alone(services) -> None:
    paper_like = ["#FFFFFF", "#F5F5F5", "#E5E5E5", "#171717"]

    classified = classify_palette(
        services, ClassifyParams(colors=paper_like, palette_id="neon-party")
    )
    derived = derive_mapping(
        services,
        DeriveParams(colors=paper_like, section_hint="neutrals", palette_id="neon-party"),
    )

    assert classified.style == "minimal"
    assert derived.style == "minimal"
    assert "neon-party" not in services.style_cache
    catalog = list_catalog(services, CatalogParams(section="vibrant"))
    assert {item.id: item.style for item in catalog.palettes}["neon-party"] == "neon"
    result = derive_mapping(services, DeriveParams(palette_id="neon-party"))
    assert result.style == "neon"
    assert result.mapping.background == "#0D0D0D"


def test_catalog_palette_with_foreign_hint_is_not_cached(services) -> None:
    result = classify_palette(
        services, ClassifyParams(palette_id="neon-party", section_hint="earthy")
    )

    assert result.style != "neon"
    assert "neon-party" not in services.style_cache
    assert services.catalog.style_for("neon-party") is PaletteStyle.NEON


def test_generate_preset_reports_label() -> None:
    result = generate_preset(PresetParams(colors=["#FF0000"], preset="muted"))
    assert result.label == "Muted Editorial"
