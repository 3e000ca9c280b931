"""Tests for the FastMCP server wrappers."""

from __future__ import annotations

import asyncio
from contextlib import contextmanager

import pytest

from brand_colors.mcp_server import (
    _to_serializable,
    _with_services,
    catalog_tool,
    classify_tool,
    contrast_tool,
    derive_tool,
    parse_tool,
    preset_tool,
)
from brand_colors.runtime import ConfigurationError
from brand_colors.styles import PaletteStyle

from conftest import NIGHT_SKY, make_services


def use_test_services(monkeypatch):
    services = make_services()

    @contextmanager
    def fake_application_services(**_kwargs):
        yield services

    monkeypatch.setattr("brand_colors.mcp_server.application_services", fake_application_services)
    return services


def test_derive_tool_serializes_mapping(monkeypatch) -> None:
    use_test_services(monkeypatch)

    result = asyncio.run(derive_tool.run({"colors": NIGHT_SKY}))

    payload = result.structured_content
    assert payload is not None
    assert payload["mapping"]["background"] == "#F5F5F5"
    assert payload["mapping"]["primary"] == "#E94560"
    assert payload["validation"]["meets_requirements"] is True


def test_derive_tool_uses_catalog_palette(monkeypatch) -> None:
    services = use_test_services(monkeypatch)

    result = asyncio.run(derive_tool.run({"palette_id": "neon-party"}))

    assert result.structured_content["style"] == "neon"
    assert services.style_cache.get("neon-party") is PaletteStyle.NEON


def test_derive_tool_wraps_command_errors(monkeypatch) -> None:
    use_test_services(monkeypatch)

    with pytest.raises(ValueError) as exc:
        asyncio.run(derive_tool.run({"palette_id": "missing"}))
    assert "missing" in str(exc.value)


def test_classify_tool_serializes_stats(monkeypatch) -> None:
    use_test_services(monkeypatch)

    result = asyncio.run(classify_tool.run({"palette_id": "paper"}))

    payload = result.structured_content
    assert payload["style"] == "minimal"
    assert payload["stats"]["color_count"] == 4


def test_contrast_tool() -> None:
    result = asyncio.run(contrast_tool.run({"foreground": "#000", "background": "#FFFFFF"}))

    payload = result.structured_content
    assert payload["ratio"] == 21.0
    assert payload["level"] == "AAA"


def test_contrast_tool_rejects_invalid_color() -> None:
    with pytest.raises(ValueError):
        asyncio.run(contrast_tool.run({"foreground": "nope", "background": "#FFFFFF"}))


def test_parse_tool() -> None:
    result = asyncio.run(parse_tool.run({"text": "#264653, #2a9d8f"}))
    assert result.structured_content == {"colors": ["#264653", "#2A9D8F"], "error": None}


def test_catalog_tool_filters(monkeypatch) -> None:
    use_test_services(monkeypatch)

    result = asyncio.run(catalog_tool.run({"section": "neutrals"}))

    palettes = result.structured_content["palettes"]
    assert [item["id"] for item in palettes] == ["paper"]
    assert palettes[0]["style"] == "minimal"


def test_preset_tool() -> None:
    result = asyncio.run(preset_tool.run({"colors": ["#FF0000", "#FFFFFF"], "preset": "bold"}))
    assert result.structured_content["palette"]["accent"] == "#00FFFF"
    assert result.structured_content["label"] == "Bold Saturated"


def test_to_serializable_handles_enums() -> None:
    assert _to_serializable([PaletteStyle.NEON, {"style": PaletteStyle.DARK}]) == [
        "neon",
        {"style": "dark"},
    ]


def test_with_services_converts_configuration_errors(monkeypatch) -> None:
    monkeypatch.setattr(
        "brand_colors.mcp_server.application_services",
        lambda **kwargs: (_ for _ in ()).throw(ConfigurationError("catalog missing")),
    )

    with pytest.raises(RuntimeError) as exc:
        _with_services(lambda services: services)
    assert "catalog missing" in str(exc.value)
