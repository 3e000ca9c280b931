"""FastMCP server exposing brand color commands for agents."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Callable, TypeVar

from fastmcp import FastMCP

from .commands import (
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
)
from .runtime import ConfigurationError, application_services

server = FastMCP("brand-colors")

T = TypeVar("T")


def _to_serializable(value: Any) -> Any:
    if is_dataclass(value):
        return {key: _to_serializable(val) for key, val in asdict(value).items()}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_to_serializable(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_serializable(val) for key, val in value.items()}
    return value


def _with_services(func: Callable[[Any], T]) -> T:
    try:
        with application_services() as services:
            return func(services)
    except ConfigurationError as exc:
        raise RuntimeError(str(exc)) from exc
    except CommandError as exc:
        raise ValueError(str(exc)) from exc


def _run_command(func: Callable[[], T]) -> T:
    try:
        return func()
    except CommandError as exc:
        raise ValueError(str(exc)) from exc


@server.tool("derive")
def derive_tool(
    colors: list[str] | None = None,
    style: str | None = None,
    section_hint: str | None = None,
    palette_id: str | None = None,
) -> Any:
    result = _with_services(
        lambda services: derive_mapping(
            services,
            DeriveParams(
                colors=list(colors or []),
                style=style,
                section_hint=section_hint,
                palette_id=palette_id,
            ),
        )
    )
    return _to_serializable(result)


@server.tool("classify")
def classify_tool(
    colors: list[str] | None = None,
    section_hint: str | None = None,
    palette_id: str | None = None,
) -> Any:
    result = _with_services(
        lambda services: classify_palette(
            services,
            ClassifyParams(
                colors=list(colors or []), section_hint=section_hint, palette_id=palette_id
            ),
        )
    )
    return _to_serializable(result)


@server.tool("contrast")
def contrast_tool(foreground: str, background: str, font_size: float = 16) -> Any:
    result = _run_command(
        lambda: check_colors(
            ContrastParams(foreground=foreground, background=background, font_size=font_size)
        )
    )
    return _to_serializable(result)


@server.tool("parse")
def parse_tool(text: str) -> Any:
    return _to_serializable(parse_palette(ParseParams(text=text)))


@server.tool("catalog")
def catalog_tool(style: str | None = None, section: str | None = None) -> Any:
    result = _with_services(
        lambda services: list_catalog(services, CatalogParams(style=style, section=section))
    )
    return _to_serializable(result)


@server.tool("preset")
def preset_tool(colors: list[str], preset: str = "original") -> Any:
    result = _run_command(lambda: generate_preset(PresetParams(colors=colors, preset=preset)))
    return _to_serializable(result)


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    server.run()
