"""Command line interface for brand colors."""

from __future__ import annotations

from typing import Callable, List, Optional, TypeVar
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.table import Table
from rich.text import Text

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
from .colors import normalize_hex_color, pick_contrast_color
from .config import load_config
from .contrast import ContrastRequirement
from .runtime import ConfigurationError, application_services

app = typer.Typer(add_completion=True)
console = Console()
error_console = Console(stderr=True)

T = TypeVar("T")


def _invoke(callback: Callable[[object], T]) -> T:
    try:
        with application_services() as services:
            return callback(services)
    except ConfigurationError as exc:  # pragma: no cover - exercised via CLI usage
        raise typer.BadParameter(str(exc)) from exc
    except CommandError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (defaults to config or environment)"
    ),
) -> None:
    """Derive accessible brand colors from palettes."""

    level = (log_level or load_config().get_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


@app.command()
def derive(
    colors: Optional[List[str]] = typer.Argument(None, help="Hex colors of the palette"),
    style: Optional[str] = typer.Option(None, help="Palette style that steers the background"),
    hint: Optional[str] = typer.Option(
        None, "--hint", help="Section hint used to classify the palette when no style is given"
    ),
    palette: Optional[str] = typer.Option(
        None, "--palette", help="Catalog palette id to use instead of explicit colors"
    ),
) -> None:
    """Map a palette to contrast-safe brand roles."""

    result = _invoke(
        lambda services: derive_mapping(
            services,
            DeriveParams(
                colors=list(colors or []), style=style, section_hint=hint, palette_id=palette
            ),
        )
    )
    if result.valid_colors == 0:
        console.print("[yellow]No valid colors found; showing default roles.[/yellow]")

    mapping = result.mapping
    table = Table(title=f"Brand roles ({result.style or 'auto'})", show_lines=False)
    table.add_column("Role")
    table.add_column("Color")
    table.add_column("Contrast")
    validation = result.validation
    table.add_row("background", _format_swatch(mapping.background), "-")
    table.add_row(
        "text",
        _format_swatch(mapping.text),
        _format_ratio(validation.text_background, ContrastRequirement.TEXT),
    )
    table.add_row(
        "primary",
        _format_swatch(mapping.primary),
        _format_ratio(validation.primary_background, ContrastRequirement.PRIMARY),
    )
    table.add_row(
        "accent",
        _format_swatch(mapping.accent),
        _format_ratio(validation.accent_background, ContrastRequirement.ACCENT),
    )
    table.add_row("surface", _format_swatch(mapping.surface), "-")
    console.print(table)
    console.print(_render_swatches("Surfaces", mapping.surfaces))


@app.command()
def classify(
    colors: Optional[List[str]] = typer.Argument(None, help="Hex colors of the palette"),
    hint: Optional[str] = typer.Option(None, "--hint", help="Section hint used as a tiebreaker"),
    palette: Optional[str] = typer.Option(None, "--palette", help="Catalog palette id"),
) -> None:
    """Classify a palette into one of eight visual styles."""

    result = _invoke(
        lambda services: classify_palette(
            services,
            ClassifyParams(colors=list(colors or []), section_hint=hint, palette_id=palette),
        )
    )
    console.print(f"Style: [bold]{result.label}[/bold] ({result.style})")
    if result.stats is None:
        console.print("[yellow]No valid colors found; style comes from the hint.[/yellow]")
        return

    stats = result.stats
    table = Table(title="Palette statistics", show_lines=False)
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Colors", str(stats.color_count))
    table.add_row("Average hue", f"{stats.avg_hue:.1f}")
    table.add_row("Average saturation", f"{stats.avg_saturation:.1f}")
    table.add_row("Average lightness", f"{stats.avg_lightness:.1f}")
    table.add_row("Max saturation", f"{stats.max_saturation:.1f}")
    table.add_row("Lightness range", f"{stats.min_lightness:.1f} -> {stats.max_lightness:.1f}")
    table.add_row("Warm ratio", f"{stats.warm_ratio:.2f}")
    table.add_row("Neutral ratio", f"{stats.neutral_ratio:.2f}")
    table.add_row("Light ratio", f"{stats.light_ratio:.2f}")
    table.add_row("Dark ratio", f"{stats.dark_ratio:.2f}")
    console.print(table)


@app.command()
def contrast(
    foreground: str = typer.Argument(..., help="Foreground hex color"),
    background: str = typer.Argument(..., help="Background hex color"),
    font_size: float = typer.Option(16, help="Font size in pixels"),
) -> None:
    """Report the WCAG contrast ratio and level of two colors."""

    try:
        result = check_colors(
            ContrastParams(foreground=foreground, background=background, font_size=font_size)
        )
    except CommandError as exc:
        raise typer.BadParameter(str(exc)) from exc

    level_style = "green" if result.level != "fail" else "red"
    entry = Text()
    entry.append_text(_format_swatch(result.foreground))
    entry.append(" on ")
    entry.append_text(_format_swatch(result.background))
    entry.append(f"  {result.ratio:.2f}:1 ")
    entry.append(result.level, style=f"bold {level_style}")
    console.print(entry)


@app.command()
def parse(
    text: str = typer.Argument(..., help="Coolors URL, CSS variables, or hex values"),
) -> None:
    """Extract hex colors from pasted palette text."""

    result = parse_palette(ParseParams(text=text))
    if result.error:
        console.print(f"[yellow]{result.error}[/yellow]")
        return
    console.print(_render_swatches("Colors", result.colors))


@app.command()
def catalog(
    style: Optional[str] = typer.Option(None, help="Only show palettes of this style"),
    section: Optional[str] = typer.Option(None, help="Only show palettes of this section"),
) -> None:
    """List curated palettes with their classified style."""

    result = _invoke(
        lambda services: list_catalog(services, CatalogParams(style=style, section=section))
    )
    if not result.palettes:
        console.print("[yellow]No palettes match.[/yellow]")
        return

    table = Table(show_lines=False)
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Section")
    table.add_column("Style")
    table.add_column("Colors")
    for item in result.palettes:
        table.add_row(
            item.id,
            item.name,
            item.section_name,
            item.style,
            _render_swatches(None, item.colors, compact=True),
        )
    console.print(table)


@app.command()
def preset(
    colors: List[str] = typer.Argument(..., help="Base hex colors"),
    name: str = typer.Option("original", "--name", help="Preset name"),
) -> None:
    """Generate a four-role palette from base colors using a preset."""

    try:
        result = generate_preset(PresetParams(colors=list(colors), preset=name))
    except CommandError as exc:
        raise typer.BadParameter(str(exc)) from exc

    console.print(f"Preset: [bold]{result.label}[/bold] ({result.preset})")
    table = Table(show_lines=False)
    table.add_column("Role")
    table.add_column("Color")
    for role in ("primary", "accent", "background", "text"):
        table.add_row(role, _format_swatch(getattr(result.palette, role)))
    console.print(table)


def _format_swatch(color: str, *, label: Optional[str] = None) -> Text:
    normalized = normalize_hex_color(color)
    text = f" {label if label is not None else color} "
    if normalized:
        style = Style(color=pick_contrast_color(normalized), bgcolor=normalized, bold=True)
    else:
        style = Style(color="white", bgcolor="grey27", bold=True)
    return Text(text, style=style)


def _render_swatches(title: Optional[str], colors: List[str], *, compact: bool = False) -> Text:
    text = Text()
    if title:
        text.append(f"{title}: ")
    if not colors:
        text.append("-")
        return text
    for index, color in enumerate(colors):
        if index and not compact:
            text.append(" ")
        text.append_text(_format_swatch(color, label="  " if compact else None))
    return text


def _format_ratio(ratio: float, minimum: float) -> Text:
    style = "green" if ratio >= minimum else "red"
    return Text(f"{ratio:.2f}:1 (min {minimum:g})", style=style)


if __name__ == "__main__":
    app()
