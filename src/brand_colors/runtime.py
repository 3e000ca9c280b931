"""Runtime helpers for constructing shared application services."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional
import logging

from .catalog import CatalogError, PaletteCatalog
from .config import Config, load_config
from .styles import StyleCache

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when required configuration is missing or invalid."""


@dataclass(slots=True)
class Services:
    """Bundle of services used across entry points."""

    config: Config
    catalog: PaletteCatalog
    style_cache: Optional[StyleCache]


def build_services(config: Config, style_cache: Optional[StyleCache] = None) -> Services:
    if not config.cache_styles:
        style_cache = None
    elif style_cache is None:
        style_cache = StyleCache()

    try:
        catalog = PaletteCatalog.load(config.catalog_path, style_cache=style_cache)
    except CatalogError as exc:
        raise ConfigurationError(
            f"Palette catalog could not be loaded from {config.catalog_path or 'package data'}: {exc}"
        ) from exc

    logger.debug(
        "Loaded catalog with %d palettes (style cache %s)",
        len(catalog.palettes()),
        "enabled" if style_cache is not None else "disabled",
    )
    return Services(config=config, catalog=catalog, style_cache=style_cache)


@contextmanager
def application_services(
    *, config: Optional[Config] = None, style_cache: Optional[StyleCache] = None
) -> Iterator[Services]:
    """Yield initialized services for a single command execution."""

    yield build_services(config or load_config(), style_cache)
