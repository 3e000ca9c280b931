"""Configuration helpers for brand colors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional
import os
try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11 fallback
    import tomli as tomllib  # type: ignore[assignment]

from dotenv import load_dotenv


DEFAULT_CONFIG_PATH = Path("config.toml")
DEFAULT_ENV_PATH = Path(".env")


@dataclass(slots=True)
class Config:
    """Application configuration."""

    catalog_path: Optional[Path] = None
    default_section_hint: str = ""
    cache_styles: bool = True
    log_level: str = "WARNING"
    log_level_env: str = "BRAND_COLORS_LOG_LEVEL"
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    def get_log_level(self) -> str:
        return (os.environ.get(self.log_level_env) or self.log_level).upper()


def _load_dict(path: Path) -> Dict[str, object]:
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _as_bool(value: object, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def load_config(path: Optional[Path] = None, env_path: Optional[Path] = None) -> Config:
    """Load configuration from disk, falling back to defaults."""

    env_file = env_path or DEFAULT_ENV_PATH
    if env_file:
        load_dotenv(env_file)

    config_path = path or DEFAULT_CONFIG_PATH
    raw = _load_dict(config_path)

    defaults = Config()
    catalog_value = raw.get("catalog_path")

    return Config(
        catalog_path=Path(str(catalog_value)) if catalog_value else None,
        default_section_hint=str(raw.get("default_section_hint", defaults.default_section_hint)),
        cache_styles=_as_bool(raw.get("cache_styles"), defaults.cache_styles),
        log_level=str(raw.get("log_level", defaults.log_level)),
        log_level_env=str(raw.get("log_level_env", defaults.log_level_env)),
        api_host=str(raw.get("api_host", defaults.api_host)),
        api_port=int(raw.get("api_port", defaults.api_port)),
    )
