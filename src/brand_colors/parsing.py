"""Parse pasted palette input into hex colors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import logging
import re

from .colors import normalize_hex_color

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Paste colors from Coolors or enter hex values"
NO_COLORS_MESSAGE = "No valid colors found. Try pasting CSS from Coolors or hex values."

_COOLORS_URL = re.compile(
    r"coolors\.co/(?:palette/)?([0-9a-fA-F]{3,8}(?:-[0-9a-fA-F]{3,8})+)"
)
_CSS_PROPERTY = re.compile(r"--[\w-]+:\s*#([0-9a-fA-F]{3,8})\s*;")
_TOKEN_SPLIT = re.compile(r"[,\s]+")
_HEX_TOKEN = re.compile(r"^[0-9a-fA-F]{3,8}$")


@dataclass(slots=True)
class ParseResult:
    colors: List[str] = field(default_factory=list)
    error: Optional[str] = None


def _from_coolors_url(text: str) -> List[str]:
    match = _COOLORS_URL.search(text)
    if not match:
        return []
    return [f"#{value[:6]}" for value in match.group(1).split("-")]


def _from_css_properties(text: str) -> List[str]:
    return [f"#{value[:6]}" for value in _CSS_PROPERTY.findall(text)]


def _from_hex_tokens(text: str) -> List[str]:
    tokens = [token.lstrip("#") for token in _TOKEN_SPLIT.split(text) if token]
    parsed = [f"#{token[:6]}" for token in tokens if _HEX_TOKEN.match(token)]
    # A lone token is too ambiguous to treat as a palette.
    return parsed if len(parsed) >= 2 else []


def parse_palette_input(text: str) -> ParseResult:
    """Extract colors from a Coolors URL, CSS variables, or a list of hex values.

    The first format that yields any values wins. Colors come back as unique
    uppercase ``#RRGGBB`` strings in input order.
    """

    trimmed = (text or "").strip()
    if not trimmed:
        return ParseResult(colors=[], error=EMPTY_INPUT_MESSAGE)

    raw = _from_coolors_url(trimmed) or _from_css_properties(trimmed) or _from_hex_tokens(trimmed)

    colors: List[str] = []
    for value in raw:
        # Truncated 4- and 5-digit tokens are not valid colors and drop out here.
        normalized = normalize_hex_color(value)
        if normalized and normalized not in colors:
            colors.append(normalized)

    if not colors:
        logger.debug("No colors recognized in palette input %r", trimmed[:80])
        return ParseResult(colors=[], error=NO_COLORS_MESSAGE)
    return ParseResult(colors=colors, error=None)
