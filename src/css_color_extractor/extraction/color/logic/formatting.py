"""
formatting.py
=============

Does: Serialize a color literal into the caller's requested output format,
      or pass it through untouched when no recognised format is set.
Used By: Aggregator (every token is formatted before sorting/deduplication).
Returns: serialize() -> str; raises InvalidColorLiteral for unparsable input.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from css_color_extractor.extraction.color.constants import (
    COLOR_FORMAT_ALIASES,
)
from css_color_extractor.extraction.color.model import (
    CssColor,
    UnparsableColor,
    parse_color,
)
from css_color_extractor.extraction.types import Options

logger = logging.getLogger(__name__)

__all__ = [
    "InvalidColorLiteral",
    "FORMATTERS",
    "normalize_color_format",
    "format_color",
    "serialize",
]


class InvalidColorLiteral(UnparsableColor):
    """Raise when a token reaching the formatter is not a color (pipeline bug)."""


FORMATTERS: Dict[str, Callable[[CssColor], str]] = {
    "hexString": CssColor.hex_string,
    "hexaString": CssColor.hexa_string,
    "rgbString": CssColor.rgb_string,
    "percentString": CssColor.percent_string,
    "hslString": CssColor.hsl_string,
    "hwbString": CssColor.hwb_string,
    "keyword": CssColor.keyword,
}


def normalize_color_format(name: Optional[str]) -> Optional[str]:
    """Does: Resolve aliases to a canonical format name. Returns: None when unrecognised."""
    if not name or not isinstance(name, str):
        return None
    name = COLOR_FORMAT_ALIASES.get(name, name)
    return name if name in FORMATTERS else None


def format_color(color: CssColor, color_format: str) -> str:
    """Does: Serialize an already parsed color with a canonical format name."""
    return FORMATTERS[color_format](color)


def serialize(literal: str, options: Options) -> str:
    """Does: Return `literal` in options.color_format, or unchanged without a format."""
    color_format = normalize_color_format(options.color_format)
    if color_format is None:
        return literal
    try:
        color = parse_color(literal)
    except UnparsableColor as e:
        raise InvalidColorLiteral(f"Cannot format {literal!r}: {e}") from e
    return format_color(color, color_format)
