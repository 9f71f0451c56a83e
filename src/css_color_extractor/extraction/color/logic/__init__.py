"""
logic
=====

Color-level pipeline stages.
- classification: is_monochrome, is_grey, keyword_round_trips
- formatting    : serialize, normalize_color_format, format_color, InvalidColorLiteral
- aggregate     : aggregate_colors, sort_by_hue, sort_by_frequency, unique
"""

from __future__ import annotations

from .aggregate import aggregate_colors, sort_by_frequency, sort_by_hue, unique
from .classification import is_grey, is_monochrome, keyword_round_trips
from .formatting import (
    FORMATTERS,
    InvalidColorLiteral,
    format_color,
    normalize_color_format,
    serialize,
)

__all__ = [
    # classification
    "is_monochrome",
    "is_grey",
    "keyword_round_trips",
    # formatting
    "FORMATTERS",
    "InvalidColorLiteral",
    "normalize_color_format",
    "format_color",
    "serialize",
    # aggregate
    "aggregate_colors",
    "sort_by_hue",
    "sort_by_frequency",
    "unique",
]
