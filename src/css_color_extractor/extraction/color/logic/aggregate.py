"""
aggregate.py
============

Does: Turn the raw token stream into the final result: format every token,
      optionally sort by hue or frequency, then deduplicate (first occurrence
      wins) unless all_colors is set.
Used By: Every public entry point of the orchestrator.
Returns: aggregate_colors() -> list[str]
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List

from css_color_extractor.extraction.color.constants import SORT_FREQUENCY, SORT_HUE
from css_color_extractor.extraction.color.logic.formatting import (
    InvalidColorLiteral,
    serialize,
)
from css_color_extractor.extraction.color.model import UnparsableColor, parse_color
from css_color_extractor.extraction.types import Options

logger = logging.getLogger(__name__)

__all__ = ["aggregate_colors", "sort_by_hue", "sort_by_frequency", "unique"]


def _hue_of(value: str) -> float:
    try:
        return parse_color(value).hsl_raw()[0]
    except UnparsableColor as e:
        raise InvalidColorLiteral(f"Cannot sort {value!r} by hue: {e}") from e


def sort_by_hue(colors: List[str]) -> List[str]:
    """Does: Stable sort by hue, ascending."""
    return sorted(colors, key=_hue_of)


def sort_by_frequency(colors: List[str]) -> List[str]:
    """Does: Stable sort by occurrence count, most frequent first."""
    counts = Counter(colors)
    return sorted(colors, key=lambda c: -counts[c])


def unique(colors: Iterable[str]) -> List[str]:
    """Does: Drop repeats, keeping the first occurrence and its position."""
    return list(dict.fromkeys(colors))


def aggregate_colors(tokens: Iterable[str], options: Options) -> List[str]:
    """
    Does: Format, sort and deduplicate `tokens` according to `options`.
    Raises: InvalidColorLiteral if a token is not a color (never expected).
    """
    colors = [serialize(token, options) for token in tokens]

    if options.sort == SORT_HUE:
        colors = sort_by_hue(colors)
    elif options.sort == SORT_FREQUENCY:
        colors = sort_by_frequency(colors)

    if not options.all_colors:
        colors = unique(colors)

    logger.debug("Aggregated %d color(s) (sort=%s)", len(colors), options.sort)
    return colors
