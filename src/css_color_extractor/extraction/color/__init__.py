"""
color.
=====

Does: Aggregate the color-domain layer: constants, the CSS3 keyword vocabulary,
      and the CssColor model adapter.
Used By: Tokenizer, classifier, formatter, aggregator.
Returns: Pure data structures and accessor functions; no side effects beyond
         lazy keyword caching.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    COLOR_FORMAT_ALIASES,
    COLOR_FORMATS,
    KEYWORD_FORMAT,
    SORT_FREQUENCY,
    SORT_HUE,
    SORT_MODES,
)

# ── Model ────────────────────────────────────────────────────────────────────
from .model import CssColor, UnparsableColor, parse_color, try_parse_color

# ── Vocabulary ───────────────────────────────────────────────────────────────
from .vocab import get_css_keyword_map, get_css_keyword_names

__all__ = [
    # constants
    "COLOR_FORMATS",
    "COLOR_FORMAT_ALIASES",
    "KEYWORD_FORMAT",
    "SORT_HUE",
    "SORT_FREQUENCY",
    "SORT_MODES",
    # model
    "CssColor",
    "UnparsableColor",
    "parse_color",
    "try_parse_color",
    # vocab
    "get_css_keyword_names",
    "get_css_keyword_map",
]
