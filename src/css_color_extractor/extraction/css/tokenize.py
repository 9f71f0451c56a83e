"""
css.tokenize
============

Does: Break a raw property value into candidate color tokens, unwrapping
      linear/radial gradients one level and substituting `var()` references,
      then keep only the tokens that are colors passing the caller's filters.
Used By: Walker (per declaration) and the value-string entry point.
Returns: tokenize_value() -> list[str] (original literals, order and duplicates kept).
"""

from __future__ import annotations

import re
from typing import List, Optional

from css_color_extractor.extraction.color.constants import KEYWORD_FORMAT
from css_color_extractor.extraction.color.logic.classification import (
    is_grey,
    is_monochrome,
    keyword_round_trips,
)
from css_color_extractor.extraction.color.logic.formatting import normalize_color_format
from css_color_extractor.extraction.color.model import UnparsableColor, parse_color
from css_color_extractor.extraction.css.parser import split_comma, split_space
from css_color_extractor.extraction.css.variables import substitute_variable
from css_color_extractor.extraction.general.utils.log import debug
from css_color_extractor.extraction.types import Options, Variables

__all__ = [
    "GRADIENT_RE",
    "split_value",
    "expand_gradients",
    "accept_color",
    "tokenize_value",
]

GRADIENT_RE = re.compile(
    r"^(-webkit-|-moz-|-o-)?(repeating-)?(radial|linear)-gradient\((.*)\)$",
    re.DOTALL,
)


def split_value(value: str) -> List[str]:
    """Does: Split on commas, then each group on spaces."""
    return [item for group in split_comma(value) for item in split_space(group)]


def expand_gradients(items: List[str]) -> List[str]:
    """Does: Replace each gradient item by its own comma/space separated arguments."""
    out: List[str] = []
    for item in items:
        m = GRADIENT_RE.match(item)
        if m:
            out.extend(split_value(m.group(4)))
        else:
            out.append(item)
    return out


def accept_color(candidate: str, options: Options) -> bool:
    """Does: Parse `candidate` and apply the grey/monochrome/keyword filters."""
    try:
        color = parse_color(candidate)
    except UnparsableColor:
        return False

    if options.without_monochrome and is_monochrome(color):
        debug(f"drop monochrome {candidate!r}", topic="tokenize")
        return False

    if options.without_grey and is_grey(color):
        debug(f"drop grey {candidate!r}", topic="tokenize")
        return False

    if normalize_color_format(options.color_format) == KEYWORD_FORMAT and not keyword_round_trips(color):
        debug(f"drop {candidate!r}: no exact keyword", topic="tokenize")
        return False

    return True


def tokenize_value(
    value: str,
    options: Options,
    variables: Optional[Variables] = None,
) -> List[str]:
    """
    Does: Extract the color literals of one property value.
    Returns: Surviving candidates in source order, duplicates included.
    """
    candidates = expand_gradients(split_value(value))
    if variables is not None:
        candidates = [substitute_variable(c, variables) for c in candidates]

    tokens = [c for c in candidates if accept_color(c, options)]
    debug(f"{value!r} -> {tokens}", topic="tokenize")
    return tokens
