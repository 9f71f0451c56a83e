"""
vocab
=====

Does: Expose the CSS3 named-color vocabulary (via webcolors) as name → RGB
      lookups in a stable order.
Used By: Color model parsing (keywords) and keyword serialization.
Returns: Cached tuples and mappings (no side effects beyond lazy caching).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Optional, Tuple

import webcolors

log = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


@lru_cache(maxsize=1)
def get_css_keyword_names() -> Tuple[str, ...]:
    """Does: Return all CSS3 color keywords, alphabetically sorted."""
    return tuple(sorted(n.lower() for n in webcolors.names(webcolors.CSS3)))


@lru_cache(maxsize=1)
def get_css_keyword_map() -> Dict[str, RGB]:
    """Does: Map every CSS3 keyword to its integer RGB triple (sorted by name)."""
    named: Dict[str, RGB] = {}
    for name in get_css_keyword_names():
        named[name] = tuple(webcolors.name_to_rgb(name, spec=webcolors.CSS3))
    log.debug("Loaded %d CSS3 color keywords", len(named))
    return named


def keyword_to_rgb(name: str) -> Optional[RGB]:
    """Does: Case-insensitive keyword lookup. Returns: RGB or None when unknown."""
    return get_css_keyword_map().get(name.strip().lower())


def rgb_to_keyword(rgb: RGB) -> Optional[str]:
    """Does: Exact keyword for an RGB triple. Returns: name or None."""
    try:
        return webcolors.rgb_to_name(rgb, spec=webcolors.CSS3)
    except ValueError:
        return None


def nearest_keyword(rgb: RGB) -> str:
    """
    Does: Find the keyword closest to `rgb` by squared sRGB distance.
          Ties keep the alphabetically first name.
    """
    best_name, best_d = "", float("inf")
    for name, ref in get_css_keyword_map().items():
        d = sum((a - b) ** 2 for a, b in zip(rgb, ref))
        if d < best_d:
            best_name, best_d = name, d
    return best_name


__all__ = [
    "RGB",
    "get_css_keyword_names",
    "get_css_keyword_map",
    "keyword_to_rgb",
    "rgb_to_keyword",
    "nearest_keyword",
]
