"""
classification.py

Does:
    Decide achromatic membership of a parsed color and guard keyword output.
    Includes:
        - is_monochrome(): unrounded hue 0 and saturation 0 (black, white, greys)
        - is_grey(): monochrome but strictly between black and white
        - keyword_round_trips(): the derived keyword maps back to the same RGB

Returns:
    Plain booleans; works on CssColor only, never on the original literal text.
"""

from __future__ import annotations

from css_color_extractor.extraction.color.model import CssColor, try_parse_color


def is_monochrome(color: CssColor) -> bool:
    """Does: True when the color sits on the black/grey/white axis (exact, unrounded)."""
    hue, saturation, _ = color.hsl_raw()
    return hue == 0 and saturation == 0


def is_grey(color: CssColor) -> bool:
    """Does: True for achromatic colors other than pure black and pure white."""
    # monochrome guarantees r == g == b, so one channel is enough
    red = color.red
    return is_monochrome(color) and 0 < red < 255


def keyword_round_trips(color: CssColor) -> bool:
    """Does: True when parsing color.keyword() yields the exact same RGB number."""
    keyword_color = try_parse_color(color.keyword())
    return keyword_color is not None and keyword_color.rgb_number() == color.rgb_number()


__all__ = ["is_monochrome", "is_grey", "keyword_round_trips"]
