# constants.py
# ============

"""
constants.
=========

Does: Define immutable color-domain constants: the recognised output formats,
      their short aliases, the sort modes, and the `transparent` keyword.
Used By: Formatter, classifier, CLI choices.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

# ── 1) Output formats ────────────────────────────────────────────────────────

# Canonical format names, in the order the CLI lists them
COLOR_FORMATS: tuple[str, ...] = (
    "hexString",
    "hexaString",
    "rgbString",
    "percentString",
    "hslString",
    "hwbString",
    "keyword",
)

# Short/descriptive names folded onto the canonical ones
COLOR_FORMAT_ALIASES: dict[str, str] = {
    "hex": "hexString",
    "hexa": "hexaString",
    "hexWithAlpha": "hexaString",
    "rgb": "rgbString",
    "percent": "percentString",
    "hsl": "hslString",
    "hwb": "hwbString",
}

KEYWORD_FORMAT = "keyword"

# ── 2) Sorting ───────────────────────────────────────────────────────────────
SORT_HUE = "hue"
SORT_FREQUENCY = "frequency"
SORT_MODES: tuple[str, ...] = (SORT_HUE, SORT_FREQUENCY)

# ── 3) Keywords ──────────────────────────────────────────────────────────────
# `transparent` is a color but not part of the webcolors CSS3 table
TRANSPARENT = "transparent"

__all__ = [
    "COLOR_FORMATS",
    "COLOR_FORMAT_ALIASES",
    "KEYWORD_FORMAT",
    "SORT_HUE",
    "SORT_FREQUENCY",
    "SORT_MODES",
    "TRANSPARENT",
]
