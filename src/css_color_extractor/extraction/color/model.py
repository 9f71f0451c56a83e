"""
model.py
========

Does: Adapter around the color model. Parses a CSS color literal (keyword, hex,
      rgb[a](), hsl[a](), hwb()) into a single normalized value type, CssColor,
      and serializes it back into the supported output encodings.
Used By: Classifier, formatter, aggregator (hue sort), tokenizer (validation).
Returns: parse_color() -> CssColor; raises UnparsableColor for non-colors.

Notes:
- Named colors and hex digits go through webcolors; HSL/HWB math goes through
  the standard colorsys conversions.
- Serialized numbers (channels, hue, percentages) are rounded half-up to
  integers. Classification and hue sorting read the unrounded values
  (`hsl_raw()`), so a faint tint never collapses onto the grey axis.
"""

from __future__ import annotations

import colorsys
import logging
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

import webcolors

from css_color_extractor.extraction.color.constants import TRANSPARENT
from css_color_extractor.extraction.color.vocab import (
    RGB,
    keyword_to_rgb,
    nearest_keyword,
    rgb_to_keyword,
)

__all__ = [
    "CssColor",
    "UnparsableColor",
    "parse_color",
    "try_parse_color",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# ── Exceptions ───────────────────────────────────────────────────────────────
class UnparsableColor(ValueError):
    """Raise when a string is not a color literal the model understands."""


# ── Patterns ─────────────────────────────────────────────────────────────────
_HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_KEYWORD_RE = re.compile(r"^[a-z]+$", re.IGNORECASE)
_FUNC_RE = re.compile(r"^(rgba?|hsla?|hwba?)\(\s*(.*?)\s*\)$", re.IGNORECASE | re.DOTALL)
_ARG_SPLIT_RE = re.compile(r"\s*[,/]\s*|\s+")
_ARG_RE = re.compile(
    r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)(%|deg)?$", re.IGNORECASE
)

Arg = Tuple[float, Optional[str]]


# ── Numeric helpers ──────────────────────────────────────────────────────────
def _round(value: float) -> int:
    """Round half-up (2.5 -> 3), unlike Python's banker's rounding."""
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _fmt_alpha(alpha: float) -> str:
    return f"{alpha:.4f}".rstrip("0").rstrip(".")


# ── Value type ───────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class CssColor:
    """Normalized color: sRGB channels in 0..255 (floats) and alpha in 0..1."""

    r: float
    g: float
    b: float
    alpha: float = 1.0

    # -- channels -------------------------------------------------------------
    @property
    def red(self) -> int:
        return _round(self.r)

    @property
    def green(self) -> int:
        return _round(self.g)

    @property
    def blue(self) -> int:
        return _round(self.b)

    def rgb(self) -> RGB:
        return self.red, self.green, self.blue

    def rgb_number(self) -> int:
        """Does: Pack the rounded channels into a 24-bit integer (alpha ignored)."""
        r, g, b = self.rgb()
        return (r << 16) | (g << 8) | b

    # -- cylindrical views ----------------------------------------------------
    def _hls_raw(self) -> Tuple[float, float, float]:
        return colorsys.rgb_to_hls(self.r / 255.0, self.g / 255.0, self.b / 255.0)

    def hsl_raw(self) -> Tuple[float, float, float]:
        """Does: Return unrounded (hue degrees, saturation 0..1, lightness 0..1)."""
        h, l, s = self._hls_raw()
        return h * 360, s, l

    def hsl(self) -> Tuple[int, int, int]:
        """Does: Return (hue 0..359, saturation %, lightness %), rounded."""
        h, s, l = self.hsl_raw()
        return _round(h) % 360, _round(s * 100), _round(l * 100)

    def hwb(self) -> Tuple[int, int, int]:
        """Does: Return (hue, whiteness %, blackness %), rounded."""
        hue = self.hsl()[0]
        low = min(self.r, self.g, self.b) / 255.0
        high = max(self.r, self.g, self.b) / 255.0
        return hue, _round(low * 100), _round((1 - high) * 100)

    @property
    def hue(self) -> int:
        return self.hsl()[0]

    @property
    def saturation(self) -> int:
        return self.hsl()[1]

    @property
    def lightness(self) -> int:
        return self.hsl()[2]

    # -- serializers ----------------------------------------------------------
    def hex_string(self) -> str:
        return webcolors.rgb_to_hex(self.rgb()).upper()

    def hexa_string(self) -> str:
        return f"{self.hex_string()}{_round(self.alpha * 255):02X}"

    def rgb_string(self) -> str:
        r, g, b = self.rgb()
        if self.alpha < 1:
            return f"rgba({r}, {g}, {b}, {_fmt_alpha(self.alpha)})"
        return f"rgb({r}, {g}, {b})"

    def percent_string(self) -> str:
        r, g, b = (_round(c / 255 * 100) for c in self.rgb())
        if self.alpha < 1:
            return f"rgba({r}%, {g}%, {b}%, {_fmt_alpha(self.alpha)})"
        return f"rgb({r}%, {g}%, {b}%)"

    def hsl_string(self) -> str:
        h, s, l = self.hsl()
        if self.alpha < 1:
            return f"hsla({h}, {s}%, {l}%, {_fmt_alpha(self.alpha)})"
        return f"hsl({h}, {s}%, {l}%)"

    def hwb_string(self) -> str:
        h, w, b = self.hwb()
        if self.alpha < 1:
            return f"hwb({h}, {w}%, {b}%, {_fmt_alpha(self.alpha)})"
        return f"hwb({h}, {w}%, {b}%)"

    def keyword(self) -> str:
        """Does: Exact CSS3 name for the color, else the nearest one (alpha ignored)."""
        rgb = self.rgb()
        return rgb_to_keyword(rgb) or nearest_keyword(rgb)


# =============================================================================
# Parsing
# =============================================================================

def _parse_args(body: str) -> List[Arg]:
    parts = [p for p in _ARG_SPLIT_RE.split(body) if p]
    args: List[Arg] = []
    for part in parts:
        m = _ARG_RE.match(part)
        if not m:
            raise UnparsableColor(f"Invalid color argument: {part!r}")
        unit = m.group(2).lower() if m.group(2) else None
        args.append((float(m.group(1)), unit))
    return args


def _parse_alpha(args: List[Arg]) -> float:
    if len(args) < 4:
        return 1.0
    value, unit = args[3]
    if unit == "deg":
        raise UnparsableColor("Alpha cannot be an angle")
    return _clamp(value / 100 if unit == "%" else value, 0.0, 1.0)


def _parse_hue(arg: Arg) -> float:
    value, unit = arg
    if unit == "%":
        raise UnparsableColor("Hue cannot be a percentage")
    return value % 360


def _parse_percent(arg: Arg) -> float:
    value, unit = arg
    if unit == "deg":
        raise UnparsableColor("Expected a percentage")
    return _clamp(value, 0.0, 100.0) / 100


def _from_rgb(args: List[Arg]) -> CssColor:
    units = {unit for _, unit in args[:3]}
    if units not in ({None}, {"%"}):
        raise UnparsableColor("rgb() channels must be all numbers or all percentages")
    channels = [
        _clamp(v * 2.55 if unit == "%" else v, 0.0, 255.0) for v, unit in args[:3]
    ]
    return CssColor(*channels, alpha=_parse_alpha(args))


def _from_hsl(args: List[Arg]) -> CssColor:
    h = _parse_hue(args[0])
    s, l = _parse_percent(args[1]), _parse_percent(args[2])
    r, g, b = colorsys.hls_to_rgb(h / 360, l, s)
    return CssColor(r * 255, g * 255, b * 255, alpha=_parse_alpha(args))


def _from_hwb(args: List[Arg]) -> CssColor:
    h = _parse_hue(args[0])
    w, bk = _parse_percent(args[1]), _parse_percent(args[2])
    if w + bk >= 1:
        grey = w / (w + bk) * 255
        return CssColor(grey, grey, grey, alpha=_parse_alpha(args))
    pure = colorsys.hls_to_rgb(h / 360, 0.5, 1.0)
    r, g, b = (c * (1 - w - bk) + w for c in pure)
    return CssColor(r * 255, g * 255, b * 255, alpha=_parse_alpha(args))


def _from_hex(literal: str) -> CssColor:
    digits = literal[1:]
    alpha = 1.0
    if len(digits) in (4, 8):
        step = len(digits) // 4
        alpha_hex = digits[-step:] * (2 // step)
        alpha = round(int(alpha_hex, 16) / 255, 2)
        digits = digits[:-step]
    try:
        r, g, b = webcolors.hex_to_rgb(f"#{digits}")
    except ValueError as e:
        raise UnparsableColor(str(e)) from e
    return CssColor(r, g, b, alpha=alpha)


def parse_color(literal: str) -> CssColor:
    """
    Does: Parse a CSS color literal into a CssColor.
    Raises: UnparsableColor when the text is not a supported color.
    """
    if not isinstance(literal, str):
        raise UnparsableColor(f"Expected a string, got {type(literal).__name__}")
    text = literal.strip()

    if _HEX_RE.match(text):
        return _from_hex(text)

    if _KEYWORD_RE.match(text):
        if text.lower() == TRANSPARENT:
            return CssColor(0, 0, 0, alpha=0.0)
        rgb = keyword_to_rgb(text)
        if rgb is None:
            raise UnparsableColor(f"Unknown color keyword: {literal!r}")
        return CssColor(*rgb)

    m = _FUNC_RE.match(text)
    if not m:
        raise UnparsableColor(f"Not a color: {literal!r}")

    name = m.group(1).lower()
    args = _parse_args(m.group(2))
    if len(args) not in (3, 4):
        raise UnparsableColor(f"{name}() expects 3 or 4 arguments, got {len(args)}")

    if name.startswith("rgb"):
        return _from_rgb(args)
    if name.startswith("hsl"):
        return _from_hsl(args)
    return _from_hwb(args)


def try_parse_color(literal: str) -> Optional[CssColor]:
    """Does: parse_color() that returns None instead of raising."""
    try:
        return parse_color(literal)
    except UnparsableColor:
        return None
