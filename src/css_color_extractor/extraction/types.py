# css_color_extractor/extraction/types.py
from __future__ import annotations

"""
types.py.

Does: Define the immutable value types passed through the extraction pipeline:
      Options (caller filters/format/sort) and Declaration (one parsed
      `property: value` pair with its enclosing selector).
Used By: Walker, tokenizer, aggregator, orchestrator, CLI.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

# ── Aliases ──────────────────────────────────────────────────────────────────
Variables = Dict[str, str]
SelectorVariables = Dict[Optional[str], Variables]

# camelCase names accepted next to the dataclass field names
_OPTION_KEYS: Dict[str, str] = {
    "withoutGrey": "without_grey",
    "withoutMonochrome": "without_monochrome",
    "allColors": "all_colors",
    "colorFormat": "color_format",
    "sort": "sort",
    "without_grey": "without_grey",
    "without_monochrome": "without_monochrome",
    "all_colors": "all_colors",
    "color_format": "color_format",
}


@dataclass(frozen=True)
class Options:
    """Caller configuration for one extraction.

    Attributes:
        without_grey: Drop achromatic colors other than pure black/white.
        without_monochrome: Drop every achromatic color (black, white, greys).
        all_colors: Keep duplicates instead of deduplicating the output.
        color_format: Output encoding name (see ``color.constants``); any
            unrecognised value keeps the original literal.
        sort: ``"hue"`` or ``"frequency"``; anything else keeps input order.
    """

    without_grey: bool = False
    without_monochrome: bool = False
    all_colors: bool = False
    color_format: Optional[str] = None
    sort: Optional[str] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Options":
        """Does: Build Options from camelCase or snake_case keys; unknown keys are ignored."""
        kwargs: Dict[str, Any] = {}
        for key, value in mapping.items():
            field = _OPTION_KEYS.get(key)
            if field is None:
                logger.warning("Ignoring unknown option %r", key)
                continue
            if field in ("without_grey", "without_monochrome", "all_colors"):
                value = bool(value)
            kwargs[field] = value
        return cls(**kwargs)


OptionsLike = Union[Options, Mapping[str, Any], None]


def coerce_options(options: OptionsLike) -> Options:
    """Does: Accept Options, a plain mapping, or None. Returns: Options."""
    if options is None:
        return Options()
    if isinstance(options, Options):
        return options
    if isinstance(options, Mapping):
        return Options.from_mapping(options)
    raise TypeError(f"options must be Options, a mapping or None, got {type(options).__name__}")


@dataclass(frozen=True)
class Declaration:
    """One `property: value` pair and the selector of the rule that holds it."""

    property: str
    value: str
    selector: Optional[str] = None


__all__ = [
    "Options",
    "OptionsLike",
    "Declaration",
    "Variables",
    "SelectorVariables",
    "coerce_options",
]

__docformat__ = "google"
