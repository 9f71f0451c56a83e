"""
css.walker
==========

Does: Keep only declarations whose property can carry a color and hand their
      values (with the selector's resolved variables) to the tokenizer.
Used By: Orchestrator (stylesheet and declaration entry points).
Returns: tokens_from_declarations() -> list[str], not deduplicated.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Optional

from css_color_extractor.extraction.css.tokenize import tokenize_value
from css_color_extractor.extraction.css.variables import resolve_variables
from css_color_extractor.extraction.types import (
    Declaration,
    Options,
    SelectorVariables,
)

logger = logging.getLogger(__name__)

COLOR_PROPERTIES: FrozenSet[str] = frozenset(
    {
        "color",
        "background",
        "background-color",
        "background-image",
        "border",
        "border-top",
        "border-right",
        "border-bottom",
        "border-left",
        "border-color",
        "border-top-color",
        "border-right-color",
        "border-bottom-color",
        "border-left-color",
        "outline",
        "outline-color",
        "text-decoration",
        "text-decoration-color",
        "text-shadow",
        "box-shadow",
        "fill",
        "stroke",
        "stop-color",
        "flood-color",
        "lighting-color",
    }
)

__all__ = [
    "COLOR_PROPERTIES",
    "does_property_allow_color",
    "tokens_from_declaration",
    "tokens_from_declarations",
]


def does_property_allow_color(prop: str) -> bool:
    """Does: Allow-list check (property names are ASCII case-insensitive)."""
    return prop.strip().lower() in COLOR_PROPERTIES


def tokens_from_declaration(
    declaration: Declaration,
    options: Options,
    selector_variables: Optional[SelectorVariables] = None,
) -> List[str]:
    """Does: Color tokens of one declaration; [] for properties outside the allow-list."""
    if not does_property_allow_color(declaration.property):
        return []
    variables = None
    if selector_variables is not None:
        variables = resolve_variables(selector_variables, declaration.selector)
    return tokenize_value(declaration.value, options, variables)


def tokens_from_declarations(
    declarations: Iterable[Declaration],
    options: Options,
    selector_variables: Optional[SelectorVariables] = None,
) -> List[str]:
    """Does: Concatenate the tokens of every declaration, in order."""
    tokens: List[str] = []
    for declaration in declarations:
        tokens.extend(tokens_from_declaration(declaration, options, selector_variables))
    logger.debug("Walker collected %d token(s)", len(tokens))
    return tokens
