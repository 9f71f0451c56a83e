# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Public entry points of the color-extraction engine. Each one starts the
      pipeline at a different stage and ends in the aggregator:
  - extract_from_stylesheet(text, options) -> list[str]
        parse -> collect variables -> walk declarations -> aggregate
  - extract_from_declaration(declaration, options, selector_variables) -> list[str]
        walk one declaration -> aggregate
  - extract_from_value_string(value, options, variables) -> list[str]
        tokenize one raw value (no allow-list) -> aggregate
Used by: The CLI, library callers, tests.

All functions are pure: nothing is cached or shared between calls.
"""

import logging
import os
from typing import List, Optional

from css_color_extractor.extraction.color.logic.aggregate import aggregate_colors
from css_color_extractor.extraction.css.parser import parse_declarations
from css_color_extractor.extraction.css.tokenize import tokenize_value
from css_color_extractor.extraction.css.variables import build_selector_variables
from css_color_extractor.extraction.css.walker import (
    tokens_from_declaration,
    tokens_from_declarations,
)
from css_color_extractor.extraction.general.utils.load_config import load_config
from css_color_extractor.extraction.types import (
    Declaration,
    Options,
    OptionsLike,
    SelectorVariables,
    Variables,
    coerce_options,
)

logger = logging.getLogger(__name__)

__all__ = [
    "extract_from_stylesheet",
    "extract_from_declaration",
    "extract_from_value_string",
    "load_options",
]


def extract_from_stylesheet(text: str, options: OptionsLike = None) -> List[str]:
    """
    Does: Extract colors from a whole stylesheet, resolving var() references
          against the enclosing selector and then `:root`.
    Raises: CssSyntaxError for rule-level syntax errors, InvalidColorLiteral
            on an internal formatting failure.
    """
    opts = coerce_options(options)
    declarations = parse_declarations(text)
    selector_variables = build_selector_variables(declarations)
    tokens = tokens_from_declarations(declarations, opts, selector_variables)
    logger.debug("Stylesheet: %d declaration(s), %d token(s)", len(declarations), len(tokens))
    return aggregate_colors(tokens, opts)


def extract_from_declaration(
    declaration: Declaration,
    options: OptionsLike = None,
    selector_variables: Optional[SelectorVariables] = None,
) -> List[str]:
    """Does: Extract colors from one parsed declaration (allow-list applies)."""
    opts = coerce_options(options)
    tokens = tokens_from_declaration(declaration, opts, selector_variables)
    return aggregate_colors(tokens, opts)


def extract_from_value_string(
    value: str,
    options: OptionsLike = None,
    variables: Optional[Variables] = None,
) -> List[str]:
    """Does: Extract colors from a raw property value; `variables` is a flat name -> value map."""
    opts = coerce_options(options)
    tokens = tokenize_value(value, opts, variables)
    return aggregate_colors(tokens, opts)


def load_options(path: str | os.PathLike[str], *, allow_comments: bool = False) -> Options:
    """Does: Read an options JSON file (camelCase or snake_case keys) into Options."""
    data = load_config(path, allow_comments=allow_comments)
    return Options.from_mapping(data)
