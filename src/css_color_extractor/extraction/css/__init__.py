"""
css
===

Stylesheet-side stages of the pipeline.
- parser    : tinycss2 adapter (declaration walk, list splitting)
- variables : per-selector custom properties and var() substitution
- tokenize  : value -> candidate color tokens
- walker    : property allow-list and per-declaration dispatch
"""

from __future__ import annotations

from .parser import CssSyntaxError, parse_declarations, split_comma, split_space
from .tokenize import tokenize_value
from .variables import (
    ROOT_SELECTOR,
    build_selector_variables,
    resolve_variables,
    substitute_variable,
)
from .walker import (
    COLOR_PROPERTIES,
    does_property_allow_color,
    tokens_from_declaration,
    tokens_from_declarations,
)

__all__ = [
    "CssSyntaxError",
    "parse_declarations",
    "split_comma",
    "split_space",
    "tokenize_value",
    "ROOT_SELECTOR",
    "build_selector_variables",
    "resolve_variables",
    "substitute_variable",
    "COLOR_PROPERTIES",
    "does_property_allow_color",
    "tokens_from_declaration",
    "tokens_from_declarations",
]
