"""
css_color_extractor
===================

Does: Extract, filter, reformat and order the colors used in a stylesheet.
Returns: Public entry points returning list[str]:
  - extract_from_stylesheet(text, options=None)
  - extract_from_declaration(declaration, options=None, selector_variables=None)
  - extract_from_value_string(value, options=None, variables=None)
Used by: Library callers and the `css-color-extractor` command.
"""

from css_color_extractor.extraction.color.logic.formatting import InvalidColorLiteral
from css_color_extractor.extraction.color.model import UnparsableColor
from css_color_extractor.extraction.css.parser import CssSyntaxError
from css_color_extractor.extraction.orchestrator import (
    extract_from_declaration,
    extract_from_stylesheet,
    extract_from_value_string,
    load_options,
)
from css_color_extractor.extraction.types import Declaration, Options

__all__ = [
    "extract_from_stylesheet",
    "extract_from_declaration",
    "extract_from_value_string",
    "load_options",
    "Options",
    "Declaration",
    "CssSyntaxError",
    "InvalidColorLiteral",
    "UnparsableColor",
]
__version__ = "1.0.0"
__docformat__ = "google"
