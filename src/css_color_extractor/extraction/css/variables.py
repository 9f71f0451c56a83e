"""
css.variables
=============

Does: Collect custom-property definitions (`--name: value`) per selector and
      resolve single-level `var(--name)` references, with `:root` acting as
      the fallback scope.
Used By: Orchestrator (builds the map once per stylesheet), walker and
         tokenizer (lookup + substitution).
Returns: build_selector_variables() -> SelectorVariables,
         resolve_variables() -> Variables, substitute_variable() -> str.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from css_color_extractor.extraction.types import (
    Declaration,
    SelectorVariables,
    Variables,
)

logger = logging.getLogger(__name__)

ROOT_SELECTOR = ":root"
CUSTOM_PROPERTY_PREFIX = "--"

# exactly one reference, no fallback argument
_VAR_RE = re.compile(r"^var\(\s*(--[^\s,()]+)\s*\)$")

__all__ = [
    "ROOT_SELECTOR",
    "build_selector_variables",
    "resolve_variables",
    "substitute_variable",
]


def build_selector_variables(declarations: Iterable[Declaration]) -> SelectorVariables:
    """Does: Group `--*` declarations by selector; a later definition overwrites an earlier one."""
    selector_variables: SelectorVariables = {}
    for decl in declarations:
        name = decl.property.strip()
        if not name.startswith(CUSTOM_PROPERTY_PREFIX):
            continue
        selector_variables.setdefault(decl.selector, {})[name] = decl.value
    logger.debug("Collected variables for %d selector(s)", len(selector_variables))
    return selector_variables


def resolve_variables(
    selector_variables: SelectorVariables,
    selector: Optional[str],
) -> Variables:
    """Does: Merge `:root` variables with the selector's own (the selector's win)."""
    merged: Variables = dict(selector_variables.get(ROOT_SELECTOR, {}))
    if selector is not None and selector != ROOT_SELECTOR:
        merged.update(selector_variables.get(selector, {}))
    return merged


def substitute_variable(token: str, variables: Variables) -> str:
    """
    Does: Replace a token that is exactly `var(--name)` by the variable's value.
          The replacement is not resolved again, and unknown names leave the
          token untouched.
    """
    m = _VAR_RE.match(token)
    if not m:
        return token
    value = variables.get(m.group(1))
    if value is None:
        logger.debug("Unresolved variable reference %s", token)
        return token
    return value.strip()
