"""
css.parser
==========

Does: Thin adapter over tinycss2. Walks every declaration of a stylesheet
      (including rules nested in @media/@supports/... blocks) and splits
      property values into comma- or space-separated lists while keeping
      function calls and strings atomic.
Used By: Orchestrator (stylesheet entry point), tokenizer (list splitting).
Returns: parse_declarations() -> list[Declaration]; split_comma()/split_space() -> list[str].
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

import tinycss2

from css_color_extractor.extraction.types import Declaration

logger = logging.getLogger(__name__)

__all__ = [
    "CssSyntaxError",
    "GROUPING_AT_RULES",
    "parse_declarations",
    "split_comma",
    "split_space",
]
__docformat__ = "google"

# At-rules whose block holds rules rather than declarations
GROUPING_AT_RULES = frozenset(
    {
        "media",
        "supports",
        "document",
        "-moz-document",
        "layer",
        "container",
        "scope",
        "starting-style",
    }
)


class CssSyntaxError(ValueError):
    """Raise when tinycss2 reports a rule-level syntax error."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        where = f" at {line}:{column}" if line is not None else ""
        super().__init__(f"{message}{where}")


# =============================================================================
# 1) LIST SPLITTING
# =============================================================================

def _split(value: str, is_separator: Callable[[object], bool]) -> List[str]:
    nodes = tinycss2.parse_component_value_list(value, skip_comments=True)
    groups: List[list] = [[]]
    for node in nodes:
        if is_separator(node):
            groups.append([])
        else:
            groups[-1].append(node)
    items = (tinycss2.serialize(group).strip() for group in groups)
    return [item for item in items if item]


def _is_comma(node: object) -> bool:
    return getattr(node, "type", None) == "literal" and node.value == ","  # type: ignore[attr-defined]


def _is_space(node: object) -> bool:
    return getattr(node, "type", None) == "whitespace"


def split_comma(value: str) -> List[str]:
    """Does: Split on top-level commas ("red, rgb(1, 2, 3)" -> 2 items)."""
    return _split(value, _is_comma)


def split_space(value: str) -> List[str]:
    """Does: Split on top-level whitespace ("1px solid red" -> 3 items)."""
    return _split(value, _is_space)


# =============================================================================
# 2) DECLARATION WALK
# =============================================================================

def _raise_parse_error(node) -> None:
    raise CssSyntaxError(
        f"{node.kind}: {node.message}",
        line=getattr(node, "source_line", None),
        column=getattr(node, "source_column", None),
    )


def _walk_block(content: Iterable, selector: Optional[str], out: List[Declaration]) -> None:
    """Collect declarations of a style block (and any rules nested in it)."""
    nodes = tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True)
    for node in nodes:
        if node.type == "declaration":
            out.append(
                Declaration(
                    property=node.name,
                    value=tinycss2.serialize(node.value).strip(),
                    selector=selector,
                )
            )
        elif node.type == "qualified-rule":
            _walk_rule(node, out)
        elif node.type == "at-rule":
            _walk_at_rule(node, selector, out)
        elif node.type == "error":
            logger.debug(
                "Skipping invalid declaration at %s:%s (%s)",
                node.source_line, node.source_column, node.message,
            )


def _walk_rule(rule, out: List[Declaration]) -> None:
    selector = tinycss2.serialize(rule.prelude).strip()
    _walk_block(rule.content, selector, out)


def _walk_at_rule(rule, selector: Optional[str], out: List[Declaration]) -> None:
    if rule.content is None:
        return
    if rule.lower_at_keyword in GROUPING_AT_RULES:
        if selector is not None:
            # conditional block nested inside a style rule keeps its selector
            _walk_block(rule.content, selector, out)
            return
        _walk_rule_list(rule.content, out)
        return
    prelude = tinycss2.serialize(rule.prelude).strip()
    at_selector = f"@{rule.at_keyword} {prelude}".strip()
    _walk_block(rule.content, at_selector, out)


def _walk_rule_list(content: Iterable, out: List[Declaration]) -> None:
    for node in tinycss2.parse_rule_list(content, skip_comments=True, skip_whitespace=True):
        if node.type == "qualified-rule":
            _walk_rule(node, out)
        elif node.type == "at-rule":
            _walk_at_rule(node, None, out)
        elif node.type == "error":
            _raise_parse_error(node)


def parse_declarations(text: str) -> List[Declaration]:
    """
    Does: Parse `text` and return every declaration in document order.
    Raises: CssSyntaxError for rule-level syntax errors (e.g. a selector
            with no block).
    """
    out: List[Declaration] = []
    nodes = tinycss2.parse_stylesheet(text, skip_comments=True, skip_whitespace=True)
    for node in nodes:
        if node.type == "qualified-rule":
            _walk_rule(node, out)
        elif node.type == "at-rule":
            _walk_at_rule(node, None, out)
        elif node.type == "error":
            _raise_parse_error(node)
    logger.debug("Parsed %d declaration(s)", len(out))
    return out
