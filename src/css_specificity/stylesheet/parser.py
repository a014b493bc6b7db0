"""Hand-written reader that splits CSS source into per-selector rules.

Syntax example:
    /* comments are dropped */
    @media print { p { color: black; } }
    h1, .title { color: red; font-size: 2em; }
    #main p { margin: 0; }

At-rules are skipped together with any nested blocks; only plain rules are
returned.
"""

from __future__ import annotations

import logging
import re

from css_specificity.selector import from_selector, split_selector_list
from css_specificity.stylesheet.errors import StylesheetError
from css_specificity.stylesheet.model import StyleRule, Stylesheet

__all__ = ["parse_stylesheet"]

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s*")


def _blank_comments(source: str) -> str:
    """Replace comments with spaces, keeping newlines so positions stay valid."""
    return _COMMENT_RE.sub(lambda m: re.sub(r"[^\n]", " ", m.group()), source)


def _position(text: str, index: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of *index* in *text*."""
    line = text.count("\n", 0, index) + 1
    column = index - (text.rfind("\n", 0, index) + 1) + 1
    return line, column


def _error(message: str, text: str, index: int) -> StylesheetError:
    return StylesheetError(message, *_position(text, index))


def _skip_at_rule(text: str, start: int) -> int:
    """Return the index just past the at-rule beginning at *start*."""
    semicolon = text.find(";", start)
    brace = text.find("{", start)
    if brace == -1 or (semicolon != -1 and semicolon < brace):
        end = len(text) if semicolon == -1 else semicolon + 1
        logger.debug("Skipping at-rule %r", text[start:end].strip())
        return end

    depth = 0
    for index in range(brace, len(text)):
        char = text[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                logger.debug("Skipping at-rule block %r", text[start:brace].strip())
                return index + 1
    raise _error("Unclosed '{' in at-rule", text, brace)


def _parse_properties(body: str) -> dict[str, str]:
    """Parse the body of a rule block into a property dictionary."""
    props: dict[str, str] = {}
    for declaration in body.split(";"):
        if not declaration.strip():
            continue
        name, sep, value = declaration.partition(":")
        name = name.strip().lower()
        value = value.strip()
        if not sep or not name or not value:
            logger.debug("Skipping invalid declaration %r", declaration.strip())
            continue
        props[name] = value
    return props


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS source into a Stylesheet of single-selector rules.

    Rules are returned in source order; a selector group produces one rule per
    selector, numbered consecutively. Blocks without any valid declaration are
    dropped.

    Raises:
        StylesheetError: on unbalanced braces or an empty selector.
    """
    text = _blank_comments(source)
    rules: list[StyleRule] = []
    pos = 0

    while True:
        pos = _WHITESPACE_RE.match(text, pos).end()
        if pos >= len(text):
            break
        if text[pos] == "@":
            pos = _skip_at_rule(text, pos)
            continue

        open_brace = text.find("{", pos)
        close_brace = text.find("}", pos)
        if close_brace != -1 and (open_brace == -1 or close_brace < open_brace):
            raise _error("Unexpected '}'", text, close_brace)
        if open_brace == -1:
            raise _error("Expected '{' after selector", text, pos)

        end = close_brace
        if end == -1:
            raise _error("Unclosed '{'", text, open_brace)
        nested = text.find("{", open_brace + 1)
        if nested != -1 and nested < end:
            raise _error("Unexpected '{' inside declaration block", text, nested)

        selectors = split_selector_list(text[pos:open_brace])
        if not selectors:
            raise _error("Empty selector", text, open_brace)

        properties = _parse_properties(text[open_brace + 1 : end])
        if properties:
            for selector in selectors:
                rules.append(
                    StyleRule(
                        selector=selector,
                        properties=dict(properties),
                        specificity=from_selector(selector),
                        order=len(rules),
                    )
                )
        else:
            logger.debug("Dropping rule without declarations: %r", selectors)
        pos = end + 1

    return Stylesheet(rules=rules)
