"""Selector analyzer: count specificity categories in a selector string.

The category patterns follow the approximation used by premailer/css_parser
(``lib/css_parser/regexps.rb``). They are three independent scans over the
whole selector, not a tokenizing parser: each pattern counts its own
non-overlapping matches and a piece of text may feed more than one counter.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from css_specificity.specificity import Specificity

__all__ = [
    "PSEUDO_CLASSES",
    "PSEUDO_ELEMENTS",
    "accumulate",
    "count_classes",
    "count_ids",
    "count_types",
    "from_selector",
    "split_selector_list",
]

logger = logging.getLogger(__name__)

PSEUDO_CLASSES: tuple[str, ...] = (
    "link",
    "visited",
    "active",
    "hover",
    "focus",
    "lang",
    "target",
    "enabled",
    "disabled",
    "checked",
    "indeterminate",
    "root",
    "nth-child",
    "nth-last-child",
    "nth-of-type",
    "nth-last-of-type",
    "first-child",
    "last-child",
    "first-of-type",
    "last-of-type",
    "only-child",
    "only-of-type",
    "empty",
    "contains",
)

PSEUDO_ELEMENTS: tuple[str, ...] = (
    "after",
    "before",
    "first-letter",
    "first-line",
    "selection",
)

_FLAGS = re.IGNORECASE | re.ASCII | re.VERBOSE

# a: ID selectors
_ID_RE = re.compile(r"\#", _FLAGS)

# b: classes, attributes, pseudo-classes
_CLASS_RE = re.compile(
    r"""
    \.\w+                        # classes
    |
    \[\w+                        # attributes
    |
    :(?:{pseudo_classes})        # pseudo-classes
    """.format(pseudo_classes="|".join(PSEUDO_CLASSES)),
    _FLAGS,
)

# c: elements, pseudo-elements
_TYPE_RE = re.compile(
    r"""
    (?:^|[\s+>~]+)\w+            # elements
    |
    :{{1,2}}(?:{pseudo_elements})  # pseudo-elements
    """.format(pseudo_elements="|".join(PSEUDO_ELEMENTS)),
    _FLAGS,
)


def _count(pattern: re.Pattern[str], text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


def count_ids(selector: str) -> int:
    """Number of ID selectors (every ``#``) in *selector*."""
    return _count(_ID_RE, selector)


def count_classes(selector: str) -> int:
    """Number of class, attribute and known pseudo-class selectors."""
    return _count(_CLASS_RE, selector)


def count_types(selector: str) -> int:
    """Number of type selectors and known pseudo-elements."""
    return _count(_TYPE_RE, selector)


def from_selector(selector: str) -> Specificity:
    """Compute the :class:`Specificity` of a single selector.

    Never fails: malformed input simply yields whatever the three category
    patterns happen to match, possibly ``(0, 0, 0)``.
    """
    specificity = Specificity(
        count_ids(selector),
        count_classes(selector),
        count_types(selector),
    )
    logger.debug("Specificity of %r: %s", selector, specificity)
    return specificity


def split_selector_list(text: str) -> list[str]:
    """Split a comma separated selector group into its selectors."""
    return [part.strip() for part in text.split(",") if part.strip()]


def accumulate(selectors: Iterable[str]) -> Specificity:
    """Fold the specificities of several selectors into a single value."""
    total = Specificity()
    for selector in selectors:
        total.increase(*from_selector(selector).get_values())
    return total
