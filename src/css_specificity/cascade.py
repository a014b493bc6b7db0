"""Cascade ordering: sort rules by specificity and merge their declarations."""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Iterable

from css_specificity.stylesheet.model import StyleRule

__all__ = ["cascade", "sort_rules"]

logger = logging.getLogger(__name__)


def _compare_rules(left: StyleRule, right: StyleRule) -> int:
    result = left.specificity.compare_to(right.specificity)
    if result != 0:
        return result
    return left.order - right.order


def sort_rules(rules: Iterable[StyleRule]) -> list[StyleRule]:
    """Return *rules* in ascending cascade order.

    Rules are ordered by specificity, ties broken by source order, so the
    last rule in the result has the highest priority.
    """
    return sorted(rules, key=cmp_to_key(_compare_rules))


def cascade(rules: Iterable[StyleRule]) -> dict[str, str]:
    """Merge the declarations of rules matching one element.

    Later rules in cascade order overwrite properties set by earlier ones.
    Matching rules against elements is up to the caller.
    """
    resolved: dict[str, str] = {}
    for rule in sort_rules(rules):
        for prop, value in rule.properties.items():
            if prop in resolved and resolved[prop] != value:
                logger.debug(
                    "%s: %r overrides %r (selector %r, specificity %s)",
                    prop,
                    value,
                    resolved[prop],
                    rule.selector,
                    rule.specificity,
                )
            resolved[prop] = value
    return resolved
