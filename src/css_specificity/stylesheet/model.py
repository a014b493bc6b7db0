"""Stylesheet model: StyleRule and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from css_specificity.specificity import Specificity


@dataclass(frozen=True)
class StyleRule:
    """A single selector paired with its property declarations.

    A selector group such as ``h1, h2 { ... }`` yields one rule per selector,
    each with its own specificity and position in the stylesheet.
    """

    selector: str
    properties: dict[str, str]
    specificity: Specificity
    order: int


@dataclass(frozen=True)
class Stylesheet:
    """A collection of style rules in source order."""

    rules: list[StyleRule]
