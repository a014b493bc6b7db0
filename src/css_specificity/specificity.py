"""Specificity value type: the (a, b, c) weight of a CSS selector.

See https://www.w3.org/TR/selectors/#specificity for the comparison rules.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(order=True)
class Specificity:
    """Weight of a selector as three independent counters.

    Attributes:
        a: Number of ID selectors.
        b: Number of class selectors, attribute selectors and pseudo-classes.
        c: Number of type selectors and pseudo-elements.

    Counters are compared positionally, most significant first, so a single ID
    outranks any number of classes. The generated ordering methods follow the
    same rule as :meth:`compare_to`.
    """

    a: int = 0
    b: int = 0
    c: int = 0

    @classmethod
    def from_selector(cls, selector: str) -> Specificity:
        """Compute the specificity of a single selector string."""
        from css_specificity.selector import from_selector

        return from_selector(selector)

    def increase(self, a: int, b: int, c: int) -> None:
        """Add the three deltas to the current counters in place."""
        self.a += a
        self.b += b
        self.c += c

    def get_values(self) -> tuple[int, int, int]:
        return (self.a, self.b, self.c)

    def compare_to(self, other: Specificity) -> int:
        """Three-way comparison against *other*.

        Returns a negative number when *other* has the higher priority, zero
        when both are equal and a positive number when ``self`` wins. Only the
        sign is meaningful.
        """
        if self.a != other.a:
            return self.a - other.a
        if self.b != other.b:
            return self.b - other.b
        return self.c - other.c

    def __str__(self) -> str:
        return f"{self.a},{self.b},{self.c}"
