"""CLI command: css-specificity compare -- decide which selector wins."""

from __future__ import annotations

import click

from css_specificity.specificity import Specificity


@click.command()
@click.argument("left")
@click.argument("right")
def compare(left: str, right: str) -> None:
    """Compare the specificity of LEFT and RIGHT.

    Prints ``LEFT > RIGHT`` when LEFT wins, ``LEFT < RIGHT`` when RIGHT wins
    and ``LEFT = RIGHT`` when both weigh the same.
    """
    left_spec = Specificity.from_selector(left)
    right_spec = Specificity.from_selector(right)
    result = left_spec.compare_to(right_spec)

    if result > 0:
        op = ">"
    elif result < 0:
        op = "<"
    else:
        op = "="
    click.echo(f"{left} ({left_spec}) {op} {right} ({right_spec})")
