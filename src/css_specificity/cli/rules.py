"""CLI command: css-specificity rules -- list stylesheet rules in cascade order."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from css_specificity.cascade import sort_rules
from css_specificity.stylesheet import StylesheetError, parse_stylesheet


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
def rules(cssfile: str) -> None:
    """Parse a CSS file and list its rules from lowest to highest priority.

    Each line shows the specificity, the source order and the selector.
    """
    css_path = Path(cssfile)

    try:
        source = css_path.read_text(encoding="utf-8")
        stylesheet = parse_stylesheet(source)
    except StylesheetError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Rules: {len(stylesheet.rules)}")
    for rule in sort_rules(stylesheet.rules):
        props = "; ".join(f"{k}: {v}" for k, v in rule.properties.items())
        click.echo(f"  {rule.specificity}  order={rule.order}  {rule.selector}  {{ {props} }}")
