"""CLI command: css-specificity score -- print the specificity of selectors."""

from __future__ import annotations

import json
from dataclasses import replace

import click

from css_specificity.config import OUTPUT_FORMATS, SpecificityConfig
from css_specificity.selector import from_selector, split_selector_list


@click.command()
@click.argument("selectors", nargs=-1, required=True)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    help="Output format",
)
@click.pass_obj
def score(config: SpecificityConfig, selectors: tuple[str, ...], output_format: str) -> None:
    """Print the specificity (a,b,c) of each SELECTOR.

    A comma separated selector group is split into its selectors.
    """
    config = replace(config, output_format=output_format)
    expanded = [sel for arg in selectors for sel in split_selector_list(arg)]
    results = [(sel, from_selector(sel)) for sel in expanded]

    if config.output_format == "json":
        payload = [
            {"selector": sel, "specificity": list(spec.get_values())}
            for sel, spec in results
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    width = max((len(sel) for sel, _ in results), default=0)
    for sel, spec in results:
        click.echo(f"{sel.ljust(width)}  {spec}")
