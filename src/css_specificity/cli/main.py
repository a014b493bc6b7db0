"""css-specificity CLI entry point: Click group with subcommands."""

import logging

import click

from css_specificity import __version__
from css_specificity.config import SpecificityConfig


@click.group()
@click.version_option(version=__version__, prog_name="css-specificity")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """css-specificity - compute and compare CSS selector specificity."""
    config = SpecificityConfig(log_level="DEBUG" if verbose else "WARNING")
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from css_specificity.cli.score import score  # noqa: E402
from css_specificity.cli.compare import compare  # noqa: E402
from css_specificity.cli.rules import rules  # noqa: E402

cli.add_command(score)
cli.add_command(compare)
cli.add_command(rules)
