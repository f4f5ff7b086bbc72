"""Entry point for running the capitalcom CLI.

This module defines a top-level Click group that aggregates all subcommands
defined in the ``capitalcom.interfaces.cli`` package. Executing
``python -m capitalcom.interfaces.cli`` (or the ``capitalcom`` console script)
will invoke this group and present the available commands.
"""

import logging

import click

from capitalcom.infrastructure.observability import configure_logging

from .accounts import accounts
from .context import build_cli_context
from .general import ping, time_cmd
from .markets import markets, prices, sentiment, watchlists
from .trading import orders, positions


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON configuration file; CAPITALCOM_* environment variables override it.",
)
@click.option("--live", is_flag=True, help="Use the live host instead of demo.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, live: bool, verbose: bool) -> None:
    """Capital.com command-line interface."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.ensure_object(dict)
    ctx.obj["cli_context"] = build_cli_context(
        config_path, live=live, client_factory=ctx.obj.get("client_factory")
    )


cli.add_command(time_cmd)
cli.add_command(ping)
cli.add_command(accounts)
cli.add_command(positions)
cli.add_command(orders)
cli.add_command(markets)
cli.add_command(prices)
cli.add_command(sentiment)
cli.add_command(watchlists)


if __name__ == "__main__":
    cli()
