"""Connectivity commands: server time and session keep-alive."""

from __future__ import annotations

import click

from .context import console, open_client


@click.command(name="time")
@click.pass_context
def time_cmd(ctx: click.Context) -> None:
    """Print the server time (UTC). Does not log in."""

    with open_client(ctx, login=False) as client:
        server_time = client.time()
    console.print(server_time.isoformat())


@click.command()
@click.pass_context
def ping(ctx: click.Context) -> None:
    """Log in and ping the API to check the session."""

    with open_client(ctx) as client:
        status = client.ping()
    console.print(f"[green]{status}[/green]")
