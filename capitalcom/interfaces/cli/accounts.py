"""Account overview command."""

from __future__ import annotations

import click
from rich.table import Table

from .context import console, open_client


@click.command()
@click.pass_context
def accounts(ctx: click.Context) -> None:
    """List the trading accounts of the logged-in client."""

    with open_client(ctx) as client:
        items = client.accounts.list()

    if not items:
        console.print("[yellow]No accounts found.[/yellow]")
        return

    table = Table(title="Accounts")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Currency")
    table.add_column("Balance", justify="right")
    table.add_column("Available", justify="right")
    table.add_column("P/L", justify="right")
    for account in items:
        table.add_row(
            account.account_id + (" *" if account.preferred else ""),
            account.account_name,
            account.account_type,
            account.currency,
            f"{account.balance.balance:.2f}",
            f"{account.balance.available:.2f}",
            f"{account.balance.profit_loss:.2f}",
        )
    console.print(table)
