"""Commands showing open positions and working orders."""

from __future__ import annotations

import click
from rich.table import Table

from .context import console, open_client


def _direction(value) -> str:
    return value.value if value is not None else ""


@click.command()
@click.pass_context
def positions(ctx: click.Context) -> None:
    """List open positions."""

    with open_client(ctx) as client:
        items = client.positions.list()

    if not items:
        console.print("[yellow]No open positions.[/yellow]")
        return

    table = Table(title="Positions")
    table.add_column("Deal ID", style="bold")
    table.add_column("Epic")
    table.add_column("Direction")
    table.add_column("Size", justify="right")
    table.add_column("Level", justify="right")
    table.add_column("UPL", justify="right")
    table.add_column("Opened (UTC)")
    for detail in items:
        position = detail.position
        table.add_row(
            position.deal_id,
            detail.market.epic,
            _direction(position.direction),
            f"{position.size:g}",
            f"{position.level:g}",
            f"{position.upl:.2f}",
            position.created_date_utc.isoformat(sep=" "),
        )
    console.print(table)


@click.command()
@click.pass_context
def orders(ctx: click.Context) -> None:
    """List working orders."""

    with open_client(ctx) as client:
        items = client.orders.list()

    if not items:
        console.print("[yellow]No working orders.[/yellow]")
        return

    table = Table(title="Working orders")
    table.add_column("Deal ID", style="bold")
    table.add_column("Epic")
    table.add_column("Type")
    table.add_column("Direction")
    table.add_column("Size", justify="right")
    table.add_column("Level", justify="right")
    table.add_column("Good till (UTC)")
    for detail in items:
        order = detail.working_order_data
        table.add_row(
            order.deal_id,
            order.epic,
            order.order_type,
            _direction(order.direction),
            f"{order.order_size:g}",
            f"{order.order_level:g}",
            order.good_till_date_utc.isoformat(sep=" "),
        )
    console.print(table)
