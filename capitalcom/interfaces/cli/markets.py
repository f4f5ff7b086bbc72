"""Market data commands: search, price history, sentiment and watchlists."""

from __future__ import annotations

import click
from rich.table import Table

from capitalcom.domain.models import MarketSearchParams, PricesParams, Resolution

from .context import console, open_client


@click.command()
@click.argument("search_term")
@click.pass_context
def markets(ctx: click.Context, search_term: str) -> None:
    """Search markets matching SEARCH_TERM."""

    with open_client(ctx) as client:
        items = client.markets.details(MarketSearchParams(search_term=search_term))

    if not items:
        console.print(f"[yellow]No markets match '{search_term}'.[/yellow]")
        return

    table = Table(title=f"Markets: {search_term}")
    table.add_column("Epic", style="bold")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Status")
    table.add_column("Bid", justify="right")
    table.add_column("Offer", justify="right")
    for market in items:
        table.add_row(
            market.epic,
            market.instrument_name,
            market.instrument_type,
            market.market_status,
            f"{market.bid:g}",
            f"{market.offer:g}",
        )
    console.print(table)


@click.command()
@click.argument("epic")
@click.option(
    "--resolution",
    type=click.Choice([r.value for r in Resolution], case_sensitive=False),
    default=None,
    help="Candle resolution (server default is MINUTE).",
)
@click.option("--max", "max_items", type=int, default=None, help="Maximum number of candles.")
@click.pass_context
def prices(
    ctx: click.Context, epic: str, resolution: str | None, max_items: int | None
) -> None:
    """Show historical prices for EPIC."""

    params = PricesParams(
        resolution=Resolution(resolution.upper()) if resolution else None,
        max=max_items,
    )
    with open_client(ctx) as client:
        history = client.prices.history(epic, params)

    if not history.prices:
        console.print(f"[yellow]No prices for {epic}.[/yellow]")
        return

    table = Table(title=f"Prices: {epic}")
    table.add_column("Time (UTC)", style="bold")
    table.add_column("Open", justify="right")
    table.add_column("High", justify="right")
    table.add_column("Low", justify="right")
    table.add_column("Close", justify="right")
    table.add_column("Volume", justify="right")
    for price in history.prices:
        table.add_row(
            price.snapshot_time_utc.isoformat(sep=" "),
            f"{price.open_price.bid:g}",
            f"{price.high_price.bid:g}",
            f"{price.low_price.bid:g}",
            f"{price.close_price.bid:g}",
            str(price.last_traded_volume),
        )
    console.print(table)


@click.command()
@click.argument("market_ids", nargs=-1, required=True)
@click.pass_context
def sentiment(ctx: click.Context, market_ids: tuple[str, ...]) -> None:
    """Show client sentiment for one or more MARKET_IDS."""

    with open_client(ctx) as client:
        items = client.sentiment.list(market_ids)

    table = Table(title="Client sentiment")
    table.add_column("Market", style="bold")
    table.add_column("Long %", justify="right")
    table.add_column("Short %", justify="right")
    for item in items:
        table.add_row(
            item.market_id,
            f"{item.long_position_percentage:g}",
            f"{item.short_position_percentage:g}",
        )
    console.print(table)


@click.command()
@click.pass_context
def watchlists(ctx: click.Context) -> None:
    """List watchlists."""

    with open_client(ctx) as client:
        items = client.watchlists.list()

    if not items:
        console.print("[yellow]No watchlists found.[/yellow]")
        return

    table = Table(title="Watchlists")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Editable")
    for watchlist in items:
        table.add_row(watchlist.id, watchlist.name, "yes" if watchlist.editable else "no")
    console.print(table)
