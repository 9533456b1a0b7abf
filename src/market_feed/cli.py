"""Typer CLI for the market feed."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import get_version
from .config import load_config_bundle
from .errors import NoContentError
from .markets import BatchResult, MarketAggregator, sort_summaries
from .providers.base import InstrumentRequest
from .reports import build_batch_report

app = typer.Typer(help="Market Feed CLI")
err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


def parse_symbol(value: str) -> InstrumentRequest:
    """Parse ``SYMBOL`` or ``SYMBOL:CURRENCY`` into a request."""
    symbol, _, currency = value.partition(":")
    symbol = symbol.strip()
    if not symbol:
        raise typer.BadParameter(f"Invalid symbol {value!r}")
    return InstrumentRequest(symbol=symbol, currency=currency.strip().upper() or None)


def _render_table(result: BatchResult, sort_by: str) -> Table:
    table = Table(title="Markets")
    table.add_column("Symbol")
    table.add_column("Name")
    table.add_column("Price", justify="right")
    table.add_column("Change", justify="right")
    for summary in sort_summaries(result.summaries, sort_by):
        style = "green" if summary.percent_change >= 0 else "red"
        table.add_row(
            summary.symbol,
            summary.request.label,
            f"{summary.currency_symbol}{summary.price:,.2f}",
            f"[{style}]{summary.percent_change:+.2f}%[/{style}]",
        )
    return table


@app.command()
def fetch(
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to feed YAML config"),
    symbol: Optional[List[str]] = typer.Option(None, "--symbol", "-s", help="SYMBOL or SYMBOL:CURRENCY"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    _configure_logging(log_level)
    config = load_config_bundle(config_path)
    instruments = [parse_symbol(value) for value in symbol] if symbol else config.watchlist.requests()
    if not instruments:
        raise typer.BadParameter("No markets configured; pass --symbol or set watchlist.markets")

    result = MarketAggregator.from_config(config).aggregate(instruments)

    if as_json:
        typer.echo(json.dumps(build_batch_report(result), indent=2, ensure_ascii=False))
    elif result.summaries:
        rprint(_render_table(result, config.watchlist.sort_by))

    if isinstance(result.error, NoContentError):
        err_console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(code=1)
    if result.partial:
        err_console.print(f"[yellow]{result.error}[/yellow]")


@app.command()
def version() -> None:
    """Print the installed version."""
    rprint(get_version())


if __name__ == "__main__":
    app()
