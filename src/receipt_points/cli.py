"""CLI entry point for receipt-points."""

from __future__ import annotations

from typing import TextIO

import click
import uvicorn
from pydantic import ValidationError

from receipt_points.config import configure_logging, get_server_config
from receipt_points.models import Receipt
from receipt_points.scoring import score_breakdown


@click.group()
def cli() -> None:
    """Receipt Points: score receipts against the reward rules."""


@cli.command()
@click.option("--host", default=None, help="Bind address (RECEIPT_POINTS_HOST).")
@click.option(
    "--port", type=int, default=None, help="Bind port (RECEIPT_POINTS_PORT)."
)
@click.option("--reload", is_flag=True, help="Reload on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the receipt points HTTP API."""
    try:
        config = get_server_config()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    configure_logging(config.log_level)
    uvicorn.run(
        "receipt_points.api:app",
        host=host or config.host,
        port=port or config.port,
        log_level=config.log_level.lower(),
        reload=reload,
    )


@cli.command()
@click.argument("receipt_file", type=click.File("r"))
@click.option("--breakdown", is_flag=True, help="Show points awarded per rule.")
def score(receipt_file: TextIO, breakdown: bool) -> None:
    """Print the points for the receipt JSON in RECEIPT_FILE ('-' for stdin)."""
    try:
        receipt = Receipt.model_validate_json(receipt_file.read())
    except ValidationError as exc:
        msg = f"not a valid receipt: {exc.error_count()} error(s)"
        raise click.BadParameter(msg, param_hint="RECEIPT_FILE") from exc

    result = score_breakdown(receipt)
    if breakdown:
        click.echo(f"retailer:          {result.retailer}")
        click.echo(f"round total:       {result.round_total}")
        click.echo(f"quarter multiple:  {result.quarter_multiple}")
        click.echo(f"item pairs:        {result.item_pairs}")
        click.echo(f"descriptions:      {result.descriptions}")
        if result.purchased_at_parsed:
            click.echo(f"odd day:           {result.odd_day}")
            click.echo(f"afternoon:         {result.afternoon}")
        else:
            click.echo("odd day/afternoon: skipped (unparseable purchase time)")
    click.echo(f"points: {result.total}" if breakdown else str(result.total))
