"""CLI commands for stock adjustments."""

from __future__ import annotations

import click

from stockroom.application.dto import StockPayload
from stockroom.domain.exceptions import DomainException
from stockroom.infrastructure.bootstrap import open_inventory
from stockroom.infrastructure.cli.product_commands import PRODUCT_ID
from stockroom.infrastructure.settings import Settings


@click.command("show")
@click.option("--id", "product_id", required=True, type=PRODUCT_ID, help="Product ID.")
@click.pass_obj
def stock_show(settings: Settings, product_id: int) -> None:
    """Show the quantity on hand for a product."""
    try:
        with open_inventory(settings) as service:
            quantity = service.get_stock(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id}: {quantity} in stock")


@click.command("add")
@click.option("--id", "product_id", required=True, type=PRODUCT_ID, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units to add.")
@click.pass_obj
def stock_add(settings: Settings, product_id: int, amount: int) -> None:
    """Add stock to a product."""
    try:
        with open_inventory(settings) as service:
            product = service.add_quantity(product_id, StockPayload(amount))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id}: +{amount}, now {product.quantity} in stock")


@click.command("offload")
@click.option("--id", "product_id", required=True, type=PRODUCT_ID, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units to remove.")
@click.pass_obj
def stock_offload(settings: Settings, product_id: int, amount: int) -> None:
    """Remove stock from a product."""
    try:
        with open_inventory(settings) as service:
            product = service.offload_quantity(product_id, StockPayload(amount))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id}: -{amount}, now {product.quantity} in stock")
