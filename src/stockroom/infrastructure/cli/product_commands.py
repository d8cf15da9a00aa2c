"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from stockroom.application.dto import ProductPayload
from stockroom.domain.exceptions import DomainException
from stockroom.domain.model.product import Category, Product
from stockroom.domain.service.id_allocator import MAX_ID
from stockroom.infrastructure.bootstrap import open_inventory
from stockroom.infrastructure.settings import Settings

PRODUCT_ID = click.IntRange(0, MAX_ID)
CATEGORY_CHOICE = click.Choice([c.value for c in Category], case_sensitive=False)


def display_product(product: Product) -> None:
    """Shared formatting for displaying a product."""
    click.echo(f"Product #{product.id} '{product.name}'")
    click.echo(f"Category: {product.category.value}")
    click.echo(f"Quantity: {product.quantity}")
    click.echo(f"Created:  {product.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    if product.updated_at is not None:
        click.echo(f"Updated:  {product.updated_at.strftime('%Y-%m-%d %H:%M UTC')}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Initial quantity in stock.")
@click.option("--category", type=CATEGORY_CHOICE, default=None, help="Category (default: Bakery).")
@click.pass_obj
def product_add(settings: Settings, name: str, quantity: int, category: str | None) -> None:
    """Add a new product to the store."""
    try:
        with open_inventory(settings) as service:
            product = service.add_product(ProductPayload.of(name, quantity, category))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added with quantity {product.quantity}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=PRODUCT_ID, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: int) -> None:
    """Show a single product."""
    try:
        with open_inventory(settings) as service:
            product = service.get_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, type=PRODUCT_ID, help="Product ID.")
@click.option("--name", required=True, help="New product name.")
@click.option("--quantity", required=True, type=int, help="New quantity in stock.")
@click.option("--category", type=CATEGORY_CHOICE, default=None, help="Category (default: Bakery).")
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: int,
    name: str,
    quantity: int,
    category: str | None,
) -> None:
    """Replace a product's name, category and quantity."""
    try:
        with open_inventory(settings) as service:
            product = service.update_product(
                product_id, ProductPayload.of(name, quantity, category)
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated")
    display_product(product)


@click.command("remove")
@click.option("--id", "product_id", required=True, type=PRODUCT_ID, help="Product ID.")
@click.pass_obj
def product_remove(settings: Settings, product_id: int) -> None:
    """Remove a product. Its ID is never reused."""
    try:
        with open_inventory(settings) as service:
            product = service.remove_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' removed")
