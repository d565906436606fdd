"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from inventory.application.add_product import AddProductHandler
from inventory.application.delete_product import DeleteProductHandler
from inventory.application.dto import ProductDTO
from inventory.application.get_product import GetProductHandler
from inventory.application.list_products import ListProductsHandler
from inventory.application.update_product_name import UpdateProductNameHandler
from inventory.application.update_product_price import UpdateProductPriceHandler
from inventory.domain.exceptions import DomainException
from inventory.infrastructure.bootstrap import product_gateway
from inventory.infrastructure.config import Settings


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"Price:     ${dto.price:.2f}")
    click.echo(f"Stock:     {dto.items_in_stock}")
    click.echo(f"Reserved:  {dto.items_reserved}")
    click.echo(f"Available: {dto.available_stock}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.pass_obj
def product_add(settings: Settings, name: str, price: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_gateway(settings))
    try:
        dto = handler.handle(name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product #{dto.id} '{dto.name}' added at ${dto.price:.2f}")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_gateway(settings)).handle()
    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>8} {'Reserved':>10} {'Available':>10}"
    )
    click.echo("-" * 69)
    for p in sorted(products, key=lambda p: p.id):
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.price:>10.2f} {p.items_in_stock:>8} "
            f"{p.items_reserved:>10} {p.available_stock:>10}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: int) -> None:
    """Show a single product."""
    try:
        dto = GetProductHandler(product_gateway(settings)).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_product(dto)


@click.command("rename")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New product name.")
@click.pass_obj
def product_rename(settings: Settings, product_id: int, name: str) -> None:
    """Change a product's name."""
    handler = UpdateProductNameHandler(product_gateway(settings))
    try:
        handler.handle(product_id, name)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product #{product_id} renamed to '{name}'")


@click.command("set-price")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_set_price(settings: Settings, product_id: int, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductPriceHandler(product_gateway(settings))
    try:
        handler.handle(product_id, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product #{product_id} price updated to ${price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: int) -> None:
    """Permanently remove a product."""
    try:
        DeleteProductHandler(product_gateway(settings)).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product #{product_id} deleted.")
