"""CLI commands for stock and reservations."""

from __future__ import annotations

import click

from inventory.application.clear_reserved_product import ClearReservedProductHandler
from inventory.application.reserve_product import ReserveProductHandler
from inventory.application.update_product_stock import UpdateProductStockHandler
from inventory.domain.exceptions import DomainException
from inventory.infrastructure.bootstrap import product_gateway
from inventory.infrastructure.config import Settings


@click.command("adjust")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option(
    "--amount", required=True, type=int,
    help="Units to add; negative to remove (e.g. --amount=-5).",
)
@click.pass_obj
def stock_adjust(settings: Settings, product_id: int, amount: int) -> None:
    """Restock or write off units of a product."""
    handler = UpdateProductStockHandler(product_gateway(settings))
    try:
        handler.handle(product_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Stock for product #{product_id} adjusted by {amount:+d}")


@click.command("reserve")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Units to reserve.")
@click.pass_obj
def stock_reserve(settings: Settings, product_id: int, amount: int) -> None:
    """Hold available units against a pending order."""
    handler = ReserveProductHandler(product_gateway(settings))
    try:
        handler.handle(product_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Reserved {amount} of product #{product_id}")


@click.command("clear")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--amount", required=True, type=int, help="Reserved units to fulfil.")
@click.pass_obj
def stock_clear(settings: Settings, product_id: int, amount: int) -> None:
    """Fulfil reserved units (removes them from stock and reserve)."""
    handler = ClearReservedProductHandler(product_gateway(settings))
    try:
        handler.handle(product_id, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Cleared {amount} reserved of product #{product_id}")
