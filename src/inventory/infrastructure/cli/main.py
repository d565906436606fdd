import click

from inventory.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_rename,
    product_set_price,
    product_show,
)
from inventory.infrastructure.cli.stock_commands import (
    stock_adjust,
    stock_clear,
    stock_reserve,
)
from inventory.infrastructure.config import LOG_LEVELS, ConfigurationError, load_settings
from inventory.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override INVENTORY_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Product inventory: catalog, stock and reservations"""
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    configure_logging(log_level or settings.log_level, settings.log_file)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def stock() -> None:
    """Manage stock levels and reservations."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=5000, type=int, show_default=True)
@click.pass_obj
def serve(settings, host: str, port: int) -> None:
    """Run the HTTP API."""
    from inventory.infrastructure.http.app import create_app

    create_app(settings=settings).run(host=host, port=port)


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_rename)
product.add_command(product_set_price)
product.add_command(product_show)

stock.add_command(stock_adjust)
stock.add_command(stock_clear)
stock.add_command(stock_reserve)
