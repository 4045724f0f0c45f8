import logging
from pathlib import Path

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_decrease,
    cart_increase,
    cart_remove,
    cart_show,
)
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
    order_stats,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_color_add,
    product_list,
    product_update,
    product_variant_add,
)
from storefront.infrastructure.cli.review_commands import review_add, review_delete, review_list
from storefront.infrastructure.cli.stock_commands import stock_adjust, stock_list, stock_show
from storefront.infrastructure.config import DEFAULT_DATA_DIR, DEFAULT_LOG_LEVEL, Settings

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="STOREFRONT_DATA_DIR",
    show_default=True,
    help="Directory holding store.json and cart.json.",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar="STOREFRONT_LOG_LEVEL",
    show_default=True,
)
@click.option("--currency", default="USD", envvar="STOREFRONT_CURRENCY", show_default=True,
              help="Currency for newly added products.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str, currency: str) -> None:
    """Storefront — catalog stock, cart and checkout"""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = Settings(data_dir=data_dir, log_level=log_level.upper(), currency=currency.upper())
    try:
        ctx.obj = Container(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@cli.group()
def product() -> None:
    """Manage the catalog."""


@cli.group()
def stock() -> None:
    """Inspect and adjust stock."""


@cli.group()
def cart() -> None:
    """Edit the local cart."""


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def review() -> None:
    """Manage product reviews."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_color_add)
product.add_command(product_list)
product.add_command(product_update)
product.add_command(product_variant_add)
stock.add_command(stock_adjust)
stock.add_command(stock_list)
stock.add_command(stock_show)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_decrease)
cart.add_command(cart_increase)
cart.add_command(cart_remove)
cart.add_command(cart_show)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_stats)
order.add_command(order_status)
review.add_command(review_add)
review.add_command(review_delete)
review.add_command(review_list)
