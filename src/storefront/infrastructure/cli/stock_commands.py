"""CLI commands for stock inspection and admin adjustment."""

from __future__ import annotations

import click

from storefront.application.adjust_stock import AdjustStockHandler
from storefront.application.query_stock import QueryStockHandler
from storefront.application.show_inventory import ShowInventoryHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


@click.command("show")
@click.option("--color", "color_id", required=True, help="Color ID.")
@click.option("--size", default=None, help="Size, when the color is tracked per size.")
@click.pass_obj
def stock_show(container: Container, color_id: str, size: str | None) -> None:
    """Show available stock for a color / size selection."""
    handler = QueryStockHandler(container.unit_of_work)

    try:
        level = handler.handle(color_id=color_id, size=size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    label = f"color #{level.color_id}" + (f" size {level.size}" if level.size else "")
    click.echo(f"{label}: {level.quantity} available")


@click.command("adjust")
@click.option(
    "--target",
    type=click.Choice(["product", "color", "variant"]),
    required=True,
    help="Kind of stock bucket.",
)
@click.option("--id", "target_id", required=True, help="ID of the product, color or variant.")
@click.option(
    "--op",
    "operation",
    type=click.Choice(["set", "add", "subtract"]),
    required=True,
    help="subtract stops at zero.",
)
@click.option("--amount", required=True, type=click.IntRange(min=0), help="Units.")
@click.pass_obj
def stock_adjust(
    container: Container, target: str, target_id: str, operation: str, amount: int
) -> None:
    """Manually adjust a stock bucket."""
    handler = AdjustStockHandler(container.unit_of_work)

    try:
        new_quantity = handler.handle(target_id, target, operation, amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{target.capitalize()} #{target_id} stock is now {new_quantity}")


@click.command("list")
@click.option("--product", "product_id", default=None, help="Only this product.")
@click.pass_obj
def stock_list(container: Container, product_id: str | None) -> None:
    """List every stock bucket."""
    handler = ShowInventoryHandler(container.unit_of_work)

    try:
        lines = handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'Product':<24} {'Kind':<8} {'ID':>5} {'Color':<12} {'Size':<5} {'Qty':>6}")
    click.echo("-" * 65)
    for line in lines:
        click.echo(
            f"{line.product_title:<24} {line.target:<8} {line.target_id:>5} "
            f"{line.color_name or '-':<12} {line.size or '-':<5} {line.quantity:>6}"
        )
