"""CLI commands for the local cart."""

from __future__ import annotations

import click

from storefront.application.manage_cart import AddToCartHandler, ChangeCartHandler, cart_key
from storefront.application.review_cart import ReviewCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


def _line_options(func):
    """Options that identify a cart line: product, color and size."""
    func = click.option("--size", default=None, help="Size, if chosen.")(func)
    func = click.option("--color", "color_id", default=None, help="Color ID, if chosen.")(func)
    func = click.option("--product", "product_id", required=True, help="Product ID.")(func)
    return func


def _key(product_id: str, color_id: str | None, size: str | None):
    try:
        return cart_key(product_id, color_id, size)
    except DomainException as exc:
        raise click.BadParameter(str(exc))


@click.command("add")
@_line_options
@click.pass_obj
def cart_add(container: Container, product_id: str, color_id: str | None, size: str | None) -> None:
    """Add one unit of a product to the cart."""
    handler = AddToCartHandler(container.cart_repository(), container.unit_of_work)

    try:
        quantity = handler.handle(product_id=product_id, color_id=color_id, size=size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart line for product #{product_id} now has {quantity}")


@click.command("increase")
@_line_options
@click.pass_obj
def cart_increase(
    container: Container, product_id: str, color_id: str | None, size: str | None
) -> None:
    """Add one unit to an existing line (refused at the stock limit)."""
    key = _key(product_id, color_id, size)

    try:
        review = ReviewCartHandler(container.cart_repository(), container.unit_of_work).handle()
        for line in review.lines:
            if (line.product_id, line.color_id, line.size) == (
                key.product_id, key.color_id, str(key.size) if key.size else None
            ) and not line.can_increase:
                raise click.ClickException(
                    f"Only {line.available} available for {line.title}; not increasing"
                )
        quantity = ChangeCartHandler(container.cart_repository()).increase(key)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart line for product #{product_id} now has {quantity}")


@click.command("decrease")
@_line_options
@click.pass_obj
def cart_decrease(
    container: Container, product_id: str, color_id: str | None, size: str | None
) -> None:
    """Remove one unit from a line; the line disappears at zero."""
    key = _key(product_id, color_id, size)

    try:
        quantity = ChangeCartHandler(container.cart_repository()).decrease(key)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if quantity:
        click.echo(f"Cart line for product #{product_id} now has {quantity}")
    else:
        click.echo(f"Product #{product_id} removed from cart")


@click.command("remove")
@_line_options
@click.pass_obj
def cart_remove(
    container: Container, product_id: str, color_id: str | None, size: str | None
) -> None:
    """Remove a line from the cart."""
    key = _key(product_id, color_id, size)

    try:
        ChangeCartHandler(container.cart_repository()).remove(key)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed from cart")


@click.command("clear")
@click.pass_obj
def cart_clear(container: Container) -> None:
    """Empty the cart."""
    try:
        ChangeCartHandler(container.cart_repository()).clear()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Cart cleared.")


@click.command("show")
@click.pass_obj
def cart_show(container: Container) -> None:
    """Show the cart with current availability."""
    handler = ReviewCartHandler(container.cart_repository(), container.unit_of_work)

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.lines:
        click.echo("Cart is empty.")
        return

    click.echo(
        f"  {'Product':<20} {'Color':>6} {'Size':>5} {'Qty':>5} {'Price':>10} "
        f"{'Subtotal':>10} {'Avail':>6}"
    )
    click.echo(f"  {'-' * 69}")
    for line in dto.lines:
        available = "-" if line.available is None else str(line.available)
        flag = "  ! exceeds stock" if line.exceeds_available else ""
        click.echo(
            f"  {line.title:<20} {line.color_id or '-':>6} {line.size or '-':>5} "
            f"{line.quantity:>5} {line.unit_price:>10} {line.subtotal:>10} {available:>6}{flag}"
        )
    click.echo(f"  {'-' * 69}")
    click.echo(f"  {'Cart Total':<27} {dto.total:>20}")
