"""CLI commands for the catalog (products, colors, variants)."""

from __future__ import annotations

import click

from storefront.application.add_color import AddColorHandler, AddVariantHandler
from storefront.application.add_product import AddProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--quantity", default=0, type=int, help="Stock while the product has no colors.")
@click.option("--description", default="", help="Product description.")
@click.option("--category", "category_id", default=None, help="Category ID.")
@click.option("--image", default=None, help="Image URL.")
@click.pass_obj
def product_add(
    container: Container,
    title: str,
    price: str,
    quantity: int,
    description: str,
    category_id: str | None,
    image: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(container.unit_of_work, currency=container.settings.currency)

    try:
        product = handler.handle(
            title=title, price=price, quantity=quantity,
            description=description, category_id=category_id, image=image,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.title}' added at {product.price}")


@click.command("color-add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Color display name.")
@click.option("--code", default="", help="Swatch value, e.g. #000000.")
@click.option("--quantity", default=0, type=int, help="Stock while the color has no sizes.")
@click.pass_obj
def product_color_add(
    container: Container, product_id: str, name: str, code: str, quantity: int
) -> None:
    """Add a color to a product."""
    handler = AddColorHandler(container.unit_of_work)

    try:
        color = handler.handle(product_id=product_id, name=name, code=code, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Color #{color.id} '{color.name}' added to product #{product_id}")


@click.command("variant-add")
@click.option("--color", "color_id", required=True, help="Color ID.")
@click.option("--size", required=True, help="Size, e.g. M, 2XL or 42.")
@click.option("--quantity", default=0, type=int, help="Stock for this size.")
@click.pass_obj
def product_variant_add(container: Container, color_id: str, size: str, quantity: int) -> None:
    """Add a size variant to a color."""
    handler = AddVariantHandler(container.unit_of_work)

    try:
        variant = handler.handle(color_id=color_id, size=size, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Variant #{variant.id} size {variant.size} added to color #{color_id}")


@click.command("list")
@click.option("--in-stock", is_flag=True, default=False, help="Only products with stock left.")
@click.pass_obj
def product_list(container: Container, in_stock: bool) -> None:
    """List products with rating and available stock."""
    handler = ListProductsHandler(container.unit_of_work)

    try:
        rows = handler.handle(in_stock_only=in_stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not rows:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<24} {'Price':>10} {'Rating':>7} {'Stock':>7}")
    click.echo("-" * 58)
    for p in rows:
        click.echo(f"{p.id:<6} {p.title:<24} {p.price:>10} {p.rating:>7} {p.available:>7}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(container: Container, product_id: str, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(container.unit_of_work)

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} price updated to {product.price}")
