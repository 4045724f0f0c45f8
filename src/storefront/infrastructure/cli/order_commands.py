"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.checkout_cart import CheckoutCartHandler
from storefront.application.dto import CheckoutLineSpec, CustomerSpec, OrderDTO
from storefront.application.order_stats import OrderStatsHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


def _parse_items(raw: str) -> list[CheckoutLineSpec]:
    """Parse '1=2,3:7:M=1' (product[:color[:size]]=qty) into line specs."""
    specs: list[CheckoutLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'Product[:Color[:Size]]=Qty'."
            )
        selection, qty_str = pair.rsplit("=", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for '{selection}'.")

        parts = [part.strip() for part in selection.split(":")]
        if len(parts) > 3 or not parts[0]:
            raise click.BadParameter(f"Invalid selection '{selection}'.")
        parts += [None] * (3 - len(parts))
        product_id, color_id, size = parts
        specs.append(
            CheckoutLineSpec(
                product_id=product_id, quantity=qty,
                color_id=color_id or None, size=size or None,
            )
        )
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_number}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>")
    click.echo(f"Created:  {dto.created_at}")
    if dto.payment_intent_id:
        click.echo(f"Payment:  {dto.payment_intent_id}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Color':>6} {'Size':>5} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-' * 61}")
    for item in dto.items:
        click.echo(
            f"  {item.title:<20} {item.color_id or '-':>6} {item.size or '-':>5} "
            f"{item.quantity:>5} {item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-' * 61}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("place")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--address", default="", help="Shipping address.")
@click.option("--city", default="", help="City.")
@click.option("--postal-code", default="", help="Postal code.")
@click.option("--country", default="", help="Country.")
@click.option("--payment-intent", default=None, help="Payment confirmation ID from the processor.")
@click.option("--items", default=None, help="Items as 'Product[:Color[:Size]]=Qty,...'; defaults to the cart.")
@click.pass_obj
def order_place(
    container: Container,
    name: str,
    email: str,
    address: str,
    city: str,
    postal_code: str,
    country: str,
    payment_intent: str | None,
    items: str | None,
) -> None:
    """Place an order, reserving stock for every line."""
    customer = CustomerSpec(
        name=name, email=email, address=address,
        city=city, postal_code=postal_code, country=country,
    )
    handler = PlaceOrderHandler(container.unit_of_work, notifier=container.notifier())

    try:
        if items:
            dto = handler.handle(customer, _parse_items(items), payment_intent)
        else:
            checkout = CheckoutCartHandler(container.cart_repository(), handler)
            dto = checkout.handle(customer, payment_intent)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number} placed  (status={dto.status})")
    click.echo()
    _display_order(dto)


@click.command("show")
@click.option("--number", "order_number", required=True, help="Order number to display.")
@click.pass_obj
def order_show(container: Container, order_number: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(container.unit_of_work)

    try:
        dto = handler.handle(order_number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--status", default=None, help="Only orders in this status.")
@click.pass_obj
def order_list(container: Container, status: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(container.unit_of_work)

    try:
        orders = handler.handle(status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Number':<24} {'Status':<11} {'Customer':<20} {'Total':>10}")
    click.echo("-" * 68)
    for o in orders:
        click.echo(f"{o.order_number:<24} {o.status:<11} {o.customer_name:<20} {o.total:>10}")


@click.command("status")
@click.option("--number", "order_number", required=True, help="Order number.")
@click.option(
    "--set",
    "status",
    required=True,
    type=click.Choice(["pending", "processing", "shipped", "delivered", "cancelled"]),
    help="New status.",
)
@click.pass_obj
def order_status(container: Container, order_number: str, status: str) -> None:
    """Move an order along its lifecycle."""
    handler = UpdateOrderStatusHandler(container.unit_of_work)

    try:
        dto = handler.handle(order_number, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_number} is now {dto.status}.")


@click.command("stats")
@click.pass_obj
def order_stats(container: Container) -> None:
    """Show order counts and revenue."""
    handler = OrderStatsHandler(container.unit_of_work, currency=container.settings.currency)

    try:
        stats = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total orders:   {stats.total_orders}")
    for status, count in stats.by_status.items():
        click.echo(f"  {status:<12} {count:>6}")
    click.echo(f"Total revenue:  {stats.total_revenue}")
    click.echo(f"Today:          {stats.today_orders} order(s), {stats.today_revenue}")
