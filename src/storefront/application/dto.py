"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order


@dataclass(frozen=True)
class CheckoutLineSpec:
    """Input: one line the customer is buying.

    ``unit_price`` and ``title`` are whatever the client had cached; the
    checkout only uses them to notice a stale cart.
    """

    product_id: str
    quantity: int
    color_id: str | None = None
    size: str | None = None
    unit_price: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class CustomerSpec:
    name: str
    email: str
    address: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = ""


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: str
    title: str
    color_id: str | None
    size: str | None
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    order_number: str
    status: str
    customer_name: str
    customer_email: str
    items: list[OrderLineItemDTO]
    total: str
    payment_intent_id: str | None
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class OrderStatsDTO:
    total_orders: int
    by_status: dict[str, int]
    total_revenue: str
    today_orders: int
    today_revenue: str


@dataclass(frozen=True)
class StockLevelDTO:
    color_id: str
    size: str | None
    quantity: int
    variant_id: str | None


@dataclass(frozen=True)
class InventoryLineDTO:
    product_title: str
    target: str  # "product", "color" or "variant"
    target_id: str
    color_name: str | None
    size: str | None
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    title: str
    price: str
    rating: str
    available: int


@dataclass(frozen=True)
class ReviewDTO:
    id: str
    product_id: str
    author: str
    rating: int
    comment: str
    created_at: str


@dataclass(frozen=True)
class CartLineDTO:
    """A cart line annotated with current availability.

    ``available`` is None when the line is not stock-tracked.
    """

    product_id: str
    title: str
    color_id: str | None
    size: str | None
    quantity: int
    unit_price: str
    subtotal: str
    available: int | None
    can_increase: bool
    exceeds_available: bool


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,
        status=order.status.value,
        customer_name=order.customer.name,
        customer_email=order.customer.email,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                title=item.title,
                color_id=item.color_id,
                size=str(item.size) if item.size else None,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                subtotal=str(item.subtotal),
            )
            for item in order.items
        ],
        total=str(order.total),
        payment_intent_id=order.payment_intent_id,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        updated_at=order.updated_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
