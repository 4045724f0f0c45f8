"""Order aggregate.

An Order is created exactly once, together with its line items, after
stock for every line has been reserved. Line items are snapshots: they
copy title and unit price and are never edited afterwards. Only the
lifecycle status changes over time.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity, Size


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)


# Forward order of the fulfilment path; CANCELLED sits outside it.
_LIFECYCLE = (
    OrderStatus.PENDING,
    OrderStatus.PROCESSING,
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
)
_CANCELLABLE = (OrderStatus.PENDING, OrderStatus.PROCESSING)

MAX_LINE_ITEMS = 50


@dataclass(frozen=True)
class OrderLineItem:
    """Snapshot of one purchased line at order time."""

    product_id: str
    title: str
    unit_price: Money
    quantity: Quantity
    color_id: str | None = None
    size: Size | None = None

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class CustomerInfo:
    name: str
    email: str
    address: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = ""


def generate_order_number(now: float | None = None, rng: random.Random | None = None) -> str:
    """Human-readable order number: ``ORD-<epoch millis>-<0..999>``."""
    millis = int((time.time() if now is None else now) * 1000)
    suffix = (rng or random).randint(0, 999)
    return f"ORD-{millis}-{suffix}"


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.create()`` for new orders; ``__init__`` stays plain so
    repositories can reconstitute stored orders without re-validating.
    """

    id: int | None
    order_number: str
    customer: CustomerInfo
    items: list[OrderLineItem]
    status: OrderStatus = OrderStatus.PENDING
    payment_intent_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        order_number: str,
        customer: CustomerInfo,
        items: list[OrderLineItem],
        payment_intent_id: str | None = None,
    ) -> Order:
        if not customer.name or not customer.name.strip():
            raise ValidationError("Customer name is required")
        if not customer.email or "@" not in customer.email:
            raise ValidationError("A valid customer email is required")
        if not items:
            raise ValidationError("Order must contain at least one item")
        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")

        currencies = {item.unit_price.currency for item in items}
        if len(currencies) > 1:
            raise ValidationError("All order lines must share one currency")

        return Order(
            id=None,
            order_number=order_number,
            customer=customer,
            items=list(items),
            payment_intent_id=payment_intent_id or None,
        )

    # --- Lifecycle ------------------------------------------------------------

    def transition_to(self, new_status: OrderStatus) -> None:
        """Move the order along its lifecycle.

        Forward moves may skip steps (pending -> shipped). Cancelling is
        only possible before shipping. Terminal states never change.
        """
        if self.status.is_terminal:
            raise ValidationError(
                f"Order {self.order_number} is {self.status.value} and can no longer change",
                identifier=self.order_number,
            )
        if new_status == self.status:
            raise ValidationError(
                f"Order {self.order_number} is already {self.status.value}",
                identifier=self.order_number,
            )
        if new_status is OrderStatus.CANCELLED:
            if self.status not in _CANCELLABLE:
                raise ValidationError(
                    f"Cannot cancel order {self.order_number} once {self.status.value}",
                    identifier=self.order_number,
                )
        elif _LIFECYCLE.index(new_status) < _LIFECYCLE.index(self.status):
            raise ValidationError(
                f"Cannot move order {self.order_number} back from "
                f"{self.status.value} to {new_status.value}",
                identifier=self.order_number,
            )

        self.status = new_status
        self.updated_at = datetime.now(timezone.utc)

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero(self.items[0].unit_price.currency) if self.items else Money.zero()
        for item in self.items:
            result = result + item.subtotal
        return result
