"""Application service: Checkout Cart use case.

Turns the locally saved cart into checkout lines, places the order and
empties the cart once the order is committed. A rejected checkout leaves
the cart as it was so the customer can fix it and retry.
"""

from __future__ import annotations

from storefront.application.dto import CheckoutLineSpec, CustomerSpec, OrderDTO
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.cart_repository import CartRepository


class CheckoutCartHandler:

    def __init__(self, cart_repo: CartRepository, place_order: PlaceOrderHandler) -> None:
        self._cart_repo = cart_repo
        self._place_order = place_order

    def handle(self, customer: CustomerSpec, payment_intent_id: str | None = None) -> OrderDTO:
        cart = self._cart_repo.load()
        if cart.is_empty:
            raise ValidationError("Cart is empty")

        specs = [
            CheckoutLineSpec(
                product_id=line.product_id,
                quantity=line.quantity,
                color_id=line.color_id,
                size=str(line.size) if line.size else None,
                unit_price=str(line.unit_price.amount),
                title=line.title,
            )
            for line in cart.lines
        ]
        dto = self._place_order.handle(customer, specs, payment_intent_id)

        cart.clear()
        self._cart_repo.save(cart)
        return dto
