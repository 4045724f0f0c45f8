"""Application service: Review Cart use case.

Shows the cart with each line's current availability, so the UI can
disable "increase" at the limit and warn about lines that now ask for
more than is left (stock can shrink while a cart sits around). Purely
advisory: nothing is held for the customer.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.cart import CartLine
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.unit_of_work import UnitOfWork


class ReviewCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        uow_factory: Callable[[], UnitOfWork],
    ) -> None:
        self._cart_repo = cart_repo
        self._uow_factory = uow_factory

    def handle(self) -> CartDTO:
        cart = self._cart_repo.load()
        with self._uow_factory() as uow:
            lines = [self._annotate(uow, line) for line in cart.lines]
        return CartDTO(lines=lines, total=str(cart.total))

    @staticmethod
    def _available(uow: UnitOfWork, line: CartLine) -> int | None:
        """Units left for the line's selection, or None if not tracked."""
        if line.color_id is not None:
            color = uow.colors.get_for_product(line.color_id, line.product_id)
            if color is None:
                return 0
            if color.has_variants and color.variant_for(line.size) is None:
                return None
            return color.available(line.size)

        product = uow.products.get_by_id(line.product_id)
        if product is None:
            return 0
        if uow.colors.list_for_product(line.product_id):
            # checkout rejects a colorless line for a product sold by color
            return 0
        return max(0, product.quantity)

    def _annotate(self, uow: UnitOfWork, line: CartLine) -> CartLineDTO:
        available = self._available(uow, line)
        return CartLineDTO(
            product_id=line.product_id,
            title=line.title,
            color_id=line.color_id,
            size=str(line.size) if line.size else None,
            quantity=line.quantity,
            unit_price=str(line.unit_price),
            subtotal=str(line.subtotal),
            available=available,
            can_increase=available is None or line.quantity < available,
            exceeds_available=available is not None and line.quantity > available,
        )
