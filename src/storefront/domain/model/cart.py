"""Cart — client-held line bookkeeping.

A cart line is identified by the composite key (product id, color id,
size). Adding the same key twice merges into one line; a line never sits
at quantity zero. Each line carries a snapshot of title, price and image
taken when it was first added.

The cart itself does not consult stock. Capping increases against
availability is up to the caller (see ``ReviewCartHandler``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Size


class CartKey(NamedTuple):
    product_id: str
    color_id: str | None = None
    size: Size | None = None


@dataclass
class CartLine:
    product_id: str
    title: str
    unit_price: Money
    quantity: int = 1
    color_id: str | None = None
    size: Size | None = None
    image: str | None = None

    @property
    def key(self) -> CartKey:
        return CartKey(self.product_id, self.color_id, self.size)

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Cart:
    lines: list[CartLine] = field(default_factory=list)

    def add(self, product: Product, color_id: str | None = None, size: Size | None = None) -> CartLine:
        """Merge into the matching line, or append a fresh snapshot line."""
        key = CartKey(product.id, color_id, size)
        line = self._find(key)
        if line is not None:
            line.quantity += 1
            return line

        line = CartLine(
            product_id=product.id,
            title=product.title,
            unit_price=product.price,
            color_id=color_id,
            size=size,
            image=product.image,
        )
        self.lines.append(line)
        return line

    def increase(self, key: CartKey) -> None:
        line = self._find(key)
        if line is not None:
            line.quantity += 1

    def decrease(self, key: CartKey) -> None:
        """Drop one unit; a line that would reach zero is removed."""
        line = self._find(key)
        if line is None:
            return
        if line.quantity > 1:
            line.quantity -= 1
        else:
            self.remove(key)

    def remove(self, key: CartKey) -> None:
        self.lines = [line for line in self.lines if line.key != key]

    def clear(self) -> None:
        self.lines = []

    def item_quantity(self, key: CartKey) -> int:
        line = self._find(key)
        return line.quantity if line is not None else 0

    def contains(self, key: CartKey) -> bool:
        return self._find(key) is not None

    @property
    def total(self) -> Money:
        if not self.lines:
            return Money.zero()
        result = Money.zero(self.lines[0].unit_price.currency)
        for line in self.lines:
            result = result + line.subtotal
        return result

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def _find(self, key: CartKey) -> CartLine | None:
        for line in self.lines:
            if line.key == key:
                return line
        return None
