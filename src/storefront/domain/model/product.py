"""Product aggregate.

Products live independently of orders and carts: prices change, ratings
are recomputed, stock moves. Orders and cart lines keep their own copies
of title and price, so none of that reaches back into history.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.stock import StockOperation, apply_adjustment, take
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``quantity`` is the scalar stock bucket and only means something while
    the product has no colors; once colors exist, stock lives on them.
    """

    id: str
    title: str
    price: Money
    description: str = ""
    category_id: str | None = None
    rating: Decimal = Decimal("0.00")
    quantity: int = 0
    image: str | None = None

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price. Existing orders and cart lines keep theirs."""
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def apply_rating(self, rating: Decimal) -> None:
        self.rating = rating

    def adjust(self, operation: StockOperation, amount: int) -> int:
        self.quantity = apply_adjustment(self.quantity, operation, amount)
        return self.quantity

    def reserve(self, requested: int) -> None:
        self.quantity = take(self.quantity, requested, self.title, self.id)
