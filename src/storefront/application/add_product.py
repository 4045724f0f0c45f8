"""Application service: Add Product use case (minimal catalog admin)."""

from __future__ import annotations

from collections.abc import Callable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.unit_of_work import UnitOfWork


class AddProductHandler:

    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWork],
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._uow_factory = uow_factory
        self._currency = currency

    def handle(
        self,
        title: str,
        price: str,
        quantity: int = 0,
        description: str = "",
        category_id: str | None = None,
        image: str | None = None,
    ) -> Product:
        """Add a product; ``quantity`` is its stock while it has no colors."""
        if not title or not title.strip():
            raise ValidationError("Product title is required")
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

        money = Money.of(price, self._currency)
        if money.amount <= 0:
            raise ValidationError("Product price must be greater than zero")

        with self._uow_factory() as uow:
            product = Product(
                id=uow.products.next_id(),
                title=title.strip(),
                price=money,
                description=description,
                category_id=category_id,
                quantity=quantity,
                image=image,
            )
            uow.products.save(product)
            uow.commit()
        return product
