"""Application service: Update Product use case."""

from __future__ import annotations

from collections.abc import Callable

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: str, new_price: str) -> Product:
        """Update a product's price.

        Existing orders and cart lines keep the price they snapshotted.
        """
        with self._uow_factory() as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product #{product_id} not found", identifier=product_id
                )
            product.update_price(Money.of(new_price, product.price.currency))
            uow.products.save(product)
            uow.commit()
        return product
