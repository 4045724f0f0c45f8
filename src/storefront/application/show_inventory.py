"""Application service: Show Inventory use case (query).

One row per stock bucket that readers actually count: the product itself
when it has no colors, otherwise each direct-quantity color or each size
variant.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront.application.dto import InventoryLineDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowInventoryHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: str | None = None) -> list[InventoryLineDTO]:
        with self._uow_factory() as uow:
            if product_id is not None:
                product = uow.products.get_by_id(product_id)
                if product is None:
                    raise EntityNotFoundError(
                        f"Product #{product_id} not found", identifier=product_id
                    )
                products = [product]
            else:
                products = uow.products.list_all()
            return [line for p in products for line in self._lines(uow, p)]

    @staticmethod
    def _lines(uow: UnitOfWork, product: Product) -> list[InventoryLineDTO]:
        colors = uow.colors.list_for_product(product.id)
        if not colors:
            return [
                InventoryLineDTO(
                    product_title=product.title, target="product", target_id=product.id,
                    color_name=None, size=None, quantity=product.quantity,
                )
            ]

        lines: list[InventoryLineDTO] = []
        for color in colors:
            if not color.has_variants:
                lines.append(
                    InventoryLineDTO(
                        product_title=product.title, target="color", target_id=color.id,
                        color_name=color.name, size=None, quantity=color.quantity,
                    )
                )
                continue
            for variant in sorted(color.variants, key=lambda v: v.size.sort_key):
                lines.append(
                    InventoryLineDTO(
                        product_title=product.title, target="variant", target_id=variant.id,
                        color_name=color.name, size=str(variant.size),
                        quantity=variant.quantity,
                    )
                )
        return lines
