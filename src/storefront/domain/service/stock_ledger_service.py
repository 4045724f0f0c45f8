"""Domain service: Stock Ledger.

Reads and adjusts the stock of a product tree (product -> colors ->
size variants). Readers always go through ``Color.available()`` so the
inert quantity of a color in variant mode is never counted.

Adjustments are admin operations: ``subtract`` clamps at zero and ``set``
overwrites. Authorisation and sanity of the amount are the caller's
business.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.stock import StockOperation, StockTarget
from storefront.domain.model.value_objects import Size
from storefront.domain.repository.color_repository import ColorRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.variant_repository import VariantRepository

logger = logging.getLogger(__name__)


class StockLedgerService:

    def __init__(
        self,
        product_repo: ProductRepository,
        color_repo: ColorRepository,
        variant_repo: VariantRepository,
    ) -> None:
        self._product_repo = product_repo
        self._color_repo = color_repo
        self._variant_repo = variant_repo

    def get_available(self, color_id: str, size: Size | None = None) -> int:
        color = self._color_repo.get_by_id(color_id)
        if color is None:
            raise EntityNotFoundError(f"Color #{color_id} not found", identifier=color_id)
        return color.available(size)

    def product_available(self, product: Product) -> int:
        """Total sellable units of a product across all of its colors."""
        colors = self._color_repo.list_for_product(product.id)
        if colors:
            return sum(color.total_available for color in colors)
        return max(0, product.quantity)

    def adjust(
        self,
        target_id: str,
        target: StockTarget,
        operation: StockOperation,
        amount: int,
    ) -> int:
        """Apply an admin adjustment and return the new quantity."""
        if target is StockTarget.VARIANT:
            variant = self._variant_repo.get_by_id(target_id)
            if variant is None:
                raise EntityNotFoundError(f"Variant #{target_id} not found", identifier=target_id)
            new_quantity = variant.adjust(operation, amount)
            self._variant_repo.save(variant)
        elif target is StockTarget.COLOR:
            color = self._color_repo.get_by_id(target_id)
            if color is None:
                raise EntityNotFoundError(f"Color #{target_id} not found", identifier=target_id)
            if color.has_variants:
                logger.warning(
                    "Adjusting direct quantity of color %s which is tracked per size; "
                    "the value is ignored by stock readers", target_id,
                )
            new_quantity = color.adjust(operation, amount)
            self._color_repo.save(color)
        else:
            product = self._product_repo.get_by_id(target_id)
            if product is None:
                raise EntityNotFoundError(f"Product #{target_id} not found", identifier=target_id)
            new_quantity = product.adjust(operation, amount)
            self._product_repo.save(product)

        logger.info(
            "Stock %s %s %s by %d -> %d",
            target.value, target_id, operation.value, amount, new_quantity,
        )
        return new_quantity
