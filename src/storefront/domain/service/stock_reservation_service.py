"""Domain service: Stock Reservation.

The one place where authoritative stock decisions are made at checkout.
For every line of an order it finds the stock bucket the line draws from
and takes the requested units out of it.

Two phases, both inside the caller's unit of work:
  Phase 1 — resolve and check: find each line's bucket and check the
            combined demand of all lines on that bucket. Nothing is
            mutated, so the first failure leaves stock untouched.
  Phase 2 — take and save: decrement each bucket once.

Which bucket a line draws from:
  - color in variant mode, size matches a variant -> that variant
  - color in variant mode, no matching variant    -> not stock-tracked
  - color in direct-quantity mode                 -> the color
  - no color, product without colors              -> the product
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.stock import StockTarget
from storefront.domain.repository.color_repository import ColorRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.variant_repository import VariantRepository


@dataclass(frozen=True)
class Reservation:
    """Units taken from one stock bucket for an order."""

    target: StockTarget
    target_id: str
    product_title: str
    quantity: int


class StockReservationService:

    def __init__(
        self,
        product_repo: ProductRepository,
        color_repo: ColorRepository,
        variant_repo: VariantRepository,
    ) -> None:
        self._product_repo = product_repo
        self._color_repo = color_repo
        self._variant_repo = variant_repo

    def reserve_for_order(self, order: Order) -> list[Reservation]:
        """Take stock for every line item, all lines or none."""
        # Phase 1: resolve buckets and check combined demand
        demand: dict[tuple[StockTarget, str], Reservation] = {}

        for index, line in enumerate(order.items, start=1):
            bucket = self._resolve_bucket(index, line)
            if bucket is None:
                continue
            target, target_id, available = bucket

            previous = demand.get((target, target_id))
            requested = line.quantity.value + (previous.quantity if previous else 0)
            if requested > available:
                raise InsufficientStockError(
                    line.title, available=available, requested=requested,
                    identifier=target_id,
                )
            demand[(target, target_id)] = Reservation(
                target, target_id, line.title, requested
            )

        # Phase 2: decrement and persist
        for reservation in demand.values():
            self._take(reservation)

        return list(demand.values())

    # --- Internal helpers -----------------------------------------------------

    def _resolve_bucket(
        self, index: int, line: OrderLineItem
    ) -> tuple[StockTarget, str, int] | None:
        product = self._product_repo.get_by_id(line.product_id)
        if product is None:
            raise EntityNotFoundError(
                f"Line {index}: product #{line.product_id} not found",
                identifier=line.product_id,
            )

        if line.color_id is not None:
            color = self._color_repo.get_for_product(line.color_id, line.product_id)
            if color is None:
                raise EntityNotFoundError(
                    f"Line {index}: color #{line.color_id} does not belong to "
                    f"'{product.title}'",
                    identifier=line.color_id,
                )
            if color.has_variants:
                variant = color.variant_for(line.size)
                if variant is None:
                    return None
                return StockTarget.VARIANT, variant.id, max(0, variant.quantity)
            return StockTarget.COLOR, color.id, max(0, color.quantity)

        if self._color_repo.list_for_product(line.product_id):
            raise ValidationError(
                f"Line {index}: '{product.title}' requires a color selection",
                identifier=line.product_id,
            )
        return StockTarget.PRODUCT, product.id, max(0, product.quantity)

    def _take(self, reservation: Reservation) -> None:
        if reservation.target is StockTarget.VARIANT:
            variant = self._variant_repo.get_by_id(reservation.target_id)
            variant.reserve(reservation.quantity, reservation.product_title)
            self._variant_repo.save(variant)
        elif reservation.target is StockTarget.COLOR:
            color = self._color_repo.get_by_id(reservation.target_id)
            color.reserve(reservation.quantity, reservation.product_title)
            self._color_repo.save(color)
        else:
            product = self._product_repo.get_by_id(reservation.target_id)
            product.reserve(reservation.quantity)
            self._product_repo.save(product)
