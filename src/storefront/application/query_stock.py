"""Application service: Stock Query use case.

Advisory read used by the cart to cap "increase" and to flag lines that
ask for more than is left. Nothing is reserved or locked here: checkout
checks again with authority.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront.application.dto import StockLevelDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import Size
from storefront.domain.repository.unit_of_work import UnitOfWork


class QueryStockHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, color_id: str, size: str | None = None) -> StockLevelDTO:
        """Return the available quantity for a (color, size) selection.

        Raises EntityNotFoundError when the color is unknown, or when the
        color is tracked per size and has no variant for *size*.
        """
        wanted = Size.of(size)
        with self._uow_factory() as uow:
            color = uow.colors.get_by_id(color_id)

        if color is None:
            raise EntityNotFoundError(f"Color #{color_id} not found", identifier=color_id)

        if not color.has_variants:
            return StockLevelDTO(
                color_id=color.id,
                size=str(wanted) if wanted else None,
                quantity=color.available(),
                variant_id=None,
            )

        variant = color.variant_for(wanted)
        if variant is None:
            raise EntityNotFoundError(
                f"No variant of color #{color_id} for size {wanted or '(none)'}",
                identifier=color_id,
            )
        return StockLevelDTO(
            color_id=color.id,
            size=str(variant.size),
            quantity=color.available(wanted),
            variant_id=variant.id,
        )
