"""Application services: Add Color / Add Variant use cases.

A new color starts in direct-quantity mode. Its first variant switches it
to per-size tracking; from then on the color's own quantity is ignored.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.color import Color, Variant
from storefront.domain.model.value_objects import Size
from storefront.domain.repository.unit_of_work import UnitOfWork


class AddColorHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: str, name: str, code: str, quantity: int = 0) -> Color:
        if not name or not name.strip():
            raise ValidationError("Color name is required")
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

        with self._uow_factory() as uow:
            if uow.products.get_by_id(product_id) is None:
                raise EntityNotFoundError(
                    f"Product #{product_id} not found", identifier=product_id
                )
            color = Color(
                id=uow.colors.next_id(),
                product_id=product_id,
                name=name.strip(),
                code=code.strip(),
                quantity=quantity,
            )
            uow.colors.save(color)
            uow.commit()
        return color


class AddVariantHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, color_id: str, size: str, quantity: int = 0) -> Variant:
        parsed = Size.of(size)
        if parsed is None:
            raise ValidationError("Size is required")
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

        with self._uow_factory() as uow:
            color = uow.colors.get_by_id(color_id)
            if color is None:
                raise EntityNotFoundError(f"Color #{color_id} not found", identifier=color_id)
            color.ensure_size_free(parsed)

            variant = Variant(
                id=uow.variants.next_id(),
                color_id=color.id,
                size=parsed,
                quantity=quantity,
            )
            uow.variants.save(variant)
            if not color.has_variants and color.quantity:
                # the direct bucket goes inert once the color is tracked per size
                color.quantity = 0
                uow.colors.save(color)
            uow.commit()
        return variant
