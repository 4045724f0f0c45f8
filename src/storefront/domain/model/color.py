"""Color and Variant entities — the variant ledger of a product.

A Color either tracks one direct stock bucket (``quantity``) or owns a set
of size Variants, each with its own quantity. Once a color has variants its
own ``quantity`` field is inert: it is still stored, but every reader goes
through ``available()`` which ignores it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.stock import StockOperation, apply_adjustment, take
from storefront.domain.model.value_objects import Size


@dataclass
class Variant:
    """A (color, size) stock unit."""

    id: str
    color_id: str
    size: Size
    quantity: int = 0

    def adjust(self, operation: StockOperation, amount: int) -> int:
        self.quantity = apply_adjustment(self.quantity, operation, amount)
        return self.quantity

    def reserve(self, requested: int, product_title: str) -> None:
        self.quantity = take(self.quantity, requested, product_title, self.id)


@dataclass
class Color:
    """A color of a product, in direct-quantity mode or variant mode."""

    id: str
    product_id: str
    name: str
    code: str
    quantity: int = 0
    variants: list[Variant] = field(default_factory=list)

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)

    @property
    def total_available(self) -> int:
        if self.has_variants:
            return sum(max(0, v.quantity) for v in self.variants)
        return max(0, self.quantity)

    def variant_for(self, size: Size | None) -> Variant | None:
        if size is None:
            return None
        for variant in self.variants:
            if variant.size == size:
                return variant
        return None

    def available(self, size: Size | None = None) -> int:
        """Stock for a size selection, never negative.

        In variant mode an absent or unknown size has 0 available. In
        direct-quantity mode the size argument is ignored.
        """
        if self.has_variants:
            variant = self.variant_for(size)
            return max(0, variant.quantity) if variant is not None else 0
        return max(0, self.quantity)

    def ensure_size_free(self, size: Size) -> None:
        """Raise if this color already has a variant for *size*."""
        if self.variant_for(size) is not None:
            raise ValidationError(
                f"Color '{self.name}' already has a variant for size {size}",
                identifier=self.id,
            )

    def adjust(self, operation: StockOperation, amount: int) -> int:
        self.quantity = apply_adjustment(self.quantity, operation, amount)
        return self.quantity

    def reserve(self, requested: int, product_title: str) -> None:
        """Take stock from the direct bucket (direct-quantity mode only)."""
        if self.has_variants:
            raise ValidationError(
                f"Color '{self.name}' is tracked per size; reserve a variant instead",
                identifier=self.id,
            )
        self.quantity = take(self.quantity, requested, product_title, self.id)
