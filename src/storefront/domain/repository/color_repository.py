"""Abstract repository for product colors.

Colors come back with their variants loaded, so ``Color.available()``
always sees the current variant set of the surrounding unit of work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.color import Color


class ColorRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unused color ID."""

    @abstractmethod
    def get_by_id(self, color_id: str) -> Color | None:
        """Return a color by its ID, or None."""

    @abstractmethod
    def get_for_product(self, color_id: str, product_id: str) -> Color | None:
        """Return the color only if it belongs to *product_id*."""

    @abstractmethod
    def list_for_product(self, product_id: str) -> list[Color]:
        """Return every color of a product."""

    @abstractmethod
    def save(self, color: Color) -> None:
        """Persist the color row. Variants are saved through VariantRepository."""
