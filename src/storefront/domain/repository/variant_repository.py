"""Abstract repository for size variants."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.color import Variant
from storefront.domain.model.value_objects import Size


class VariantRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unused variant ID."""

    @abstractmethod
    def get_by_id(self, variant_id: str) -> Variant | None:
        """Return a variant by its ID, or None."""

    @abstractmethod
    def find(self, color_id: str, size: Size) -> Variant | None:
        """Return the variant for (color, size), or None."""

    @abstractmethod
    def save(self, variant: Variant) -> None:
        """Persist a new or updated variant.

        Implementations must reject a second variant for the same
        (color, size) with a ValidationError.
        """
