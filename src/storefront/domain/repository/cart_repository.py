"""Abstract repository for the locally persisted cart.

The cart belongs to the client, not to the store of record, so it is
loaded and saved on its own rather than through the unit of work.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """Return the saved cart, or an empty one."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart."""
