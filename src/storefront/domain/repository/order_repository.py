"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_number(self, order_number: str) -> Order | None:
        """Return an order by its order number, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new order or a status change of an existing one."""
