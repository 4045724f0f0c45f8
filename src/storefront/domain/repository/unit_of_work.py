"""Abstract unit of work.

Everything a use case reads and writes in the store of record goes
through the repositories of one unit of work. Nothing is visible to other
units of work until ``commit()``; leaving the ``with`` block without
committing discards every change. Implementations also serialise units of
work against the same store, which is what makes a checkout's
check-then-decrement-then-create sequence atomic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.repository.color_repository import ColorRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.review_repository import ReviewRepository
from storefront.domain.repository.variant_repository import VariantRepository


class UnitOfWork(ABC):
    products: ProductRepository
    colors: ColorRepository
    variants: VariantRepository
    orders: OrderRepository
    reviews: ReviewRepository

    def __enter__(self) -> UnitOfWork:
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            self.end()

    @abstractmethod
    def begin(self) -> None:
        """Acquire the store and load a working copy."""

    @abstractmethod
    def commit(self) -> None:
        """Publish every change made in this unit of work at once."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard uncommitted changes. A no-op after commit."""

    @abstractmethod
    def end(self) -> None:
        """Release the store."""
