"""Abstract repository for product reviews."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.review import Review


class ReviewRepository(ABC):

    @abstractmethod
    def get_by_id(self, review_id: str) -> Review | None:
        """Return a review by its ID, or None."""

    @abstractmethod
    def list_for_product(self, product_id: str) -> list[Review]:
        """Return every review of a product, newest first."""

    @abstractmethod
    def add(self, review: Review) -> None:
        """Persist a new review, assigning its ID."""

    @abstractmethod
    def delete(self, review_id: str) -> None:
        """Remove a review."""
