"""JSON-document implementation of ReviewRepository."""

from __future__ import annotations

from datetime import datetime

from storefront.domain.model.review import Review
from storefront.domain.repository.review_repository import ReviewRepository
from storefront.infrastructure.persistence._rows import next_string_id


class JsonReviewRepository(ReviewRepository):

    def __init__(self, rows: list[dict]) -> None:
        self._rows = rows

    def get_by_id(self, review_id: str) -> Review | None:
        for raw in self._rows:
            if raw["id"] == review_id:
                return self._to_domain(raw)
        return None

    def list_for_product(self, product_id: str) -> list[Review]:
        reviews = [self._to_domain(raw) for raw in self._rows if raw["product_id"] == product_id]
        return sorted(reviews, key=lambda r: r.created_at, reverse=True)

    def add(self, review: Review) -> None:
        review.id = next_string_id(self._rows)
        self._rows.append({
            "id": review.id,
            "product_id": review.product_id,
            "author": review.author,
            "rating": review.rating,
            "comment": review.comment,
            "created_at": review.created_at.isoformat(),
        })

    def delete(self, review_id: str) -> None:
        self._rows[:] = [raw for raw in self._rows if raw["id"] != review_id]

    @staticmethod
    def _to_domain(raw: dict) -> Review:
        return Review(
            id=raw["id"],
            product_id=raw["product_id"],
            author=raw["author"],
            rating=raw["rating"],
            comment=raw["comment"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
