"""Application services: Add / Delete / List Reviews use cases.

Every add or delete recomputes the product rating from scratch over all
of its reviews, in the same unit of work as the review change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from storefront.application.dto import ReviewDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.review import Review, average_rating
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def recompute_rating(uow: UnitOfWork, product_id: str) -> None:
    product = uow.products.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(f"Product #{product_id} not found", identifier=product_id)
    product.apply_rating(average_rating(uow.reviews.list_for_product(product_id)))
    uow.products.save(product)


def _to_dto(review: Review) -> ReviewDTO:
    return ReviewDTO(
        id=review.id,  # type: ignore[arg-type]
        product_id=review.product_id,
        author=review.author,
        rating=review.rating,
        comment=review.comment,
        created_at=review.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


class AddReviewHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: str, author: str, rating: object, comment: str) -> ReviewDTO:
        review = Review.create(product_id, author, rating, comment)
        with self._uow_factory() as uow:
            if uow.products.get_by_id(product_id) is None:
                raise EntityNotFoundError(
                    f"Product #{product_id} not found", identifier=product_id
                )
            uow.reviews.add(review)
            recompute_rating(uow, product_id)
            uow.commit()

        logger.info("Review %s added to product %s", review.id, product_id)
        return _to_dto(review)


class DeleteReviewHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: str, review_id: str) -> None:
        with self._uow_factory() as uow:
            review = uow.reviews.get_by_id(review_id)
            if review is None or review.product_id != product_id:
                raise EntityNotFoundError(
                    f"Review #{review_id} not found for product #{product_id}",
                    identifier=review_id,
                )
            uow.reviews.delete(review_id)
            recompute_rating(uow, product_id)
            uow.commit()

        logger.info("Review %s deleted from product %s", review_id, product_id)


class ListReviewsHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: str) -> list[ReviewDTO]:
        with self._uow_factory() as uow:
            reviews = uow.reviews.list_for_product(product_id)
        return [_to_dto(r) for r in reviews]
