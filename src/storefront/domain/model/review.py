"""Product reviews and the rating they aggregate into."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from storefront.domain.exceptions import ValidationError

MIN_RATING = 1
MAX_RATING = 5
MAX_AUTHOR_LENGTH = 100


@dataclass
class Review:
    id: str | None
    product_id: str
    author: str
    rating: int
    comment: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(product_id: str, author: str, rating: object, comment: str) -> Review:
        """Build a new review.

        Author and comment are required. The rating is clamped into 1..5;
        anything that is not a number counts as 5.
        """
        if not author or not str(author).strip():
            raise ValidationError("Author and comment are required")
        if not comment or not str(comment).strip():
            raise ValidationError("Author and comment are required")

        return Review(
            id=None,
            product_id=product_id,
            author=str(author).strip()[:MAX_AUTHOR_LENGTH],
            rating=_clamp_rating(rating),
            comment=str(comment),
        )


def _clamp_rating(raw: object) -> int:
    try:
        number = float(str(raw))
    except ValueError:
        return MAX_RATING
    if math.isnan(number) or number == 0:
        return MAX_RATING
    return int(max(MIN_RATING, min(MAX_RATING, number)))


def average_rating(reviews: list[Review]) -> Decimal:
    """Mean of all ratings to two decimal places; 0.00 with no reviews.

    Always a full recompute over the given reviews, so calling it twice on
    the same set yields the same value.
    """
    if not reviews:
        return Decimal("0.00")
    total = sum(Decimal(r.rating) for r in reviews)
    return (total / len(reviews)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
