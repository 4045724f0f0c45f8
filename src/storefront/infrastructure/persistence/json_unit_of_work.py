"""Unit of work over a JsonDocumentStore.

``begin`` takes the store lock and loads a working copy of the document;
repositories read and write only that copy. ``commit`` writes it back in
one atomic replace. Leaving without commit simply drops the copy, which
is how a failed checkout undoes its decrements.
"""

from __future__ import annotations

import logging

from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.json_color_repository import JsonColorRepository
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository
from storefront.infrastructure.persistence.json_product_repository import JsonProductRepository
from storefront.infrastructure.persistence.json_review_repository import JsonReviewRepository
from storefront.infrastructure.persistence.json_store import JsonDocumentStore
from storefront.infrastructure.persistence.json_variant_repository import (
    JsonVariantRepository,
)

logger = logging.getLogger(__name__)


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store
        self._document: dict[str, list[dict]] | None = None
        self._committed = False

    def begin(self) -> None:
        self._store.acquire()
        try:
            self._document = self._store.load()
        except Exception:
            self._store.release()
            raise
        self._committed = False

        doc = self._document
        self.products = JsonProductRepository(doc["products"])
        self.colors = JsonColorRepository(doc["colors"], doc["variants"])
        self.variants = JsonVariantRepository(doc["variants"])
        self.orders = JsonOrderRepository(doc["orders"])
        self.reviews = JsonReviewRepository(doc["reviews"])

    def commit(self) -> None:
        if self._document is None:
            raise RuntimeError("Unit of work is not active")
        self._store.write(self._document)
        self._committed = True

    def rollback(self) -> None:
        if self._document is not None and not self._committed:
            logger.debug("Discarding uncommitted changes to %s", self._store.file_path)
        self._document = None

    def end(self) -> None:
        self._store.release()
