"""JSON-document implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence._rows import next_string_id, upsert


class JsonProductRepository(ProductRepository):

    def __init__(self, rows: list[dict]) -> None:
        self._rows = rows

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return next_string_id(self._rows)

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._rows:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._rows]

    def save(self, product: Product) -> None:
        upsert(self._rows, self._to_raw(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "title": product.title,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "description": product.description,
            "category_id": product.category_id,
            "rating": str(product.rating),
            "quantity": product.quantity,
            "image": product.image,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            title=raw["title"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            description=raw.get("description", ""),
            category_id=raw.get("category_id"),
            rating=Decimal(raw.get("rating", "0.00")),
            quantity=raw.get("quantity", 0),
            image=raw.get("image"),
        )
