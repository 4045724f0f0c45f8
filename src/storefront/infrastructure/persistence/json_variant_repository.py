"""JSON-document implementation of VariantRepository."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.color import Variant
from storefront.domain.model.value_objects import Size
from storefront.domain.repository.variant_repository import VariantRepository
from storefront.infrastructure.persistence._rows import next_string_id, upsert


class JsonVariantRepository(VariantRepository):

    def __init__(self, rows: list[dict]) -> None:
        self._rows = rows

    def next_id(self) -> str:
        return next_string_id(self._rows)

    def get_by_id(self, variant_id: str) -> Variant | None:
        for raw in self._rows:
            if raw["id"] == variant_id:
                return to_variant(raw)
        return None

    def find(self, color_id: str, size: Size) -> Variant | None:
        for raw in self._rows:
            if raw["color_id"] == color_id and raw["size"] == size.name:
                return to_variant(raw)
        return None

    def save(self, variant: Variant) -> None:
        # (color_id, size) is unique
        existing = self.find(variant.color_id, variant.size)
        if existing is not None and existing.id != variant.id:
            raise ValidationError(
                f"Color #{variant.color_id} already has a variant for size {variant.size}",
                identifier=variant.color_id,
            )
        upsert(self._rows, {
            "id": variant.id,
            "color_id": variant.color_id,
            "size": variant.size.name,
            "quantity": variant.quantity,
        })


def to_variant(raw: dict) -> Variant:
    return Variant(
        id=raw["id"],
        color_id=raw["color_id"],
        size=Size(raw["size"]),
        quantity=raw.get("quantity", 0),
    )
