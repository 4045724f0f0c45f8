"""JSON-document implementation of ColorRepository.

Colors are stored without their variants; variants are joined in from
the variants table on every read.
"""

from __future__ import annotations

from storefront.domain.model.color import Color
from storefront.domain.repository.color_repository import ColorRepository
from storefront.infrastructure.persistence._rows import next_string_id, upsert
from storefront.infrastructure.persistence.json_variant_repository import to_variant


class JsonColorRepository(ColorRepository):

    def __init__(self, rows: list[dict], variant_rows: list[dict]) -> None:
        self._rows = rows
        self._variant_rows = variant_rows

    def next_id(self) -> str:
        return next_string_id(self._rows)

    def get_by_id(self, color_id: str) -> Color | None:
        for raw in self._rows:
            if raw["id"] == color_id:
                return self._to_domain(raw)
        return None

    def get_for_product(self, color_id: str, product_id: str) -> Color | None:
        color = self.get_by_id(color_id)
        if color is None or color.product_id != product_id:
            return None
        return color

    def list_for_product(self, product_id: str) -> list[Color]:
        return [self._to_domain(raw) for raw in self._rows if raw["product_id"] == product_id]

    def save(self, color: Color) -> None:
        upsert(self._rows, {
            "id": color.id,
            "product_id": color.product_id,
            "name": color.name,
            "code": color.code,
            "quantity": color.quantity,
        })

    def _to_domain(self, raw: dict) -> Color:
        return Color(
            id=raw["id"],
            product_id=raw["product_id"],
            name=raw["name"],
            code=raw.get("code", ""),
            quantity=raw.get("quantity", 0),
            variants=[
                to_variant(v) for v in self._variant_rows if v["color_id"] == raw["id"]
            ],
        )
