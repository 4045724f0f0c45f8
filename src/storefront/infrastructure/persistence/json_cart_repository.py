"""JSON-file-backed implementation of CartRepository (client-local)."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from storefront.domain.exceptions import DomainException, PersistenceError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import Money, Size
from storefront.domain.repository.cart_repository import CartRepository


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def load(self) -> Cart:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return Cart(lines=[self._to_line(line) for line in raw.get("lines", [])])
        except (OSError, ValueError, KeyError, TypeError, AttributeError,
                InvalidOperation, DomainException) as exc:
            raise PersistenceError(f"Cart {self._file_path} is unreadable: {exc}") from exc

    def save(self, cart: Cart) -> None:
        raw = {
            "lines": [
                {
                    "product_id": line.product_id,
                    "title": line.title,
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                    "quantity": line.quantity,
                    "color_id": line.color_id,
                    "size": line.size.name if line.size else None,
                    "image": line.image,
                }
                for line in cart.lines
            ]
        }
        self._write(json.dumps(raw, indent=2) + "\n")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_line(line: dict) -> CartLine:
        return CartLine(
            product_id=line["product_id"],
            title=line["title"],
            unit_price=Money(Decimal(line["unit_price"]), line.get("currency", "USD")),
            quantity=line["quantity"],
            color_id=line.get("color_id"),
            size=Size(line["size"]) if line.get("size") else None,
            image=line.get("image"),
        )

    def _write(self, payload: str) -> None:
        try:
            self._file_path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Could not write cart {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise PersistenceError(f"Could not create {self._file_path.parent}: {exc}") from exc
            self._write('{"lines": []}')
