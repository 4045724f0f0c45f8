"""JSON-document implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from storefront.domain.model.order import CustomerInfo, Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity, Size
from storefront.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, rows: list[dict]) -> None:
        self._rows = rows

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        if not self._rows:
            return 1
        return max(o["id"] for o in self._rows) + 1

    def get_by_number(self, order_number: str) -> Order | None:
        for raw in self._rows:
            if raw["order_number"] == order_number:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._rows]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()

        for i, raw in enumerate(self._rows):
            if raw["id"] == order.id:
                # line items are written once; only status moves afterwards
                raw["status"] = order.status.value
                raw["updated_at"] = order.updated_at.isoformat()
                self._rows[i] = raw
                return
        self._rows.append(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "order_number": order.order_number,
            "status": order.status.value,
            "customer": {
                "name": order.customer.name,
                "email": order.customer.email,
                "address": order.customer.address,
                "city": order.customer.city,
                "postal_code": order.customer.postal_code,
                "country": order.customer.country,
            },
            "total_amount": str(order.total.amount),
            "payment_intent_id": order.payment_intent_id,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "title": item.title,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "quantity": item.quantity.value,
                    "subtotal": str(item.subtotal.amount),
                    "color_id": item.color_id,
                    "size": item.size.name if item.size else None,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                title=i["title"],
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                quantity=Quantity(i["quantity"]),
                color_id=i.get("color_id"),
                size=Size(i["size"]) if i.get("size") else None,
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            order_number=raw["order_number"],
            customer=CustomerInfo(**raw["customer"]),
            items=items,
            status=OrderStatus(raw["status"]),
            payment_intent_id=raw.get("payment_intent_id"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
