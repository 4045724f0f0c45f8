"""Integration tests for order status updates, lookups and statistics."""

from datetime import datetime, timedelta, timezone

import pytest

from storefront.application.dto import CheckoutLineSpec, CustomerSpec
from storefront.application.order_stats import OrderStatsHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ListOrdersHandler, ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeDatabase


def _setup(orders: int = 1) -> tuple[FakeDatabase, list[str]]:
    db = FakeDatabase(products=[
        Product(id="1", title="Mug", price=Money.of("8.00"), quantity=100),
    ])
    numbers = iter(f"ORD-1-{n}" for n in range(100))
    place = PlaceOrderHandler(db.uow, order_number_factory=lambda: next(numbers))
    placed = [
        place.handle(CustomerSpec("Alice", "a@b.c"), [CheckoutLineSpec("1", n + 1)])
        for n in range(orders)
    ]
    return db, [dto.order_number for dto in placed]


class TestUpdateOrderStatus:

    def test_moves_order_forward(self):
        db, (number,) = _setup()
        dto = UpdateOrderStatusHandler(db.uow).handle(number, "processing")
        assert dto.status == "processing"
        assert db.orders[0].status.value == "processing"

    def test_status_is_case_insensitive(self):
        db, (number,) = _setup()
        assert UpdateOrderStatusHandler(db.uow).handle(number, " Shipped ").status == "shipped"

    def test_unknown_status_rejected(self):
        db, (number,) = _setup()
        with pytest.raises(ValidationError, match="Invalid status"):
            UpdateOrderStatusHandler(db.uow).handle(number, "lost")

    def test_unknown_order(self):
        db, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order ORD-0-0 not found"):
            UpdateOrderStatusHandler(db.uow).handle("ORD-0-0", "shipped")

    def test_cancel_does_not_restock(self):
        db, (number,) = _setup()
        UpdateOrderStatusHandler(db.uow).handle(number, "cancelled")
        assert db.product("1").quantity == 99

    def test_illegal_transition_is_not_saved(self):
        db, (number,) = _setup()
        handler = UpdateOrderStatusHandler(db.uow)
        handler.handle(number, "delivered")
        with pytest.raises(ValidationError, match="can no longer change"):
            handler.handle(number, "cancelled")
        assert db.orders[0].status.value == "delivered"


class TestShowAndListOrders:

    def test_show(self):
        db, (number,) = _setup()
        dto = ShowOrderHandler(db.uow).handle(number)
        assert dto.customer_email == "a@b.c"
        assert dto.items[0].quantity == 1

    def test_show_unknown(self):
        db, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            ShowOrderHandler(db.uow).handle("ORD-0-0")

    def test_list_filtered_by_status(self):
        db, numbers = _setup(orders=3)
        UpdateOrderStatusHandler(db.uow).handle(numbers[1], "shipped")
        assert [o.order_number for o in ListOrdersHandler(db.uow).handle("shipped")] == [
            numbers[1]
        ]
        assert len(ListOrdersHandler(db.uow).handle()) == 3

    def test_list_bad_status(self):
        db, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid status"):
            ListOrdersHandler(db.uow).handle("lost")


class TestOrderStats:

    def test_counts_and_revenue_exclude_cancelled(self):
        # totals: $8, $16, $24
        db, numbers = _setup(orders=3)
        UpdateOrderStatusHandler(db.uow).handle(numbers[0], "cancelled")
        UpdateOrderStatusHandler(db.uow).handle(numbers[1], "delivered")

        stats = OrderStatsHandler(db.uow).handle()
        assert stats.total_orders == 3
        assert stats.by_status["cancelled"] == 1
        assert stats.by_status["delivered"] == 1
        assert stats.by_status["pending"] == 1
        assert stats.by_status["shipped"] == 0
        assert stats.total_revenue == "$40.00"
        assert stats.today_orders == 3
        assert stats.today_revenue == "$40.00"

    def test_older_orders_not_counted_as_today(self):
        db, _ = _setup(orders=2)
        for order in db.tables["orders"].values():
            order.created_at = datetime.now(timezone.utc) - timedelta(days=3)

        stats = OrderStatsHandler(db.uow).handle()
        assert stats.today_orders == 0
        assert stats.today_revenue == "$0.00"
        assert stats.total_revenue == "$24.00"

    def test_no_orders(self):
        db, _ = _setup(orders=0)
        stats = OrderStatsHandler(db.uow).handle()
        assert stats.total_orders == 0
        assert stats.total_revenue == "$0.00"

    def test_revenue_stays_in_the_order_currency(self):
        db, _ = _setup(orders=2)
        stats = OrderStatsHandler(db.uow, currency="EUR").handle()
        assert stats.total_revenue == "$24.00"
        assert stats.today_revenue == "$24.00"

    def test_empty_totals_use_configured_currency(self):
        db, _ = _setup(orders=0)
        stats = OrderStatsHandler(db.uow, currency="EUR").handle()
        assert stats.total_revenue == "€0.00"

    def test_mixed_currencies_listed_separately(self):
        db = FakeDatabase(products=[
            Product(id="1", title="Mug", price=Money.of("8.00"), quantity=10),
            Product(id="2", title="Tote", price=Money.of("5.00", "EUR"), quantity=10),
            Product(id="3", title="Pin", price=Money.of("2.00", "GBP"), quantity=10),
        ])
        place = PlaceOrderHandler(db.uow)
        for product_id in ("1", "2", "3"):
            place.handle(CustomerSpec("Alice", "a@b.c"), [CheckoutLineSpec(product_id, 2)])

        stats = OrderStatsHandler(db.uow, currency="EUR").handle()
        assert stats.total_revenue == "€10.00, £4.00, $16.00"
