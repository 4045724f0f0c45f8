"""Unit tests for the StockReservationService.

Uses in-memory fakes; the service runs against one unit of work's
working copy and never commits on its own.
"""

import pytest

from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from storefront.domain.model.color import Color, Variant
from storefront.domain.model.order import CustomerInfo, Order, OrderLineItem
from storefront.domain.model.product import Product
from storefront.domain.model.stock import StockTarget
from storefront.domain.model.value_objects import Money, Quantity, Size
from storefront.domain.service.stock_reservation_service import StockReservationService
from tests.fakes import FakeDatabase


def _db() -> FakeDatabase:
    return FakeDatabase(
        products=[
            Product(id="1", title="Tee", price=Money.of("20.00")),
            Product(id="2", title="Mug", price=Money.of("8.00")),
            Product(id="3", title="Poster", price=Money.of("5.00"), quantity=6),
        ],
        colors=[
            Color(id="1", product_id="1", name="Red", code="#f00", variants=[
                Variant(id="1", color_id="1", size=Size("M"), quantity=5),
                Variant(id="2", color_id="1", size=Size("L"), quantity=1),
            ]),
            Color(id="2", product_id="2", name="Black", code="#000", quantity=10),
        ],
    )


def _line(product_id: str, qty: int, color_id: str | None = None, size: str | None = None):
    return OrderLineItem(
        product_id=product_id,
        title={"1": "Tee", "2": "Mug", "3": "Poster"}.get(product_id, "Unknown"),
        unit_price=Money.of("1.00"),
        quantity=Quantity(qty),
        color_id=color_id,
        size=Size.of(size),
    )


def _reserve(db: FakeDatabase, *lines: OrderLineItem):
    order = Order.create("ORD-1-1", CustomerInfo("Alice", "a@b.c"), list(lines))
    with db.uow() as uow:
        svc = StockReservationService(uow.products, uow.colors, uow.variants)
        reservations = svc.reserve_for_order(order)
        uow.commit()
    return reservations


class TestVariantReservation:

    def test_decrements_variant(self):
        db = _db()
        reservations = _reserve(db, _line("1", 3, "1", "M"))
        assert db.variant_quantity("1") == 2
        assert reservations[0].target is StockTarget.VARIANT

    def test_insufficient_names_product_and_available(self):
        db = _db()
        _reserve(db, _line("1", 3, "1", "M"))
        with pytest.raises(InsufficientStockError) as exc_info:
            _reserve(db, _line("1", 5, "1", "M"))
        assert exc_info.value.product_title == "Tee"
        assert exc_info.value.available == 2
        assert exc_info.value.identifier == "1"
        assert db.variant_quantity("1") == 2

    def test_size_without_variant_is_not_tracked(self):
        db = _db()
        assert _reserve(db, _line("1", 4, "1", "XL")) == []
        assert db.variant_quantity("1") == 5
        assert db.variant_quantity("2") == 1


class TestDirectReservation:

    def test_direct_color_decrements(self):
        db = _db()
        _reserve(db, _line("2", 4, "2"))
        assert db.color_quantity("2") == 6

    def test_product_without_colors_decrements(self):
        db = _db()
        _reserve(db, _line("3", 6))
        assert db.product("3").quantity == 0

    def test_colorless_line_for_colored_product_rejected(self):
        with pytest.raises(ValidationError, match="requires a color selection"):
            _reserve(_db(), _line("2", 1))


class TestAllOrNothing:

    def test_failure_on_later_line_leaves_earlier_lines_untouched(self):
        db = _db()
        with pytest.raises(InsufficientStockError):
            _reserve(db, _line("1", 2, "1", "M"), _line("2", 11, "2"))
        assert db.variant_quantity("1") == 5
        assert db.color_quantity("2") == 10

    def test_combined_demand_on_one_bucket(self):
        db = _db()
        with pytest.raises(InsufficientStockError) as exc_info:
            _reserve(db, _line("1", 3, "1", "M"), _line("1", 3, "1", "M"))
        assert exc_info.value.requested == 6
        assert db.variant_quantity("1") == 5

    def test_duplicate_lines_within_stock_reserve_once(self):
        db = _db()
        reservations = _reserve(db, _line("1", 2, "1", "M"), _line("1", 3, "1", "M"))
        assert len(reservations) == 1
        assert db.variant_quantity("1") == 0


class TestNotFound:

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="Line 1: product #9 not found"):
            _reserve(_db(), _line("9", 1))

    def test_color_of_another_product(self):
        with pytest.raises(EntityNotFoundError, match="does not belong to 'Tee'"):
            _reserve(_db(), _line("1", 1, "2"))
