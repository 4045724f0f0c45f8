"""Unit tests for the variant ledger: Color, Variant and stock arithmetic."""

import pytest

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.color import Color, Variant
from storefront.domain.model.stock import StockOperation, apply_adjustment
from storefront.domain.model.value_objects import Size


def _color_with_sizes(**sizes: int) -> Color:
    color = Color(id="c1", product_id="p1", name="Red", code="#ff0000", quantity=99)
    color.variants = [
        Variant(id=f"v{i}", color_id="c1", size=Size(name), quantity=qty)
        for i, (name, qty) in enumerate(sizes.items(), start=1)
    ]
    return color


class TestAvailability:

    def test_direct_mode_reads_own_quantity(self):
        color = Color(id="c1", product_id="p1", name="Red", code="#f00", quantity=7)
        assert color.available() == 7
        assert color.available(Size("M")) == 7

    def test_variant_mode_ignores_inert_quantity(self):
        color = _color_with_sizes(M=5, L=3)
        assert color.available(Size("M")) == 5
        assert color.total_available == 8

    def test_variant_mode_unknown_size_is_zero(self):
        color = _color_with_sizes(M=5)
        assert color.available(Size("XL")) == 0
        assert color.available() == 0

    def test_never_negative(self):
        color = Color(id="c1", product_id="p1", name="Red", code="#f00", quantity=-4)
        assert color.available() == 0
        assert color.total_available == 0


class TestVariantUniqueness:

    def test_second_variant_for_same_size_rejected(self):
        color = _color_with_sizes(M=5)
        with pytest.raises(ValidationError, match="already has a variant"):
            color.ensure_size_free(Size("M"))

    def test_new_size_is_free(self):
        _color_with_sizes(M=5).ensure_size_free(Size("L"))


class TestReserve:

    def test_variant_reserve_decrements(self):
        variant = Variant(id="v1", color_id="c1", size=Size("M"), quantity=5)
        variant.reserve(2, "Tee")
        assert variant.quantity == 3

    def test_variant_reserve_more_than_left_rejected(self):
        variant = Variant(id="v1", color_id="c1", size=Size("M"), quantity=1)
        with pytest.raises(InsufficientStockError) as exc_info:
            variant.reserve(2, "Tee")
        assert exc_info.value.available == 1
        assert exc_info.value.requested == 2
        assert variant.quantity == 1

    def test_color_reserve_in_direct_mode(self):
        color = Color(id="c1", product_id="p1", name="Red", code="#f00", quantity=4)
        color.reserve(4, "Mug")
        assert color.quantity == 0

    def test_color_reserve_in_variant_mode_rejected(self):
        with pytest.raises(ValidationError, match="tracked per size"):
            _color_with_sizes(M=5).reserve(1, "Tee")


class TestAdjustment:

    def test_add(self):
        assert apply_adjustment(5, StockOperation.ADD, 3) == 8

    def test_set_overwrites(self):
        assert apply_adjustment(5, StockOperation.SET, 2) == 2

    def test_subtract_floors_at_zero(self):
        assert apply_adjustment(3, StockOperation.SUBTRACT, 10) == 0

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            apply_adjustment(3, StockOperation.ADD, -1)

    def test_variant_adjust_updates_quantity(self):
        variant = Variant(id="v1", color_id="c1", size=Size("S"), quantity=1)
        assert variant.adjust(StockOperation.ADD, 4) == 5
        assert variant.quantity == 5
