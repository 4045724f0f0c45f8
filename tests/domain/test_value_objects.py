"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity, Size


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_junk(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_str_uses_currency(self):
        assert str(Money.of("8", "EUR")) == "€8.00"
        assert str(Money.of("8", "SEK")) == "SEK 8.00"

    def test_less_than(self):
        assert Money.of("5") < Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(value)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)


# ── Size ─────────────────────────────────────────────────────────────────────


class TestSize:

    @pytest.mark.parametrize("name", ["XS", "M", "2XL", "42", "9.5"])
    def test_known_sizes(self, name):
        assert Size(name).name == name

    @pytest.mark.parametrize("name", ["XXL", "medium", "9.25", "123"])
    def test_unknown_size_rejected(self, name):
        with pytest.raises(ValidationError, match="Unknown size"):
            Size(name)

    def test_of_normalises_label(self):
        assert Size.of(" m ") == Size("M")

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_of_blank_is_no_size(self, raw):
        assert Size.of(raw) is None

    def test_apparel_sorts_before_numeric_and_in_order(self):
        sizes = [Size("42"), Size("XL"), Size("S"), Size("9.5")]
        assert [s.name for s in sorted(sizes, key=lambda s: s.sort_key)] == [
            "S", "XL", "9.5", "42",
        ]
