"""Unit tests for the Cart: line identity, merge and removal."""

from storefront.domain.model.cart import Cart, CartKey
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Size


def _tee(price: str = "20.00") -> Product:
    return Product(id="p1", title="Tee", price=Money.of(price), image="tee.png")


class TestCartAdd:

    def test_same_key_merges(self):
        cart = Cart()
        cart.add(_tee(), "c1", Size("M"))
        line = cart.add(_tee(), "c1", Size("M"))
        assert len(cart.lines) == 1
        assert line.quantity == 2

    def test_different_size_is_separate_line(self):
        cart = Cart()
        cart.add(_tee(), "c1", Size("M"))
        cart.add(_tee(), "c1", Size("L"))
        assert len(cart.lines) == 2
        assert cart.item_quantity(CartKey("p1", "c1", Size("M"))) == 1

    def test_line_snapshots_product(self):
        cart = Cart()
        product = _tee("20.00")
        cart.add(product)
        product.update_price(Money.of("35.00"))
        line = cart.lines[0]
        assert line.unit_price == Money.of("20.00")
        assert line.title == "Tee"
        assert line.image == "tee.png"

    def test_merge_keeps_first_snapshot(self):
        cart = Cart()
        cart.add(_tee("20.00"))
        cart.add(_tee("35.00"))
        assert cart.lines[0].unit_price == Money.of("20.00")


class TestCartDecrease:

    def test_decrease_at_one_removes_line(self):
        cart = Cart()
        cart.add(_tee(), "c1", Size("M"))
        key = CartKey("p1", "c1", Size("M"))
        cart.decrease(key)
        assert not cart.contains(key)
        assert cart.is_empty

    def test_decrease_above_one_keeps_line(self):
        cart = Cart()
        cart.add(_tee())
        cart.add(_tee())
        cart.decrease(CartKey("p1"))
        assert cart.item_quantity(CartKey("p1")) == 1

    def test_unknown_key_is_noop(self):
        cart = Cart()
        cart.add(_tee())
        cart.decrease(CartKey("p2"))
        cart.increase(CartKey("p2"))
        assert len(cart.lines) == 1


class TestCartTotals:

    def test_total_uses_snapshot_prices(self):
        cart = Cart()
        cart.add(_tee("20.00"), "c1", Size("M"))
        cart.add(_tee("20.00"), "c1", Size("M"))
        cart.add(Product(id="p2", title="Cap", price=Money.of("7.50")))
        assert cart.total == Money.of("47.50")

    def test_empty_cart_total_is_zero(self):
        assert Cart().total == Money.zero()

    def test_remove_and_clear(self):
        cart = Cart()
        cart.add(_tee())
        cart.add(Product(id="p2", title="Cap", price=Money.of("7.50")))
        cart.remove(CartKey("p1"))
        assert [line.product_id for line in cart.lines] == ["p2"]
        cart.clear()
        assert cart.is_empty
