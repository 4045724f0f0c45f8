"""End-to-end tests for the click CLI against a temporary data directory."""

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def invoke(*args: str):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return invoke


@pytest.fixture
def catalog(run):
    assert run("product", "add", "--title", "Tee", "--price", "20").exit_code == 0
    assert run("product", "color-add", "--product", "1", "--name", "Red", "--code", "#f00").exit_code == 0
    assert run("product", "variant-add", "--color", "1", "--size", "M", "--quantity", "5").exit_code == 0
    return run


class TestCatalogCommands:

    def test_product_add(self, run):
        result = run("product", "add", "--title", "Tee", "--price", "20")
        assert result.exit_code == 0
        assert "Product #1 'Tee' added at $20.00" in result.output

    def test_price_printed_in_product_currency(self, run):
        result = run("--currency", "EUR", "product", "add", "--title", "Tote", "--price", "8")
        assert "added at €8.00" in result.output
        result = run("product", "update", "--id", "1", "--price", "9.5")
        assert result.exit_code == 0, result.output
        assert "price updated to €9.50" in result.output

    def test_product_list_in_stock(self, catalog):
        catalog("product", "add", "--title", "Poster", "--price", "5")
        result = catalog("product", "list", "--in-stock")
        assert "Tee" in result.output
        assert "Poster" not in result.output

    def test_duplicate_variant_is_an_error(self, catalog):
        result = catalog("product", "variant-add", "--color", "1", "--size", "m")
        assert result.exit_code == 1
        assert "already has a variant for size M" in result.output


class TestStockCommands:

    def test_show_and_adjust(self, catalog):
        assert "color #1 size M: 5 available" in catalog(
            "stock", "show", "--color", "1", "--size", "M"
        ).output

        result = catalog(
            "stock", "adjust", "--target", "variant", "--id", "1",
            "--op", "subtract", "--amount", "9",
        )
        assert result.exit_code == 0
        assert "Variant #1 stock is now 0" in result.output

    def test_show_missing_variant(self, catalog):
        result = catalog("stock", "show", "--color", "1", "--size", "XL")
        assert result.exit_code == 1
        assert "No variant" in result.output

    def test_negative_amount_rejected_by_cli(self, catalog):
        result = catalog(
            "stock", "adjust", "--target", "variant", "--id", "1",
            "--op", "add", "--amount", "-1",
        )
        assert result.exit_code == 2


class TestCheckoutFlow:

    def test_cart_checkout(self, catalog):
        catalog("cart", "add", "--product", "1", "--color", "1", "--size", "M")
        result = catalog("cart", "add", "--product", "1", "--color", "1", "--size", "M")
        assert "now has 2" in result.output

        result = catalog("order", "place", "--name", "Dana", "--email", "dana@example.com")
        assert result.exit_code == 0, result.output
        assert "placed" in result.output
        assert "$40.00" in result.output

        assert "3 available" in catalog("stock", "show", "--color", "1", "--size", "M").output
        assert "Cart is empty." in catalog("cart", "show").output

    def test_increase_refused_at_stock_limit(self, catalog):
        catalog("stock", "adjust", "--target", "variant", "--id", "1", "--op", "set", "--amount", "1")
        catalog("cart", "add", "--product", "1", "--color", "1", "--size", "M")
        result = catalog("cart", "increase", "--product", "1", "--color", "1", "--size", "M")
        assert result.exit_code == 1
        assert "Only 1 available" in result.output

    def test_decrease_removes_line(self, catalog):
        catalog("cart", "add", "--product", "1", "--color", "1", "--size", "M")
        result = catalog("cart", "decrease", "--product", "1", "--color", "1", "--size", "M")
        assert "removed from cart" in result.output

    def test_increase_missing_line(self, catalog):
        result = catalog("cart", "increase", "--product", "1", "--color", "1", "--size", "M")
        assert result.exit_code == 1
        assert "No cart line for product #1 color #1 size M" in result.output
        assert "now has" not in result.output

    def test_corrupt_cart_file(self, catalog, tmp_path):
        (tmp_path / "cart.json").write_text("{not json", encoding="utf-8")
        result = catalog("cart", "show")
        assert result.exit_code == 1
        assert "is unreadable" in result.output

    def test_direct_items_insufficient_stock(self, catalog):
        result = catalog(
            "order", "place", "--name", "Dana", "--email", "dana@example.com",
            "--items", "1:1:M=6",
        )
        assert result.exit_code == 1
        assert "Insufficient stock for Tee (requested 6, 5 available)" in result.output
        assert "No orders found." in catalog("order", "list").output

    def test_bad_items_format(self, catalog):
        result = catalog(
            "order", "place", "--name", "Dana", "--email", "dana@example.com",
            "--items", "1:1:M",
        )
        assert result.exit_code == 2

    def test_status_and_stats(self, catalog):
        catalog(
            "order", "place", "--name", "Dana", "--email", "dana@example.com",
            "--items", "1:1:M=2",
        )
        listing = catalog("order", "list").output
        number = listing.splitlines()[2].split()[0]

        result = catalog("order", "status", "--number", number, "--set", "shipped")
        assert f"Order {number} is now shipped." in result.output

        result = catalog("order", "status", "--number", number, "--set", "cancelled")
        assert result.exit_code == 1
        assert "Cannot cancel" in result.output

        stats = catalog("order", "stats").output
        assert "Total orders:   1" in stats
        assert "Total revenue:  $40.00" in stats

    def test_stats_with_other_configured_currency(self, catalog):
        catalog(
            "order", "place", "--name", "Dana", "--email", "dana@example.com",
            "--items", "1:1:M=1",
        )
        result = catalog("--currency", "EUR", "order", "stats")
        assert result.exit_code == 0, result.output
        assert "Total revenue:  $20.00" in result.output


class TestReviewCommands:

    def test_add_updates_rating(self, catalog):
        result = catalog(
            "review", "add", "--product", "1", "--author", "Eve",
            "--rating", "4", "--comment", "Soft",
        )
        assert "Review #1 (4/5) added to product #1" in result.output
        assert "4.00" in catalog("product", "list").output
        assert "Soft" in catalog("review", "list", "--product", "1").output
