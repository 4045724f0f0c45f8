"""Stock quantity arithmetic shared by products, colors and variants.

Every stock bucket in the catalog is a plain non-negative integer. Two
different paths mutate it: admin adjustments (``set``/``add``/``subtract``,
where subtract clamps at zero) and checkout reservations (which refuse to
take more than is there).
"""

from __future__ import annotations

from enum import Enum

from storefront.domain.exceptions import InsufficientStockError, ValidationError


class StockOperation(Enum):
    SET = "set"
    ADD = "add"
    SUBTRACT = "subtract"


class StockTarget(Enum):
    PRODUCT = "product"
    COLOR = "color"
    VARIANT = "variant"


def apply_adjustment(current: int, operation: StockOperation, amount: int) -> int:
    """Return the quantity after an admin adjustment.

    ``subtract`` floors at 0 instead of failing; ``set`` overwrites.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError(f"Stock amount must be an integer, got {amount!r}")
    if amount < 0:
        raise ValidationError("Stock amount cannot be negative")

    if operation is StockOperation.ADD:
        return current + amount
    if operation is StockOperation.SUBTRACT:
        return max(0, current - amount)
    return amount


def take(current: int, requested: int, product_title: str, identifier: str) -> int:
    """Return the quantity left after reserving *requested* units.

    Raises InsufficientStockError naming what is actually available.
    """
    if requested > current:
        raise InsufficientStockError(
            product_title, available=max(0, current), requested=requested,
            identifier=identifier,
        )
    return current - requested
