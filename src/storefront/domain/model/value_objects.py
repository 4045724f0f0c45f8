"""Value Objects shared across the storefront domain.

Value Objects are immutable and compared by value. Each one validates on
construction, so a Money, Quantity or Size that exists is always usable.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "USD"

# other currencies print as "<code> <amount>"
CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£"}


@dataclass(frozen=True)
class Money:
    """Decimal amount tagged with a currency code."""

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    def __add__(self, other: Money) -> Money:
        self._require_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._require_currency(other)
        return self.amount < other.amount

    def __str__(self) -> str:
        symbol = CURRENCY_SYMBOLS.get(self.currency)
        if symbol is None:
            return f"{self.currency} {self.amount:.2f}"
        return f"{symbol}{self.amount:.2f}"

    def _require_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0.00"), currency)

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Coerce user or client input to Money, raising ValidationError on junk."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """Number of units requested on an order line. Always positive."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


APPAREL_SIZES = ("XS", "S", "M", "L", "XL", "2XL", "3XL")
_NUMERIC_SIZE = re.compile(r"^\d{1,2}(\.5)?$")


@dataclass(frozen=True)
class Size:
    """A size label from the fixed enumeration.

    Apparel sizes (``S``, ``M``, ``2XL`` ...) or numeric shoe sizes
    (``"42"``, ``"9.5"``). Within a color a size is a uniqueness key.
    """

    name: str

    def __post_init__(self) -> None:
        if self.name not in APPAREL_SIZES and not _NUMERIC_SIZE.match(self.name):
            raise ValidationError(f"Unknown size: {self.name!r}", identifier=self.name)

    @property
    def sort_key(self) -> tuple[int, float]:
        if self.name in APPAREL_SIZES:
            return (0, float(APPAREL_SIZES.index(self.name)))
        return (1, float(self.name))

    def __str__(self) -> str:
        return self.name

    @staticmethod
    def of(raw: str | None) -> Size | None:
        """Parse an optional size label; blank input means "no size"."""
        if raw is None or not str(raw).strip():
            return None
        return Size(str(raw).strip().upper())
