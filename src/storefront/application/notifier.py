"""Port for order notifications (confirmation e-mail and friends).

The notifier runs after the order is committed. Its failures are logged
by the caller and never undo the order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class OrderConfirmation:
    order_number: str
    customer_email: str
    customer_name: str
    total: str


class OrderNotifier(ABC):

    @abstractmethod
    def order_placed(self, confirmation: OrderConfirmation) -> None:
        """Tell the customer their order was received."""
