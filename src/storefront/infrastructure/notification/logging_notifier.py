"""OrderNotifier that writes the confirmation to the log.

Stands in for a mail provider: the confirmation a customer would receive
is logged at INFO with its recipient, subject and amount.
"""

from __future__ import annotations

import logging

from storefront.application.notifier import OrderConfirmation, OrderNotifier

logger = logging.getLogger(__name__)


class LoggingOrderNotifier(OrderNotifier):

    def order_placed(self, confirmation: OrderConfirmation) -> None:
        logger.info(
            "Order confirmation to %s <%s>: subject=%r total=%s",
            confirmation.customer_name,
            confirmation.customer_email,
            f"Order Confirmation - {confirmation.order_number}",
            confirmation.total,
        )
