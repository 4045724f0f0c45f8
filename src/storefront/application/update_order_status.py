"""Application service: Update Order Status use case (admin).

Only the values of OrderStatus are accepted; the Order aggregate decides
which transitions are legal. Cancelling does not put stock back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_number: str, status: str) -> OrderDTO:
        if not order_number:
            raise ValidationError("Order number is required")
        try:
            new_status = OrderStatus((status or "").strip().lower())
        except ValueError:
            raise ValidationError(f"Invalid status: {status!r}", identifier=status)

        with self._uow_factory() as uow:
            order = uow.orders.get_by_number(order_number)
            if order is None:
                raise EntityNotFoundError(
                    f"Order {order_number} not found", identifier=order_number
                )
            previous = order.status
            order.transition_to(new_status)
            uow.orders.save(order)
            uow.commit()

        logger.info(
            "Order %s status %s -> %s",
            order_number, previous.value, new_status.value,
        )
        return to_order_dto(order)
