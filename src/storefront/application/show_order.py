"""Application service: Show / List Orders use cases (queries)."""

from __future__ import annotations

from collections.abc import Callable

from storefront.application.dto import OrderDTO, to_order_dto
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_number: str) -> OrderDTO:
        with self._uow_factory() as uow:
            order = uow.orders.get_by_number(order_number)
        if order is None:
            raise EntityNotFoundError(f"Order {order_number} not found", identifier=order_number)
        return to_order_dto(order)


class ListOrdersHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, status: str | None = None) -> list[OrderDTO]:
        """Return orders newest first, optionally only those in *status*."""
        wanted = None
        if status:
            try:
                wanted = OrderStatus(status.strip().lower())
            except ValueError:
                raise ValidationError(f"Invalid status: {status!r}", identifier=status)

        with self._uow_factory() as uow:
            orders = uow.orders.list_all()
        return [
            to_order_dto(order)
            for order in orders
            if wanted is None or order.status is wanted
        ]
