"""Application service: Order Statistics use case (dashboard query).

Revenue figures leave cancelled orders out. "Today" starts at local
midnight of the supplied clock.

Revenue is summed per currency, in the currency each order was placed
in. The configured currency only decides what an empty total looks like
and which currency is listed first.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from storefront.application.dto import OrderStatsDTO
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.unit_of_work import UnitOfWork


class OrderStatsHandler:

    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWork],
        currency: str = DEFAULT_CURRENCY,
        clock: Callable[[], datetime] = lambda: datetime.now().astimezone(),
    ) -> None:
        self._uow_factory = uow_factory
        self._currency = currency
        self._clock = clock

    def handle(self) -> OrderStatsDTO:
        with self._uow_factory() as uow:
            orders = uow.orders.list_all()

        start_of_day = self._clock().replace(hour=0, minute=0, second=0, microsecond=0)
        by_status = {status.value: 0 for status in OrderStatus}
        revenue: dict[str, Money] = {}
        today_orders = 0
        today_revenue: dict[str, Money] = {}

        for order in orders:
            by_status[order.status.value] += 1
            is_today = order.created_at >= start_of_day
            if is_today:
                today_orders += 1
            if order.status is OrderStatus.CANCELLED:
                continue
            _accumulate(revenue, order.total)
            if is_today:
                _accumulate(today_revenue, order.total)

        return OrderStatsDTO(
            total_orders=len(orders),
            by_status=by_status,
            total_revenue=self._format(revenue),
            today_orders=today_orders,
            today_revenue=self._format(today_revenue),
        )

    def _format(self, totals: dict[str, Money]) -> str:
        if not totals:
            return str(Money.zero(self._currency))
        ordered = sorted(totals, key=lambda code: (code != self._currency, code))
        return ", ".join(str(totals[code]) for code in ordered)


def _accumulate(totals: dict[str, Money], amount: Money) -> None:
    current = totals.get(amount.currency, Money.zero(amount.currency))
    totals[amount.currency] = current + amount
