"""Application service: Adjust Stock use case (admin).

Manual set/add/subtract on a product, color or variant bucket. Runs in
its own unit of work so it cannot interleave with a checkout on the same
store.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.stock import StockOperation, StockTarget
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.stock_ledger_service import StockLedgerService


class AdjustStockHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, target_id: str, target: str, operation: str, amount: int) -> int:
        """Apply the adjustment and return the resulting quantity."""
        try:
            stock_target = StockTarget(target)
            stock_operation = StockOperation(operation)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

        with self._uow_factory() as uow:
            svc = StockLedgerService(uow.products, uow.colors, uow.variants)
            new_quantity = svc.adjust(target_id, stock_target, stock_operation, amount)
            uow.commit()
        return new_quantity
