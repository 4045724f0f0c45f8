"""Application service: List Products use case (query)."""

from __future__ import annotations

from collections.abc import Callable

from storefront.application.dto import ProductDTO
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.stock_ledger_service import StockLedgerService


class ListProductsHandler:

    def __init__(self, uow_factory: Callable[[], UnitOfWork]) -> None:
        self._uow_factory = uow_factory

    def handle(self, in_stock_only: bool = False) -> list[ProductDTO]:
        with self._uow_factory() as uow:
            svc = StockLedgerService(uow.products, uow.colors, uow.variants)
            rows = [
                ProductDTO(
                    id=p.id,
                    title=p.title,
                    price=str(p.price),
                    rating=f"{p.rating:.2f}",
                    available=svc.product_available(p),
                )
                for p in uow.products.list_all()
            ]
        if in_stock_only:
            rows = [row for row in rows if row.available > 0]
        return rows
