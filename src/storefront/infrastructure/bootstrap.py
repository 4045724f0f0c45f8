"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.notifier import OrderNotifier
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.config import Settings
from storefront.infrastructure.notification.logging_notifier import LoggingOrderNotifier
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_store import JsonDocumentStore
from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


class Container:

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._store = JsonDocumentStore(settings.store_path)

    def unit_of_work(self) -> JsonUnitOfWork:
        return JsonUnitOfWork(self._store)

    def cart_repository(self) -> CartRepository:
        return JsonCartRepository(self.settings.cart_path)

    def notifier(self) -> OrderNotifier:
        return LoggingOrderNotifier()
