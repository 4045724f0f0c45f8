"""Application service: Place Order use case (checkout).

Runs the whole checkout inside one unit of work:

1. Snapshot each requested line from the *live* product (title, price).
2. Build the Order aggregate (validates customer and lines).
3. Reserve stock for every line through the reservation service.
4. Save the order and commit.

Any failure before the commit discards every decrement, so there is
never a reservation without an order or an order without its stock. The
confirmation notification is sent after the commit and cannot fail the
order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from storefront.application.dto import CheckoutLineSpec, CustomerSpec, OrderDTO, to_order_dto
from storefront.application.notifier import OrderConfirmation, OrderNotifier
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import (
    CustomerInfo,
    Order,
    OrderLineItem,
    generate_order_number,
)
from storefront.domain.model.value_objects import Money, Quantity, Size
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.stock_reservation_service import StockReservationService

logger = logging.getLogger(__name__)

_ORDER_NUMBER_ATTEMPTS = 5


class PlaceOrderHandler:

    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWork],
        notifier: OrderNotifier | None = None,
        order_number_factory: Callable[[], str] = generate_order_number,
    ) -> None:
        self._uow_factory = uow_factory
        self._notifier = notifier
        self._order_number_factory = order_number_factory

    def handle(
        self,
        customer: CustomerSpec,
        item_specs: list[CheckoutLineSpec],
        payment_intent_id: str | None = None,
    ) -> OrderDTO:
        if not item_specs:
            raise ValidationError("Order must contain at least one item")

        with self._uow_factory() as uow:
            line_items = [
                self._snapshot(uow, index, spec)
                for index, spec in enumerate(item_specs, start=1)
            ]

            order = Order.create(
                order_number=self._unique_order_number(uow),
                customer=CustomerInfo(
                    name=customer.name.strip(),
                    email=customer.email.strip(),
                    address=customer.address,
                    city=customer.city,
                    postal_code=customer.postal_code,
                    country=customer.country,
                ),
                items=line_items,
                payment_intent_id=payment_intent_id,
            )

            svc = StockReservationService(uow.products, uow.colors, uow.variants)
            reservations = svc.reserve_for_order(order)

            uow.orders.save(order)
            uow.commit()

        logger.info(
            "Order %s placed: %d line(s), total %s, %d stock bucket(s) decremented",
            order.order_number, len(order.items), order.total, len(reservations),
        )
        self._notify(order)
        return to_order_dto(order)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _snapshot(uow: UnitOfWork, index: int, spec: CheckoutLineSpec) -> OrderLineItem:
        product = uow.products.get_by_id(spec.product_id)
        if product is None:
            raise EntityNotFoundError(
                f"Line {index}: product #{spec.product_id} not found",
                identifier=spec.product_id,
            )

        if spec.unit_price is not None:
            claimed = Money.of(spec.unit_price, product.price.currency)
            if claimed != product.price:
                logger.warning(
                    "Line %d: client price %s for product %s differs from catalog "
                    "price %s; charging catalog price",
                    index, claimed, product.id, product.price,
                )

        return OrderLineItem(
            product_id=product.id,
            title=product.title,
            unit_price=product.price,
            quantity=Quantity(spec.quantity),
            color_id=spec.color_id or None,
            size=Size.of(spec.size),
        )

    def _unique_order_number(self, uow: UnitOfWork) -> str:
        for _ in range(_ORDER_NUMBER_ATTEMPTS):
            number = self._order_number_factory()
            if uow.orders.get_by_number(number) is None:
                return number
        raise ValidationError("Could not allocate a unique order number, please retry")

    def _notify(self, order: Order) -> None:
        if self._notifier is None:
            return
        confirmation = OrderConfirmation(
            order_number=order.order_number,
            customer_email=order.customer.email,
            customer_name=order.customer.name,
            total=str(order.total),
        )
        try:
            self._notifier.order_placed(confirmation)
        except Exception:
            logger.exception(
                "Confirmation for order %s could not be sent; the order stands",
                order.order_number,
            )
