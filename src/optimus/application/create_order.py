"""Application service: Create Order use case.

Orchestrates the lookups that the Order aggregate cannot do itself:
the supplier must be allowed to receive orders, and every product is
resolved so that its *current* name and price are snapshotted into the
line items.
"""

from __future__ import annotations

from datetime import date

from optimus.application.dto import OrderDTO, OrderItemSpec
from optimus.application.local_state import LocalState
from optimus.application.mapping import order_to_dto
from optimus.domain.events.order_events import OrderCreated
from optimus.domain.events.publisher import EventPublisher
from optimus.domain.exceptions import (
    CurrencyMismatchError,
    DomainValidationError,
    SupplierNotEligibleError,
)
from optimus.domain.model.order import Order
from optimus.domain.model.value_objects import DEFAULT_LOCALE


class CreateOrderHandler:

    def __init__(
        self,
        state: LocalState,
        publisher: EventPublisher,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._state = state
        self._publisher = publisher
        self._locale = locale

    def handle(
        self,
        tenant_id: int,
        site_id: int,
        supplier_id: int,
        item_specs: list[OrderItemSpec],
        delivery_date: date,
        notes: str | None = None,
    ) -> OrderDTO:
        """Create a new DRAFT supplier order.

        Steps:
        1. Check the supplier is active and approved.
        2. Resolve each product (fail if not found) and snapshot its
           name and price; all prices must share one currency.
        3. Let the Order aggregate validate quantities and prices.
        4. Store, publish OrderCreated and return a DTO.
        """
        if not item_specs:
            raise DomainValidationError("Order must contain at least one item")

        supplier = self._state.suppliers.get(supplier_id)
        if not supplier.can_receive_orders():
            raise SupplierNotEligibleError(supplier.id, supplier.name)

        raw_items = []
        currency = None
        for spec in item_specs:
            product = self._state.products.get(spec.product_id)
            if currency is None:
                currency = product.price.currency
            elif product.price.currency != currency:
                raise CurrencyMismatchError(currency, product.price.currency)
            raw_items.append(
                {
                    "product_id": product.id,
                    "product_name": product.name.value,
                    "quantity": spec.quantity,
                    "unit_price_in_cents": product.price.cents,  # <-- price snapshot
                }
            )

        order = Order.create(
            id=self._state.orders.next_id(),
            tenant_id=tenant_id,
            site_id=site_id,
            supplier_id=supplier.id,
            items=raw_items,
            delivery_date=delivery_date,
            notes=notes,
            currency=currency,
        )
        self._state.orders.save(order)

        self._publisher.publish(
            OrderCreated(
                order_id=order.id,
                order_number=order.order_number,
                tenant_id=order.tenant_id,
                supplier_id=order.supplier_id,
                total_amount=order.total_amount.cents,
                item_count=order.item_count,
            )
        )
        return order_to_dto(order, supplier.name, self._locale)
