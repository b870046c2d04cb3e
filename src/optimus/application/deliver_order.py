"""Application service: Deliver Order use case.

Marks a confirmed supplier order as delivered and puts the delivered
units into stock.

Two-phase approach (validate-then-mutate): every product is loaded and
the order transition is checked before any stock changes, so a missing
product never leaves the catalog half-restocked.
"""

from __future__ import annotations

from optimus.application.dto import OrderDTO
from optimus.application.local_state import LocalState
from optimus.application.mapping import order_to_dto
from optimus.domain.events.base import DomainEvent
from optimus.domain.events.order_events import OrderDelivered
from optimus.domain.events.product_events import StockUpdated
from optimus.domain.events.publisher import EventPublisher
from optimus.domain.model.value_objects import DEFAULT_LOCALE


class DeliverOrderHandler:

    def __init__(
        self,
        state: LocalState,
        publisher: EventPublisher,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._state = state
        self._publisher = publisher
        self._locale = locale

    def handle(self, order_id: int) -> OrderDTO:
        # Phase 1: check the transition and that every product exists
        delivered = self._state.orders.get(order_id).mark_as_delivered()
        for item in delivered.items:
            self._state.products.get(item.product_id)

        # Phase 2: apply
        events: list[DomainEvent] = [
            OrderDelivered(
                order_id=delivered.id,
                order_number=delivered.order_number,
                delivered_at=delivered.updated_at,
            )
        ]
        for item in delivered.items:
            # re-read: the same product may appear on several lines
            current = self._state.products.get(item.product_id)
            restocked = current.restock_inventory(item.quantity)
            self._state.products.save(restocked)
            events.append(
                StockUpdated(
                    product_id=restocked.id,
                    previous_stock=current.stock.value,
                    new_stock=restocked.stock.value,
                    change_amount=item.quantity.value,
                )
            )
        self._state.orders.save(delivered)
        self._publisher.publish_all(events)

        return order_to_dto(
            delivered, self._state.supplier_name(delivered.supplier_id), self._locale
        )
