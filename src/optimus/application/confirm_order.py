"""Application service: Confirm Order use case."""

from __future__ import annotations

from optimus.application.dto import OrderDTO
from optimus.application.local_state import LocalState
from optimus.application.mapping import order_to_dto
from optimus.domain.events.order_events import OrderConfirmed
from optimus.domain.events.publisher import EventPublisher
from optimus.domain.model.value_objects import DEFAULT_LOCALE


class ConfirmOrderHandler:

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
        order = self._state.orders.get(order_id).confirm()
        self._state.orders.save(order)

        self._publisher.publish(
            OrderConfirmed(
                order_id=order.id,
                order_number=order.order_number,
                confirmed_at=order.updated_at,
            )
        )
        return order_to_dto(order, self._state.supplier_name(order.supplier_id), self._locale)
