"""Application services: Show Order / List Orders use cases (queries)."""

from __future__ import annotations

from optimus.application.dto import OrderDTO
from optimus.application.local_state import LocalState
from optimus.application.mapping import order_to_dto
from optimus.domain.model.order import OrderStatus
from optimus.domain.model.value_objects import DEFAULT_LOCALE


class ShowOrderHandler:

    def __init__(self, state: LocalState, locale: str = DEFAULT_LOCALE) -> None:
        self._state = state
        self._locale = locale

    def handle(self, order_id: int) -> OrderDTO:
        order = self._state.orders.get(order_id)
        return order_to_dto(order, self._state.supplier_name(order.supplier_id), self._locale)


class ListOrdersHandler:

    def __init__(self, state: LocalState, locale: str = DEFAULT_LOCALE) -> None:
        self._state = state
        self._locale = locale

    def handle(self, status: OrderStatus | None = None) -> list[OrderDTO]:
        return [
            order_to_dto(order, self._state.supplier_name(order.supplier_id), self._locale)
            for order in self._state.orders.all()
            if status is None or order.status == status
        ]
