"""Application service: Submit Order use case (DRAFT -> PENDING)."""

from __future__ import annotations

from optimus.application.dto import OrderDTO
from optimus.application.local_state import LocalState
from optimus.application.mapping import order_to_dto
from optimus.domain.model.value_objects import DEFAULT_LOCALE


class SubmitOrderHandler:

    def __init__(self, state: LocalState, locale: str = DEFAULT_LOCALE) -> None:
        self._state = state
        self._locale = locale

    def handle(self, order_id: int) -> OrderDTO:
        order = self._state.orders.get(order_id).submit()
        self._state.orders.save(order)
        return order_to_dto(order, self._state.supplier_name(order.supplier_id), self._locale)
