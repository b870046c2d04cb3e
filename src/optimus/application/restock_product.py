"""Application service: Restock Product use case."""

from __future__ import annotations

from optimus.application.dto import ProductDTO
from optimus.application.local_state import LocalState
from optimus.application.mapping import product_to_dto
from optimus.domain.events.product_events import StockUpdated
from optimus.domain.events.publisher import EventPublisher
from optimus.domain.model.value_objects import (
    DEFAULT_LOCALE,
    DEFAULT_LOW_STOCK_THRESHOLD,
    Quantity,
)


class RestockProductHandler:

    def __init__(
        self,
        state: LocalState,
        publisher: EventPublisher,
        locale: str = DEFAULT_LOCALE,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._state = state
        self._publisher = publisher
        self._locale = locale
        self._low_stock_threshold = low_stock_threshold

    def handle(self, product_id: int, quantity: int) -> ProductDTO:
        product = self._state.products.get(product_id)
        updated = product.restock_inventory(Quantity.create(quantity))
        self._state.products.save(updated)

        self._publisher.publish(
            StockUpdated(
                product_id=updated.id,
                previous_stock=product.stock.value,
                new_stock=updated.stock.value,
                change_amount=quantity,
            )
        )
        return product_to_dto(updated, self._locale, self._low_stock_threshold)
