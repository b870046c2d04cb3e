"""Application service: Reserve Stock use case.

Takes units out of a product's stock (e.g. for kitchen consumption or a
customer order) and reports the change. A LowStockAlert is raised only
when this reservation is the one that pushes the product under the
threshold.
"""

from __future__ import annotations

from optimus.application.dto import ProductDTO
from optimus.application.local_state import LocalState
from optimus.application.mapping import product_to_dto
from optimus.domain.events.base import DomainEvent
from optimus.domain.events.product_events import LowStockAlert, StockUpdated
from optimus.domain.events.publisher import EventPublisher
from optimus.domain.model.value_objects import (
    DEFAULT_LOCALE,
    DEFAULT_LOW_STOCK_THRESHOLD,
    Quantity,
)


class ReserveStockHandler:

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
        updated = product.reserve_stock(Quantity.create(quantity))
        self._state.products.save(updated)

        events: list[DomainEvent] = [
            StockUpdated(
                product_id=updated.id,
                previous_stock=product.stock.value,
                new_stock=updated.stock.value,
                change_amount=-quantity,
            )
        ]
        threshold = self._low_stock_threshold
        if updated.is_low_stock(threshold) and not product.is_low_stock(threshold):
            events.append(
                LowStockAlert(
                    product_id=updated.id,
                    product_name=updated.name.value,
                    current_stock=updated.stock.value,
                    threshold=threshold,
                )
            )
        self._publisher.publish_all(events)

        return product_to_dto(updated, self._locale, threshold)
