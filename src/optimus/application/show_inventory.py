"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from optimus.application.dto import ProductDTO
from optimus.application.local_state import LocalState
from optimus.application.mapping import product_to_dto
from optimus.domain.model.value_objects import DEFAULT_LOCALE, DEFAULT_LOW_STOCK_THRESHOLD


class ShowInventoryHandler:

    def __init__(
        self,
        state: LocalState,
        locale: str = DEFAULT_LOCALE,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._state = state
        self._locale = locale
        self._low_stock_threshold = low_stock_threshold

    def handle(self, low_stock_only: bool = False) -> list[ProductDTO]:
        products = self._state.products.all()
        if low_stock_only:
            products = [p for p in products if p.is_low_stock(self._low_stock_threshold)]
        return [
            product_to_dto(p, self._locale, self._low_stock_threshold) for p in products
        ]
