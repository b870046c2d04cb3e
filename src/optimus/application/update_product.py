"""Application service: Update Product price use case."""

from __future__ import annotations

from decimal import Decimal

from optimus.application.dto import ProductDTO
from optimus.application.local_state import LocalState
from optimus.application.mapping import product_to_dto
from optimus.domain.model.value_objects import (
    DEFAULT_LOCALE,
    DEFAULT_LOW_STOCK_THRESHOLD,
    Money,
)


class UpdatePriceHandler:

    def __init__(
        self,
        state: LocalState,
        locale: str = DEFAULT_LOCALE,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._state = state
        self._locale = locale
        self._low_stock_threshold = low_stock_threshold

    def handle(self, product_id: int, new_price: str | float | Decimal) -> ProductDTO:
        """Update a product's price.

        This does NOT affect any existing orders — they captured a
        price snapshot at creation time.
        """
        product = self._state.products.get(product_id)
        updated = product.update_price(Money.from_float(new_price, product.price.currency))
        self._state.products.save(updated)
        return product_to_dto(updated, self._locale, self._low_stock_threshold)
