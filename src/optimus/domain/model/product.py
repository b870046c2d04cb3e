"""Product aggregate.

Products live independently of orders. Every business method returns a
*new* Product; the instance it was called on never changes, so any
snapshot a caller holds stays valid.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from optimus.domain.exceptions import OutOfStockError
from optimus.domain.model.entity import Entity, utcnow
from optimus.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    DEFAULT_LOW_STOCK_THRESHOLD,
    Money,
    ProductName,
    Quantity,
)

DEFAULT_UNIT = "unité"


@dataclass(frozen=True, eq=False)
class Product(Entity):
    """A product in the catalog, with its price and stock on hand.

    Use ``Product.create()`` for new products. ``Product.rehydrate()``
    rebuilds a stored product without re-validating it.
    """

    id: int
    name: ProductName
    price: Money
    stock: Quantity
    category_id: int | None
    supplier_id: int | None
    sku: str | None
    unit: str
    created_at: datetime
    updated_at: datetime

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: int,
        name: str,
        price_in_cents: int,
        stock: int,
        category_id: int | None = None,
        supplier_id: int | None = None,
        sku: str | None = None,
        unit: str | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> Product:
        now = utcnow()
        return Product(
            id=id,
            name=ProductName.create(name),
            price=Money.create(price_in_cents, currency),
            stock=Quantity.create(stock),
            category_id=category_id,
            supplier_id=supplier_id,
            sku=sku,
            unit=unit or DEFAULT_UNIT,
            created_at=now,
            updated_at=now,
        )

    # --- Queries --------------------------------------------------------------

    def can_fulfill_order(self, requested_quantity: Quantity) -> bool:
        return self.stock.is_sufficient_for(requested_quantity)

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        return self.stock.is_low_stock(threshold)

    # --- Business methods -----------------------------------------------------

    def reserve_stock(self, quantity: Quantity) -> Product:
        """Take *quantity* units out of stock.

        Raises OutOfStockError when the stock cannot cover the request.
        The sufficiency check runs first, so the subtraction below can
        never produce a negative Quantity.
        """
        if not self.can_fulfill_order(quantity):
            raise OutOfStockError(self.id, quantity.value, self.stock.value)
        return replace(self, stock=self.stock.subtract(quantity), updated_at=utcnow())

    def restock_inventory(self, quantity: Quantity) -> Product:
        return replace(self, stock=self.stock.add(quantity), updated_at=utcnow())

    def update_price(self, new_price: Money) -> Product:
        """Replace the price.

        Existing orders are unaffected: they captured a price snapshot
        at creation time.
        """
        return replace(self, price=new_price, updated_at=utcnow())
