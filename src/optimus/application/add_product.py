"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from optimus.application.dto import ProductDTO
from optimus.application.local_state import LocalState
from optimus.application.mapping import product_to_dto
from optimus.domain.events.product_events import ProductCreated
from optimus.domain.events.publisher import EventPublisher
from optimus.domain.exceptions import BusinessRuleError
from optimus.domain.model.product import Product
from optimus.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    DEFAULT_LOW_STOCK_THRESHOLD,
    Money,
    ProductName,
)


class AddProductHandler:

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

    def handle(
        self,
        name: str,
        price: str | float | Decimal,
        stock: int,
        unit: str | None = None,
        sku: str | None = None,
        supplier_id: int | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> ProductDTO:
        """Add a new product to the catalog.

        *price* is in currency units ("15.99"); names are unique
        regardless of case.
        """
        product_name = ProductName.create(name)
        for existing in self._state.products.all():
            if existing.name == product_name:
                raise BusinessRuleError(
                    f"Product '{product_name}' already exists", "DUPLICATE_PRODUCT"
                )

        if supplier_id is not None:
            self._state.suppliers.get(supplier_id)

        product = Product.create(
            id=self._state.products.next_id(),
            name=product_name.value,
            price_in_cents=Money.from_float(price, currency).cents,
            stock=stock,
            supplier_id=supplier_id,
            sku=sku,
            unit=unit,
            currency=currency,
        )
        self._state.products.save(product)

        self._publisher.publish(
            ProductCreated(
                product_id=product.id,
                product_name=product.name.value,
                price=product.price.cents,
                initial_stock=product.stock.value,
            )
        )
        return product_to_dto(product, self._locale, self._low_stock_threshold)
