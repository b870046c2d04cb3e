"""Events raised around the Product aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from optimus.domain.events.base import DomainEvent


@dataclass(frozen=True)
class ProductCreated(DomainEvent):
    event_type: ClassVar[str] = "ProductCreated"

    product_id: int
    product_name: str
    price: int  # cents
    initial_stock: int


@dataclass(frozen=True)
class StockUpdated(DomainEvent):
    event_type: ClassVar[str] = "StockUpdated"

    product_id: int
    previous_stock: int
    new_stock: int
    change_amount: int  # negative when stock was taken out


@dataclass(frozen=True)
class LowStockAlert(DomainEvent):
    event_type: ClassVar[str] = "LowStockAlert"

    product_id: int
    product_name: str
    current_stock: int
    threshold: int
