"""Events raised around the Order aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from optimus.domain.events.base import DomainEvent


@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    event_type: ClassVar[str] = "OrderCreated"

    order_id: int
    order_number: str
    tenant_id: int
    supplier_id: int
    total_amount: int  # cents
    item_count: int


@dataclass(frozen=True)
class OrderConfirmed(DomainEvent):
    event_type: ClassVar[str] = "OrderConfirmed"

    order_id: int
    order_number: str
    confirmed_at: datetime


@dataclass(frozen=True)
class OrderDelivered(DomainEvent):
    event_type: ClassVar[str] = "OrderDelivered"

    order_id: int
    order_number: str
    delivered_at: datetime


@dataclass(frozen=True)
class OrderCancelled(DomainEvent):
    event_type: ClassVar[str] = "OrderCancelled"

    order_id: int
    order_number: str
    cancelled_at: datetime
