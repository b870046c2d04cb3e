"""Order aggregate — a purchase order sent to a supplier.

The Order owns its line items. Line items capture the product name and
price at creation time, so later catalog changes never rewrite an
existing order.

Status lifecycle::

    DRAFT -> PENDING -> CONFIRMED -> DELIVERED
      |         |           |
      +---------+-----------+--> CANCELLED

DRAFT may also be confirmed directly. Every transition returns a new
Order.
"""

from __future__ import annotations

import random
import string
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum
from typing import Any, NoReturn

from optimus.domain.exceptions import InvalidStatusTransitionError
from optimus.domain.model.entity import Entity, utcnow
from optimus.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity


class OrderStatus(Enum):
    DRAFT = "DRAFT"
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})

_BASE36_DIGITS = string.digits + string.ascii_uppercase


@dataclass(frozen=True)
class OrderItem:
    """One line of an order, with the price locked at order-creation time."""

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # snapshot, never follows later price changes

    @property
    def line_total(self) -> Money:
        return self.unit_price.multiply(self.quantity.value)


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def generate_order_number() -> str:
    """Human-readable order number, e.g. ``ORD-MF3K2QZP-7XQ2``.

    Millisecond timestamp plus a random suffix: unique enough for a
    single user, but not a guarantee. A persistence layer that needs
    strict uniqueness should pass its own ``order_number`` to
    ``Order.create``.
    """
    timestamp = _to_base36(time.time_ns() // 1_000_000)
    suffix = "".join(random.choices(_BASE36_DIGITS, k=4))
    return f"ORD-{timestamp}-{suffix}"


@dataclass(frozen=True, eq=False)
class Order(Entity):
    """Aggregate root for supplier orders.

    Use the ``Order.create()`` factory for new orders. ``rehydrate()``
    reconstitutes stored orders without re-validating.
    """

    id: int
    order_number: str
    tenant_id: int
    site_id: int
    supplier_id: int
    items: tuple[OrderItem, ...]
    status: OrderStatus
    delivery_date: date
    notes: str | None
    created_at: datetime
    updated_at: datetime

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        id: int,
        tenant_id: int,
        site_id: int,
        supplier_id: int,
        items: Iterable[Mapping[str, Any]],
        delivery_date: date,
        notes: str | None = None,
        currency: str = DEFAULT_CURRENCY,
        order_number: str | None = None,
    ) -> Order:
        """Create a DRAFT order from raw item records.

        Each item needs ``product_id``, ``product_name``, ``quantity`` and
        ``unit_price_in_cents``; quantity and price are validated here.
        """
        order_items = tuple(
            OrderItem(
                product_id=item["product_id"],
                product_name=item["product_name"],
                quantity=Quantity.create(item["quantity"]),
                unit_price=Money.create(item["unit_price_in_cents"], currency),
            )
            for item in items
        )
        now = utcnow()
        return Order(
            id=id,
            order_number=order_number or generate_order_number(),
            tenant_id=tenant_id,
            site_id=site_id,
            supplier_id=supplier_id,
            items=order_items,
            status=OrderStatus.DRAFT,
            delivery_date=delivery_date,
            notes=notes,
            created_at=now,
            updated_at=now,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def currency(self) -> str:
        if not self.items:
            return DEFAULT_CURRENCY
        return self.items[0].unit_price.currency

    @property
    def total_amount(self) -> Money:
        """Sum of all line totals.

        Raises CurrencyMismatchError if items are priced in different
        currencies.
        """
        total = Money.create(0, self.currency)
        for item in self.items:
            total = total.add(item.line_total)
        return total

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    # --- State transitions ----------------------------------------------------

    def submit(self) -> Order:
        """Transition DRAFT -> PENDING (sent to the supplier, awaiting answer)."""
        if self.status != OrderStatus.DRAFT:
            self._reject("Cannot submit order that is not in DRAFT status")
        return self._with_status(OrderStatus.PENDING)

    def confirm(self) -> Order:
        """Transition DRAFT|PENDING -> CONFIRMED."""
        if self.status not in (OrderStatus.DRAFT, OrderStatus.PENDING):
            self._reject("Cannot confirm order that is not in DRAFT or PENDING status")
        return self._with_status(OrderStatus.CONFIRMED)

    def mark_as_delivered(self) -> Order:
        """Transition CONFIRMED -> DELIVERED."""
        if self.status != OrderStatus.CONFIRMED:
            self._reject("Cannot deliver order that is not confirmed")
        return self._with_status(OrderStatus.DELIVERED)

    def cancel(self) -> Order:
        """Transition any non-delivered status -> CANCELLED.

        Cancelling an already cancelled order is allowed and yields
        another CANCELLED order.
        """
        if self.status == OrderStatus.DELIVERED:
            self._reject("Cannot cancel delivered order")
        return self._with_status(OrderStatus.CANCELLED)

    # --- Internal helpers -----------------------------------------------------

    def _with_status(self, status: OrderStatus) -> Order:
        return replace(self, status=status, updated_at=utcnow())

    def _reject(self, message: str) -> NoReturn:
        raise InvalidStatusTransitionError(message, self.id, self.status.value)
