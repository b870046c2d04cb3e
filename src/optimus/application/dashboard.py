"""Application service: Dashboard use case (query).

Key figures for the overview page: catalog size and low-stock alerts,
open supplier orders and their value, supplier activity. The open order
value is reported per currency.
"""

from __future__ import annotations

from optimus.application.dto import DashboardDTO
from optimus.application.local_state import LocalState
from optimus.application.mapping import product_to_dto
from optimus.domain.model.order import Order, OrderStatus
from optimus.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    DEFAULT_LOW_STOCK_THRESHOLD,
    Money,
)


class DashboardHandler:

    def __init__(
        self,
        state: LocalState,
        locale: str = DEFAULT_LOCALE,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._state = state
        self._locale = locale
        self._low_stock_threshold = low_stock_threshold
        self._currency = currency

    def handle(self) -> DashboardDTO:
        products = self._state.products.all()
        low_stock = [p for p in products if p.is_low_stock(self._low_stock_threshold)]

        open_orders = [o for o in self._state.orders.all() if not o.is_terminal]
        open_totals = self._open_totals(open_orders)

        suppliers = self._state.suppliers.all()

        return DashboardDTO(
            product_count=len(products),
            low_stock_count=len(low_stock),
            low_stock_products=[
                product_to_dto(p, self._locale, self._low_stock_threshold) for p in low_stock
            ],
            active_orders=len(open_orders),
            pending_orders=sum(1 for o in open_orders if o.status == OrderStatus.PENDING),
            open_order_value=", ".join(m.format(self._locale) for m in open_totals.values()),
            open_order_totals={code: m.cents for code, m in open_totals.items()},
            active_suppliers=sum(1 for s in suppliers if s.is_active),
            total_suppliers=len(suppliers),
        )

    def _open_totals(self, open_orders: list[Order]) -> dict[str, Money]:
        """Sum open order totals per currency, in order of first appearance.

        Amounts in different currencies are never added together. With no
        open orders the result is a zero amount in the configured currency.
        """
        totals: dict[str, Money] = {}
        for order in open_orders:
            total = order.total_amount
            if total.currency in totals:
                totals[total.currency] = totals[total.currency].add(total)
            else:
                totals[total.currency] = total
        return totals or {self._currency: Money.create(0, self._currency)}
