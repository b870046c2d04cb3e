"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry display-ready data from the application layer to a
presentation layer without exposing domain objects. Money values are
pre-formatted for the configured locale; raw numbers are kept alongside
where a front-end may need to compute with them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: which product to order and how many units."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str  # formatted, e.g. "15,99 €"
    price_in_cents: int
    stock: int
    unit: str
    sku: str | None
    is_low_stock: bool


@dataclass(frozen=True)
class OrderItemDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    order_number: str
    supplier_name: str
    status: str
    items: list[OrderItemDTO]
    item_count: int
    total: str
    total_in_cents: int
    delivery_date: str
    created_at: str
    notes: str | None


@dataclass(frozen=True)
class SupplierDTO:
    id: int
    name: str
    email: str | None
    phone: str | None
    is_active: bool
    is_approved: bool
    can_receive_orders: bool


@dataclass(frozen=True)
class DashboardDTO:
    product_count: int
    low_stock_count: int
    low_stock_products: list[ProductDTO]
    active_orders: int
    pending_orders: int
    open_order_value: str  # one formatted subtotal per currency, comma separated
    open_order_totals: dict[str, int]  # cents per currency code
    active_suppliers: int
    total_suppliers: int
