"""Entity -> DTO conversions shared by the handlers."""

from __future__ import annotations

from optimus.application.dto import OrderDTO, OrderItemDTO, ProductDTO, SupplierDTO
from optimus.domain.model.order import Order
from optimus.domain.model.product import Product
from optimus.domain.model.supplier import Supplier


def product_to_dto(product: Product, locale: str, low_stock_threshold: int) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name.value,
        price=product.price.format(locale),
        price_in_cents=product.price.cents,
        stock=product.stock.value,
        unit=product.unit,
        sku=product.sku,
        is_low_stock=product.is_low_stock(low_stock_threshold),
    )


def order_to_dto(order: Order, supplier_name: str, locale: str) -> OrderDTO:
    total = order.total_amount
    return OrderDTO(
        id=order.id,
        order_number=order.order_number,
        supplier_name=supplier_name,
        status=order.status.value,
        items=[
            OrderItemDTO(
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=item.unit_price.format(locale),
                line_total=item.line_total.format(locale),
            )
            for item in order.items
        ],
        item_count=order.item_count,
        total=total.format(locale),
        total_in_cents=total.cents,
        delivery_date=order.delivery_date.isoformat(),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        notes=order.notes,
    )


def supplier_to_dto(supplier: Supplier) -> SupplierDTO:
    return SupplierDTO(
        id=supplier.id,
        name=supplier.name,
        email=supplier.email,
        phone=supplier.phone,
        is_active=supplier.is_active,
        is_approved=supplier.is_approved,
        can_receive_orders=supplier.can_receive_orders(),
    )
