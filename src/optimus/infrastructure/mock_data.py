"""Demo data set: the catalog, suppliers and orders shown by the
inventory, suppliers and orders pages.

Everything is built through the domain factories and transitions, so
the demo never contains a state the domain could not have produced.
"""

from __future__ import annotations

from datetime import date

from optimus.application.local_state import LocalState
from optimus.domain.model.order import Order
from optimus.domain.model.product import Product
from optimus.domain.model.supplier import Supplier

DEMO_TENANT_ID = 1
DEMO_SITE_ID = 1

METRO, RUNGIS, TRANSGOURMET, POMONA = 1, 2, 3, 4


def demo_suppliers() -> list[Supplier]:
    return [
        Supplier.create(
            METRO, "Metro Cash & Carry", email="contact@metro.fr", phone="+33 1 23 45 67 89"
        ).approve(),
        Supplier.create(
            RUNGIS,
            "Rungis Express",
            email="commandes@rungis-express.fr",
            phone="+33 1 45 67 89 01",
        ).approve(),
        Supplier.create(
            TRANSGOURMET,
            "Transgourmet",
            email="service@transgourmet.fr",
            phone="+33 1 56 78 90 12",
        ).approve(),
        Supplier.create(POMONA, "Pomona", email="info@pomona.fr"),
    ]


def demo_products() -> list[Product]:
    rows = [
        # id, name, cents, stock, unit, supplier
        (1, "Saumon Atlantique", 1599, 50, "kg", RUNGIS),
        (2, "Poulet Fermier Bio", 850, 8, "kg", METRO),
        (3, "Tomates Cœur de Bœuf", 399, 25, "kg", RUNGIS),
        (4, "Huile d'Olive Extra Vierge", 1290, 15, "L", TRANSGOURMET),
        (5, "Farine T45", 120, 5, "kg", METRO),
        (6, "Riz Basmati", 250, 100, "kg", TRANSGOURMET),
        (7, "Fromage Comté AOP", 1890, 12, "kg", METRO),
        (8, "Beurre Doux", 450, 7, "kg", METRO),
    ]
    return [
        Product.create(
            id=product_id,
            name=name,
            price_in_cents=cents,
            stock=stock,
            unit=unit,
            supplier_id=supplier_id,
            sku=f"SKU-{product_id:04d}",
        )
        for product_id, name, cents, stock, unit, supplier_id in rows
    ]


def demo_orders(products: list[Product]) -> list[Order]:
    by_id = {p.id: p for p in products}

    def line(product_id: int, quantity: int) -> dict:
        product = by_id[product_id]
        return {
            "product_id": product.id,
            "product_name": product.name.value,
            "quantity": quantity,
            "unit_price_in_cents": product.price.cents,
        }

    def order(order_id: int, supplier_id: int, delivery: date, items: list[dict]) -> Order:
        return Order.create(
            id=order_id,
            tenant_id=DEMO_TENANT_ID,
            site_id=DEMO_SITE_ID,
            supplier_id=supplier_id,
            items=items,
            delivery_date=delivery,
            order_number=f"ORD-2024-{order_id:03d}",
        )

    return [
        order(1, METRO, date(2024, 11, 10), [line(2, 20), line(5, 50), line(8, 15)]).confirm(),
        order(2, RUNGIS, date(2024, 11, 8), [line(1, 6), line(3, 10)]).submit(),
        order(3, TRANSGOURMET, date(2024, 11, 12), [line(4, 24), line(6, 40)]),
        order(4, METRO, date(2024, 11, 3), [line(7, 10), line(8, 10)])
        .confirm()
        .mark_as_delivered(),
    ]


def build_demo_state() -> LocalState:
    products = demo_products()
    return LocalState(
        products=products,
        orders=demo_orders(products),
        suppliers=demo_suppliers(),
    )
