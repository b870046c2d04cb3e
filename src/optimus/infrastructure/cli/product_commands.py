"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from optimus.application.add_product import AddProductHandler
from optimus.application.reserve_stock import ReserveStockHandler
from optimus.application.restock_product import RestockProductHandler
from optimus.application.show_inventory import ShowInventoryHandler
from optimus.application.update_product import UpdatePriceHandler
from optimus.domain.exceptions import DomainError
from optimus.infrastructure.bootstrap import Settings, event_publisher, local_state
from optimus.infrastructure.cli.common import display_products, domain_failure


@click.command("list")
@click.option("--low-stock", is_flag=True, default=False, help="Only products under the threshold.")
@click.pass_obj
def product_list(settings: Settings, low_stock: bool) -> None:
    """List the products in the catalog."""
    handler = ShowInventoryHandler(
        local_state(), settings.locale, settings.low_stock_threshold
    )
    display_products(handler.handle(low_stock_only=low_stock))


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price in currency units (e.g. 15.99).")
@click.option("--stock", required=True, type=int, help="Initial stock.")
@click.option("--unit", default=None, help="Unit of measure (kg, L, ...).")
@click.option("--sku", default=None, help="Stock keeping unit.")
@click.option("--supplier-id", type=int, default=None, help="Usual supplier.")
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    price: str,
    stock: int,
    unit: str | None,
    sku: str | None,
    supplier_id: int | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        local_state(), event_publisher(), settings.locale, settings.low_stock_threshold
    )

    try:
        dto = handler.handle(
            name=name,
            price=price,
            stock=stock,
            unit=unit,
            sku=sku,
            supplier_id=supplier_id,
            currency=settings.currency,
        )
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price} ({dto.stock} {dto.unit})")


@click.command("reserve")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="Units to take out of stock.")
@click.pass_obj
def product_reserve(settings: Settings, product_id: int, quantity: int) -> None:
    """Take units out of a product's stock."""
    handler = ReserveStockHandler(
        local_state(), event_publisher(), settings.locale, settings.low_stock_threshold
    )

    try:
        dto = handler.handle(product_id, quantity)
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Reserved {quantity} {dto.unit} of '{dto.name}' — {dto.stock} left.")
    if dto.is_low_stock:
        click.echo(f"Warning: '{dto.name}' is low on stock.")


@click.command("restock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="Units received.")
@click.pass_obj
def product_restock(settings: Settings, product_id: int, quantity: int) -> None:
    """Add received units to a product's stock."""
    handler = RestockProductHandler(
        local_state(), event_publisher(), settings.locale, settings.low_stock_threshold
    )

    try:
        dto = handler.handle(product_id, quantity)
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Restocked '{dto.name}' — {dto.stock} {dto.unit} in stock.")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(settings: Settings, product_id: int, price: str) -> None:
    """Update a product's price."""
    handler = UpdatePriceHandler(local_state(), settings.locale, settings.low_stock_threshold)

    try:
        dto = handler.handle(product_id=product_id, new_price=price)
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Product #{dto.id} price updated to {dto.price}")
