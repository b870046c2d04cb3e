"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from optimus.application.cancel_order import CancelOrderHandler
from optimus.application.confirm_order import ConfirmOrderHandler
from optimus.application.create_order import CreateOrderHandler
from optimus.application.deliver_order import DeliverOrderHandler
from optimus.application.dto import OrderItemSpec
from optimus.application.show_order import ListOrdersHandler, ShowOrderHandler
from optimus.application.submit_order import SubmitOrderHandler
from optimus.domain.exceptions import DomainError
from optimus.domain.model.order import OrderStatus
from optimus.infrastructure.bootstrap import Settings, event_publisher, local_state
from optimus.infrastructure.cli.common import display_order, display_orders, domain_failure


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (product ID:quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            specs.append(OrderItemSpec(product_id=int(id_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product ID and quantity must be integers."
            )
    return specs


@click.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    default=None,
    help="Only orders in this status.",
)
@click.pass_obj
def order_list(settings: Settings, status: str | None) -> None:
    """List supplier orders."""
    handler = ListOrdersHandler(local_state(), settings.locale)
    wanted = OrderStatus(status.upper()) if status else None
    display_orders(handler.handle(status=wanted))


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(local_state(), settings.locale)

    try:
        dto = handler.handle(order_id)
    except DomainError as exc:
        raise domain_failure(exc)

    display_order(dto)


@click.command("create")
@click.option("--supplier-id", required=True, type=int, help="Supplier to order from.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.option(
    "--delivery-date",
    required=True,
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Expected delivery date (YYYY-MM-DD).",
)
@click.option("--notes", default=None, help="Free-text notes for the supplier.")
@click.option("--tenant-id", type=int, default=1, show_default=True)
@click.option("--site-id", type=int, default=1, show_default=True)
@click.pass_obj
def order_create(
    settings: Settings,
    supplier_id: int,
    items: str,
    delivery_date: datetime,
    notes: str | None,
    tenant_id: int,
    site_id: int,
) -> None:
    """Create a new draft supplier order."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(local_state(), event_publisher(), settings.locale)

    try:
        dto = handler.handle(
            tenant_id=tenant_id,
            site_id=site_id,
            supplier_id=supplier_id,
            item_specs=specs,
            delivery_date=delivery_date.date(),
            notes=notes,
        )
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Order {dto.order_number} created")
    display_order(dto)


@click.command("submit")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to submit.")
@click.pass_obj
def order_submit(settings: Settings, order_id: int) -> None:
    """Send a draft order to the supplier (DRAFT -> PENDING)."""
    handler = SubmitOrderHandler(local_state(), settings.locale)

    try:
        dto = handler.handle(order_id)
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Order {dto.order_number} submitted (status={dto.status}).")


@click.command("confirm")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to confirm.")
@click.pass_obj
def order_confirm(settings: Settings, order_id: int) -> None:
    """Confirm a draft or pending order."""
    handler = ConfirmOrderHandler(local_state(), event_publisher(), settings.locale)

    try:
        dto = handler.handle(order_id)
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Order {dto.order_number} confirmed (status={dto.status}).")


@click.command("deliver")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to mark delivered.")
@click.pass_obj
def order_deliver(settings: Settings, order_id: int) -> None:
    """Mark a confirmed order as delivered (adds items to stock)."""
    handler = DeliverOrderHandler(local_state(), event_publisher(), settings.locale)

    try:
        dto = handler.handle(order_id)
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Order {dto.order_number} delivered — {dto.item_count} line(s) restocked.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(settings: Settings, order_id: int) -> None:
    """Cancel an order that has not been delivered."""
    handler = CancelOrderHandler(local_state(), event_publisher(), settings.locale)

    try:
        dto = handler.handle(order_id)
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Order {dto.order_number} cancelled.")
