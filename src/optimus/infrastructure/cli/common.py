"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import logging

import click

from optimus.application.dto import OrderDTO, ProductDTO, SupplierDTO
from optimus.domain.exceptions import DomainError

logger = logging.getLogger("optimus.cli")


def domain_failure(exc: DomainError) -> click.ClickException:
    """Translate a domain error into a CLI error (exit code 1)."""
    logger.debug("Command rejected: %s %s", exc.code, exc.details)
    return click.ClickException(f"[{exc.code}] {exc.message}")


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<4} {'Name':<30} {'Price':>12} {'Stock':>8}  {'Unit':<6}")
    click.echo("-" * 64)
    for p in products:
        flag = "  LOW" if p.is_low_stock else ""
        click.echo(
            f"{p.id:<4} {p.name:<30} {p.price:>12} {p.stock:>8}  {p.unit:<6}{flag}"
        )


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.order_number} #{dto.id}  (status={dto.status})")
    click.echo(f"Supplier: {dto.supplier_name}")
    click.echo(f"Delivery: {dto.delivery_date}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(f"  {'Product':<30} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*62}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<30} {item.quantity:>5} "
            f"{item.unit_price:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Order Total':<37} {dto.total:>25}")


def display_orders(orders: list[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<4} {'Number':<20} {'Supplier':<22} {'Status':<10} {'Total':>12}")
    click.echo("-" * 72)
    for o in orders:
        click.echo(
            f"{o.id:<4} {o.order_number:<20} {o.supplier_name:<22} {o.status:<10} {o.total:>12}"
        )


def display_suppliers(suppliers: list[SupplierDTO]) -> None:
    if not suppliers:
        click.echo("No suppliers found.")
        return

    click.echo(f"{'ID':<4} {'Name':<24} {'Active':<7} {'Approved':<9} {'Email'}")
    click.echo("-" * 72)
    for s in suppliers:
        click.echo(
            f"{s.id:<4} {s.name:<24} {'yes' if s.is_active else 'no':<7} "
            f"{'yes' if s.is_approved else 'no':<9} {s.email or '-'}"
        )
