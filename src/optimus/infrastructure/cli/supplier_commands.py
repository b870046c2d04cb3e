"""CLI commands for the Supplier aggregate."""

from __future__ import annotations

import click

from optimus.application.manage_supplier import (
    ApproveSupplierHandler,
    DeactivateSupplierHandler,
    ListSuppliersHandler,
    ReactivateSupplierHandler,
)
from optimus.domain.exceptions import DomainError
from optimus.infrastructure.bootstrap import local_state
from optimus.infrastructure.cli.common import display_suppliers, domain_failure


@click.command("list")
@click.option("--eligible", is_flag=True, default=False, help="Only suppliers that can receive orders.")
def supplier_list(eligible: bool) -> None:
    """List suppliers."""
    display_suppliers(ListSuppliersHandler(local_state()).handle(eligible_only=eligible))


@click.command("approve")
@click.option("--id", "supplier_id", required=True, type=int, help="Supplier ID.")
def supplier_approve(supplier_id: int) -> None:
    """Approve a supplier."""
    try:
        dto = ApproveSupplierHandler(local_state()).handle(supplier_id)
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Supplier '{dto.name}' approved.")


@click.command("deactivate")
@click.option("--id", "supplier_id", required=True, type=int, help="Supplier ID.")
def supplier_deactivate(supplier_id: int) -> None:
    """Deactivate a supplier (no new orders)."""
    try:
        dto = DeactivateSupplierHandler(local_state()).handle(supplier_id)
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Supplier '{dto.name}' deactivated.")


@click.command("reactivate")
@click.option("--id", "supplier_id", required=True, type=int, help="Supplier ID.")
def supplier_reactivate(supplier_id: int) -> None:
    """Reactivate a supplier."""
    try:
        dto = ReactivateSupplierHandler(local_state()).handle(supplier_id)
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Supplier '{dto.name}' reactivated.")
