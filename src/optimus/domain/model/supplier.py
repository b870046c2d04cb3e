"""Supplier aggregate.

A supplier can only receive orders once it is both active and approved.
Approval is a deliberate step: new suppliers always start unapproved.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from optimus.domain.model.entity import Entity, utcnow


@dataclass(frozen=True, eq=False)
class Supplier(Entity):

    id: int
    name: str
    email: str | None
    phone: str | None
    address: str | None
    is_active: bool
    is_approved: bool
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def create(
        id: int,
        name: str,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Supplier:
        now = utcnow()
        return Supplier(
            id=id,
            name=name,
            email=email,
            phone=phone,
            address=address,
            is_active=True,
            is_approved=False,  # approval cannot be granted at creation
            created_at=now,
            updated_at=now,
        )

    def approve(self) -> Supplier:
        return replace(self, is_approved=True, updated_at=utcnow())

    def deactivate(self) -> Supplier:
        return replace(self, is_active=False, updated_at=utcnow())

    def reactivate(self) -> Supplier:
        return replace(self, is_active=True, updated_at=utcnow())

    def can_receive_orders(self) -> bool:
        return self.is_active and self.is_approved
