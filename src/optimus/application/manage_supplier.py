"""Application services: supplier approval and activation use cases."""

from __future__ import annotations

from optimus.application.dto import SupplierDTO
from optimus.application.local_state import LocalState
from optimus.application.mapping import supplier_to_dto


class ApproveSupplierHandler:

    def __init__(self, state: LocalState) -> None:
        self._state = state

    def handle(self, supplier_id: int) -> SupplierDTO:
        supplier = self._state.suppliers.get(supplier_id).approve()
        self._state.suppliers.save(supplier)
        return supplier_to_dto(supplier)


class DeactivateSupplierHandler:

    def __init__(self, state: LocalState) -> None:
        self._state = state

    def handle(self, supplier_id: int) -> SupplierDTO:
        """Stop sending orders to a supplier; approval is kept."""
        supplier = self._state.suppliers.get(supplier_id).deactivate()
        self._state.suppliers.save(supplier)
        return supplier_to_dto(supplier)


class ReactivateSupplierHandler:

    def __init__(self, state: LocalState) -> None:
        self._state = state

    def handle(self, supplier_id: int) -> SupplierDTO:
        supplier = self._state.suppliers.get(supplier_id).reactivate()
        self._state.suppliers.save(supplier)
        return supplier_to_dto(supplier)


class ListSuppliersHandler:

    def __init__(self, state: LocalState) -> None:
        self._state = state

    def handle(self, eligible_only: bool = False) -> list[SupplierDTO]:
        return [
            supplier_to_dto(s)
            for s in self._state.suppliers.all()
            if not eligible_only or s.can_receive_orders()
        ]
