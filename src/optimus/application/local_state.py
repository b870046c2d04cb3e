"""In-memory snapshots of the entities a front-end is working with.

This is not a persistence layer: it only keeps the latest snapshot of
each entity for the lifetime of the process, the way a UI keeps its
local state. Handlers read a snapshot, call a transition on it and put
the returned entity back.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from optimus.domain.exceptions import EntityNotFoundError
from optimus.domain.model.entity import Entity
from optimus.domain.model.order import Order
from optimus.domain.model.product import Product
from optimus.domain.model.supplier import Supplier

E = TypeVar("E", bound=Entity)


class EntityCollection(Generic[E]):

    def __init__(self, label: str, entities: Iterable[E] = ()) -> None:
        self._label = label
        self._store: dict[int, E] = {}
        for entity in entities:
            self.save(entity)

    def get(self, entity_id: int) -> E:
        """Return the entity with *entity_id*; raise EntityNotFoundError otherwise."""
        entity = self._store.get(entity_id)
        if entity is None:
            raise EntityNotFoundError(self._label, entity_id)
        return entity

    def find(self, entity_id: int) -> E | None:
        return self._store.get(entity_id)

    def all(self) -> list[E]:
        return [self._store[key] for key in sorted(self._store)]

    def save(self, entity: E) -> None:
        self._store[entity.id] = entity

    def next_id(self) -> int:
        return max(self._store, default=0) + 1

    def __len__(self) -> int:
        return len(self._store)


class LocalState:

    def __init__(
        self,
        products: Iterable[Product] = (),
        orders: Iterable[Order] = (),
        suppliers: Iterable[Supplier] = (),
    ) -> None:
        self.products: EntityCollection[Product] = EntityCollection("Product", products)
        self.orders: EntityCollection[Order] = EntityCollection("Order", orders)
        self.suppliers: EntityCollection[Supplier] = EntityCollection("Supplier", suppliers)

    def supplier_name(self, supplier_id: int) -> str:
        supplier = self.suppliers.find(supplier_id)
        return supplier.name if supplier is not None else f"Supplier #{supplier_id}"
