"""Identity semantics shared by all entities.

Entities are frozen dataclasses declared with ``eq=False`` so that the
identity-based ``__eq__``/``__hash__`` below are used instead of
field-by-field comparison.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from datetime import datetime, timezone
from typing import Any, TypeVar

E = TypeVar("E", bound="Entity")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Entity:
    """Base for objects compared by ``id`` rather than by value."""

    id: int

    @classmethod
    def rehydrate(cls: type[E], props: Mapping[str, Any]) -> E:
        """Rebuild an entity from previously valid data.

        Trust boundary: nothing is validated or defaulted, the mapping
        must hold exactly the entity's fields.
        """
        expected = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        given = set(props)
        if given != expected:
            raise TypeError(
                f"{cls.__name__}.rehydrate() expects exactly {sorted(expected)}; "
                f"missing {sorted(expected - given)}, unexpected {sorted(given - expected)}"
            )
        return cls(**props)

    def equals(self, other: Entity) -> bool:
        return self == other

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))
