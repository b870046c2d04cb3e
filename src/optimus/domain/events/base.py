"""Base for domain events.

An event is an immutable record of something that already happened.
The domain only builds events; handing them to interested parties is
the job of an ``EventPublisher``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, ClassVar
from uuid import uuid4

from optimus.domain.model.entity import utcnow

_ENVELOPE_FIELDS = frozenset({"event_id", "occurred_at"})


@dataclass(frozen=True)
class DomainEvent:
    """Envelope shared by every event: id, timestamp and type tag.

    Subclasses declare their payload as regular dataclass fields and set
    ``event_type``.
    """

    event_type: ClassVar[str] = "DomainEvent"

    event_id: str = field(default_factory=lambda: str(uuid4()), kw_only=True)
    occurred_at: datetime = field(default_factory=utcnow, kw_only=True)

    @property
    def payload(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in _ENVELOPE_FIELDS
        }
