"""EventPublisher that writes every event to the ``optimus.events`` logger."""

from __future__ import annotations

import logging

from optimus.domain.events.base import DomainEvent
from optimus.domain.events.publisher import EventPublisher

logger = logging.getLogger("optimus.events")


class LoggingEventPublisher(EventPublisher):

    def publish(self, event: DomainEvent) -> None:
        logger.info(
            "%s (event_id: %s) %s", event.event_type, event.event_id, event.payload
        )
