"""Abstract collaborator that receives completed domain events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from optimus.domain.events.base import DomainEvent


class EventPublisher(ABC):

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Hand a single event to subscribers."""

    def publish_all(self, events: Iterable[DomainEvent]) -> None:
        for event in events:
            self.publish(event)
