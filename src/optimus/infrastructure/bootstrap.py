"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from optimus.application.local_state import LocalState
from optimus.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    DEFAULT_LOW_STOCK_THRESHOLD,
)
from optimus.infrastructure.logging_publisher import LoggingEventPublisher
from optimus.infrastructure.mock_data import build_demo_state

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Runtime options, filled from CLI flags or OPTIMUS_* env vars."""

    locale: str = DEFAULT_LOCALE
    currency: str = DEFAULT_CURRENCY
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    log_level: str = "WARNING"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def local_state() -> LocalState:
    return build_demo_state()


def event_publisher() -> LoggingEventPublisher:
    return LoggingEventPublisher()
