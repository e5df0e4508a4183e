"""Event publisher implementations.

``LoggingEventPublisher`` is the default: it performs no network I/O and
only records what would have been sent.  ``CeleryEventPublisher`` hands
messages to the Celery broker.  Both share ``BaseEventPublisher.publish``,
which absorbs every failure so that publishing never affects the caller.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Mapping

import structlog
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.utils.module_loading import import_string

from shared.domain.bus import IEventPublisher
from shared.domain.events import DomainEvent

logger = structlog.get_logger(__name__)

PRODUCT_EVENTS_CHANNEL = "product_events"


class BaseEventPublisher(ABC):
    """Best-effort publisher template."""

    def publish(self, channel: str, message: Mapping[str, Any]) -> None:
        try:
            self._send(channel, message)
        except Exception:
            logger.exception("event.publish_failed", channel=channel)

    def publish_product_event(self, event_type: str, data: Mapping[str, Any]) -> None:
        try:
            event = DomainEvent(event_type=event_type, data=data)
            logger.info(
                "event.product_event_triggered",
                event_type=event_type,
                event_id=str(event.event_id),
                occurred_on=event.occurred_on.isoformat(),
            )
            message = event.to_message()
        except Exception:
            logger.exception("event.build_failed", event_type=event_type)
            return
        self.publish(PRODUCT_EVENTS_CHANNEL, message)

    @abstractmethod
    def _send(self, channel: str, message: Mapping[str, Any]) -> None:
        """Deliver ``message``; may raise, ``publish`` handles it."""


class LoggingEventPublisher(BaseEventPublisher):
    """Log-only stand-in for a message broker."""

    def __init__(self) -> None:
        logger.info("event_publisher.initialized", mode="log_only")

    def _send(self, channel: str, message: Mapping[str, Any]) -> None:
        body = json.dumps(message, cls=DjangoJSONEncoder)
        logger.info("event.published", channel=channel, message=body)


class CeleryEventPublisher(BaseEventPublisher):
    """Dispatch messages through Celery to a queue named after the channel."""

    def __init__(self) -> None:
        logger.info("event_publisher.initialized", mode="celery")

    def _send(self, channel: str, message: Mapping[str, Any]) -> None:
        from modules.core.tasks import relay_event

        result = relay_event.apply_async(args=[channel, dict(message)], queue=channel)
        logger.info("event.dispatched", channel=channel, task_id=result.id)


@lru_cache(maxsize=None)
def get_event_publisher() -> IEventPublisher:
    """Return the process-wide publisher named by ``EVENT_PUBLISHER_CLASS``."""
    publisher_class = import_string(settings.EVENT_PUBLISHER_CLASS)
    return publisher_class()
