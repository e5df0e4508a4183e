"""Asynchronous tasks for the core module."""

import structlog
from celery import shared_task

logger = structlog.get_logger(__name__)


@shared_task(name="core.relay_event", ignore_result=True)
def relay_event(channel, message):
    """Broker-side receiver for published events."""
    logger.info(
        "event.received",
        channel=channel,
        event_type=message.get("eventType"),
    )
    return {"channel": channel, "eventType": message.get("eventType")}
