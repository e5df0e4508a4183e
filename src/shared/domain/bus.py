"""Event publisher interface."""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class IEventPublisher(Protocol):
    """Fire-and-forget publisher: implementations never raise to the caller."""

    def publish(self, channel: str, message: Mapping[str, Any]) -> None: ...

    def publish_product_event(self, event_type: str, data: Mapping[str, Any]) -> None: ...
