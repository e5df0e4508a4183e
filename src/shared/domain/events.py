"""Domain event primitives."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """Immutable event record; ``occurred_on`` is taken at construction."""

    event_type: str
    data: Mapping[str, Any] = field(default_factory=dict)
    event_id: UUID = field(default_factory=uuid4)
    occurred_on: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_message(self) -> Dict[str, Any]:
        """Envelope sent on the wire: ``{eventType, timestamp, data}``."""
        return {
            "eventType": self.event_type,
            "timestamp": self.occurred_on.isoformat(),
            "data": dict(self.data),
        }
