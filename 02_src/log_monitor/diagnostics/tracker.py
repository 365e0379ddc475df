"""Diagnostics tracker recording TraceEvents about the pipeline."""

import uuid
from collections import deque
from datetime import datetime, timezone
from typing import Protocol

from ..config import DEFAULT_TRACE_LIMIT
from ..event_bus import IEventBus
from ..models import BusMessage, TraceEvent, Topic


class IDiagnosticsTracker(Protocol):
    """Creating TraceEvents. Two channels: EventBus subscription + direct calls."""

    async def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create a TraceEvent and keep it."""
        ...

    def get_trace_events(
        self, event_types: list[str] | None = None, limit: int = 100
    ) -> list[TraceEvent]:
        """Most recent trace events, oldest first."""
        ...


class DiagnosticsTracker:
    """Keeps a bounded history of decode failures and channel status changes."""

    def __init__(self, event_bus: IEventBus, limit: int = DEFAULT_TRACE_LIMIT):
        self._event_bus = event_bus
        self._events: deque[TraceEvent] = deque(maxlen=limit)

    async def start(self) -> None:
        """Subscribe to diagnostic topics."""
        self._event_bus.subscribe(Topic.DECODE_FAILED, self._handle_bus_message)
        self._event_bus.subscribe(Topic.CHANNEL_STATUS, self._handle_bus_message)

    async def stop(self) -> None:
        """Unsubscribe from diagnostic topics."""
        self._event_bus.unsubscribe(Topic.DECODE_FAILED, self._handle_bus_message)
        self._event_bus.unsubscribe(Topic.CHANNEL_STATUS, self._handle_bus_message)

    async def _handle_bus_message(self, bus_message: BusMessage) -> None:
        await self.track(
            event_type=bus_message.topic.value,
            actor=bus_message.source,
            data=dict(bus_message.payload),
        )

    async def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create a TraceEvent and keep it."""
        self._events.append(
            TraceEvent(
                id=str(uuid.uuid4()),
                event_type=event_type,
                actor=actor,
                data=data,
                timestamp=datetime.now(timezone.utc),
            )
        )

    def get_trace_events(
        self, event_types: list[str] | None = None, limit: int = 100
    ) -> list[TraceEvent]:
        """Most recent trace events, oldest first."""
        events = [
            e for e in self._events if not event_types or e.event_type in event_types
        ]
        return events[-limit:] if limit > 0 else []

    def clear(self) -> None:
        self._events.clear()
