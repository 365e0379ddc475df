"""Core data models for Log Monitor."""

from .bus import BusMessage, Topic
from .events import ANONYMOUS_SESSION, LifecycleAction, LifecycleEvent
from .metrics import DurationPoint, Metrics
from .session import (
    CorrelationStats,
    DashboardSnapshot,
    SessionCounters,
    SessionStatus,
)
from .tracing import TraceEvent

__all__ = [
    # Events
    "ANONYMOUS_SESSION",
    "LifecycleAction",
    "LifecycleEvent",
    # Metrics
    "Metrics",
    "DurationPoint",
    # Session
    "SessionStatus",
    "CorrelationStats",
    "SessionCounters",
    "DashboardSnapshot",
    # Bus
    "BusMessage",
    "Topic",
    # Tracing
    "TraceEvent",
]
