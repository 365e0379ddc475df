"""Stream session state models."""

from dataclasses import dataclass, field
from enum import Enum

from .events import LifecycleEvent
from .metrics import DurationPoint, Metrics


class SessionStatus(str, Enum):
    """Lifecycle of the inbound channel."""

    IDLE = "idle"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERROR = "error"
    DISCONNECTED = "disconnected"
    CLOSED = "closed"


@dataclass(frozen=True)
class CorrelationStats:
    """Counters for tolerated correlation anomalies."""

    orphan_terminals: int = 0
    duplicate_starts: int = 0


@dataclass(frozen=True)
class SessionCounters:
    """Ingestion counters for one session."""

    accepted: int = 0
    decode_failures: int = 0
    correlation: CorrelationStats = field(default_factory=CorrelationStats)


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything the presentation layer needs, derived from one buffer read."""

    status: SessionStatus
    recent_logs: list[LifecycleEvent]
    open_actions: list[LifecycleEvent]
    metrics: Metrics
    durations: list[DurationPoint]
    counters: SessionCounters
    window_size: int
    last_error: str | None = None
