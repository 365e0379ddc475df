"""Log Monitor core module."""

from .actions import OpenActionTracker
from .app import Application, IApplication
from .buffer import RollingLogBuffer
from .decoder import decode
from .diagnostics import DiagnosticsTracker, IDiagnosticsTracker
from .errors import ChannelError, DecodeError, LogMonitorError
from .event_bus import EventBus, IEventBus
from .metrics import compute, duration_series
from .models import (
    BusMessage,
    CorrelationStats,
    DashboardSnapshot,
    DurationPoint,
    LifecycleAction,
    LifecycleEvent,
    Metrics,
    SessionCounters,
    SessionStatus,
    Topic,
    TraceEvent,
)
from .stream import IChannel, QueueChannel, StreamSession, WebSocketChannel

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "LifecycleAction",
    "LifecycleEvent",
    "Metrics",
    "DurationPoint",
    "SessionStatus",
    "CorrelationStats",
    "SessionCounters",
    "DashboardSnapshot",
    "BusMessage",
    "Topic",
    "TraceEvent",
    # Errors
    "LogMonitorError",
    "DecodeError",
    "ChannelError",
    # Components
    "decode",
    "RollingLogBuffer",
    "OpenActionTracker",
    "compute",
    "duration_series",
    "IEventBus",
    "EventBus",
    "IDiagnosticsTracker",
    "DiagnosticsTracker",
    "IChannel",
    "QueueChannel",
    "WebSocketChannel",
    "StreamSession",
]
