"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def make_event():
    """Factory for LifecycleEvents with sensible defaults."""
    from log_monitor.models import LifecycleAction, LifecycleEvent

    def _make(
        action: str = "start",
        action_id: str = "action-1",
        method: str = "GET",
        duration: float = 0,
        **kwargs,
    ) -> LifecycleEvent:
        return LifecycleEvent(
            action=LifecycleAction(action),
            action_id=action_id,
            method=method,
            duration=duration,
            **kwargs,
        )

    return _make


@pytest.fixture
def raw_event():
    """Factory for raw JSON payloads as they arrive on the stream."""

    def _raw(
        action: str = "start",
        action_id: str = "action-1",
        method: str = "GET",
        duration: float = 0,
        **fields,
    ) -> str:
        payload = {
            "action": action,
            "actionId": action_id,
            "userId": "user_001",
            "session": "sess-1",
            "method": method,
            "duration": duration,
        }
        payload.update(fields)
        return json.dumps(payload)

    return _raw


@pytest.fixture
def event_bus():
    """Create EventBus."""
    from log_monitor.event_bus import EventBus

    return EventBus()


@pytest.fixture
def channel():
    """Create an in-process channel."""
    from log_monitor.stream import QueueChannel

    return QueueChannel()


@pytest.fixture
def session(channel, event_bus):
    """Create StreamSession over the queue channel."""
    from log_monitor.stream import StreamSession

    return StreamSession(channel, event_bus)


@pytest_asyncio.fixture
async def diagnostics(event_bus):
    """Create DiagnosticsTracker subscribed to the bus."""
    from log_monitor.diagnostics import DiagnosticsTracker

    tracker = DiagnosticsTracker(event_bus)
    await tracker.start()
    yield tracker
    await tracker.stop()


@pytest_asyncio.fixture
async def application(channel):
    """Create a started Application that does not consume its channel."""
    from log_monitor.app import Application

    app = Application(channel=channel, connect=False)
    await app.start()
    yield app
    await app.stop()
