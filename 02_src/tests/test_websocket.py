"""Tests for dashboard snapshot push."""

import asyncio
import json

import pytest
import pytest_asyncio

from log_monitor.api.websocket import ConnectionManager, SnapshotBroadcaster
from log_monitor.models import Topic


class SlowClient:
    """Stand-in dashboard socket whose sends take a while."""

    def __init__(self, delay: float = 0.5):
        self.delay = delay
        self.frames: list[str] = []

    async def send_text(self, data: str) -> None:
        await asyncio.sleep(self.delay)
        self.frames.append(data)


@pytest.fixture
def manager():
    return ConnectionManager()


@pytest_asyncio.fixture
async def broadcaster(manager, session, event_bus):
    """Broadcaster wired to the session's bus, as the API lifespan does."""
    broadcaster = SnapshotBroadcaster(manager, session.snapshot)
    event_bus.subscribe(Topic.EVENT_ACCEPTED, broadcaster.handle_bus_message)
    await broadcaster.start()
    yield broadcaster
    await broadcaster.stop()


class TestSnapshotBroadcaster:
    """Tests for SnapshotBroadcaster."""

    @pytest.mark.asyncio
    async def test_slow_client_does_not_block_ingestion(
        self, manager, broadcaster, session, raw_event
    ):
        client = SlowClient(delay=0.5)
        manager._active_connections.append(client)
        loop = asyncio.get_running_loop()

        started = loop.time()
        for i in range(4):
            await session.handle_message(raw_event(action_id=f"A{i}"))
        elapsed = loop.time() - started

        assert elapsed < 0.5
        assert len(session.buffer) == 4

    @pytest.mark.asyncio
    async def test_pushes_latest_snapshot(
        self, manager, broadcaster, session, raw_event
    ):
        client = SlowClient(delay=0.05)
        manager._active_connections.append(client)

        for i in range(3):
            await session.handle_message(raw_event(action_id=f"A{i}"))
        await asyncio.sleep(0.3)

        # Events arriving during a push are coalesced into the next one
        assert 1 <= len(client.frames) <= 3
        latest = json.loads(client.frames[-1])
        assert [a["actionId"] for a in latest["openActions"]] == ["A0", "A1", "A2"]

    @pytest.mark.asyncio
    async def test_no_clients_no_push(self, manager, broadcaster, session, raw_event):
        await session.handle_message(raw_event(action_id="A"))
        await asyncio.sleep(0)

        assert manager.connection_count == 0
        assert broadcaster.running

    @pytest.mark.asyncio
    async def test_stop(self, manager, session, event_bus):
        broadcaster = SnapshotBroadcaster(manager, session.snapshot)
        await broadcaster.start()
        assert broadcaster.running

        await broadcaster.stop()
        assert not broadcaster.running
