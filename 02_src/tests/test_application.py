"""Tests for Application."""

import asyncio

import pytest

from log_monitor.app import Application
from log_monitor.errors import DecodeError
from log_monitor.models import SessionStatus
from log_monitor.stream import QueueChannel, WebSocketChannel


class TestApplicationStart:
    """Tests for Application.start()."""

    @pytest.mark.asyncio
    async def test_start_initializes_components(self, application):
        assert application._event_bus is not None
        assert application._diagnostics is not None
        assert application._session is not None
        assert application._run_task is None

    @pytest.mark.asyncio
    async def test_components_share_event_bus(self, application):
        assert application.session._event_bus is application.event_bus
        assert application.diagnostics._event_bus is application.event_bus

    @pytest.mark.asyncio
    async def test_default_channel_is_websocket(self):
        app = Application(stream_url="ws://127.0.0.1:1/logs", connect=False)
        await app.start()

        assert isinstance(app._channel, WebSocketChannel)
        assert app._channel.url == "ws://127.0.0.1:1/logs"
        await app.stop()

    @pytest.mark.asyncio
    async def test_window_size(self):
        app = Application(channel=QueueChannel(), window_size=10, connect=False)
        await app.start()
        assert app.session.buffer.capacity == 10
        await app.stop()

    def test_not_started(self):
        app = Application(channel=QueueChannel())
        with pytest.raises(RuntimeError):
            app.session


class TestApplicationLifecycle:
    """Tests for consuming, ingest, reset and stop."""

    @pytest.mark.asyncio
    async def test_consumes_channel_in_background(self, raw_event):
        channel = QueueChannel()
        app = Application(channel=channel)
        await app.start()

        await channel.put(raw_event(action_id="A"))
        await asyncio.sleep(0.05)

        assert app.session.status is SessionStatus.CONNECTED
        assert app.session.tracker.is_open("A")

        await app.stop()
        assert app.session.status is SessionStatus.CLOSED

    @pytest.mark.asyncio
    async def test_ingest(self, application, raw_event):
        event = await application.ingest(raw_event(action_id="A"))
        assert event.action_id == "A"
        with pytest.raises(DecodeError):
            await application.ingest("nope")

    @pytest.mark.asyncio
    async def test_decode_failure_traced(self, application):
        with pytest.raises(DecodeError):
            await application.ingest("nope")

        events = application.diagnostics.get_trace_events(
            event_types=["decode_failed"]
        )
        assert len(events) == 1

    @pytest.mark.asyncio
    async def test_reset(self, application, raw_event):
        await application.ingest(raw_event(action_id="A"))
        with pytest.raises(DecodeError):
            await application.ingest("nope")

        await application.reset()

        assert len(application.session.buffer) == 0
        assert len(application.session.tracker) == 0
        assert application.diagnostics.get_trace_events() == []
