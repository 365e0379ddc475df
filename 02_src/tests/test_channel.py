"""Tests for WebSocketChannel."""

import pytest

from log_monitor.errors import ChannelError
from log_monitor.stream import WebSocketChannel


class TestWebSocketChannel:
    """Failure paths of the websocket channel."""

    @pytest.mark.asyncio
    async def test_invalid_uri(self):
        channel = WebSocketChannel("http://not-a-websocket")
        with pytest.raises(ChannelError):
            await channel.connect()

    @pytest.mark.asyncio
    async def test_connection_refused(self):
        channel = WebSocketChannel("ws://127.0.0.1:1/logs", open_timeout=2.0)
        with pytest.raises(ChannelError) as exc_info:
            await channel.connect()
        assert "127.0.0.1:1" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_messages_before_connect(self):
        channel = WebSocketChannel("ws://127.0.0.1:1/logs")
        with pytest.raises(ChannelError):
            async for _ in channel.messages():
                pass

    @pytest.mark.asyncio
    async def test_close_without_connect(self):
        channel = WebSocketChannel("ws://127.0.0.1:1/logs")
        await channel.close()
        assert channel.url == "ws://127.0.0.1:1/logs"

    @pytest.mark.asyncio
    async def test_session_reports_connect_failure(self):
        from log_monitor.models import SessionStatus
        from log_monitor.stream import StreamSession

        session = StreamSession(WebSocketChannel("ws://127.0.0.1:1/logs"))
        await session.run()

        assert session.status is SessionStatus.ERROR
        assert session.last_error
