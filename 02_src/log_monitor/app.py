"""Application bootstrap and lifecycle management."""

import asyncio
from typing import Protocol

from .config import resolve_stream_url, resolve_window_size
from .diagnostics import DiagnosticsTracker
from .event_bus import EventBus
from .logging_config import get_logger
from .models import LifecycleEvent
from .stream import IChannel, StreamSession, WebSocketChannel
from .stream.channel import RawMessage

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Discard buffered state."""
        ...

    async def ingest(self, raw: RawMessage) -> LifecycleEvent | None:
        """Feed one raw message into the session."""
        ...

    @property
    def session(self) -> StreamSession:
        """Stream session owning the window and open actions."""
        ...

    @property
    def diagnostics(self) -> DiagnosticsTracker:
        """Diagnostics tracker."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        stream_url: str | None = None,
        window_size: int | None = None,
        channel: IChannel | None = None,
        connect: bool = True,
    ):
        self._stream_url = resolve_stream_url(stream_url)
        self._window_size = resolve_window_size(window_size)
        self._channel = channel
        self._connect = connect

        # Components (will be initialized in start())
        self._event_bus: EventBus | None = None
        self._diagnostics: DiagnosticsTracker | None = None
        self._session: StreamSession | None = None
        self._run_task: asyncio.Task | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. EventBus (no dependencies)
        self._event_bus = EventBus()

        # 2. Diagnostics (depends on EventBus)
        self._diagnostics = DiagnosticsTracker(self._event_bus)
        await self._diagnostics.start()

        # 3. Channel + StreamSession (depends on EventBus)
        if self._channel is None:
            self._channel = WebSocketChannel(self._stream_url)
        self._session = StreamSession(
            self._channel, self._event_bus, capacity=self._window_size
        )
        logger.info("StreamSession initialized (window=%d)", self._window_size)

        # 4. Consume the channel in the background
        if self._connect:
            self._run_task = asyncio.create_task(self._session.run())
            logger.info("Consuming stream from %s", self._stream_url)

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._run_task:
            self._run_task.cancel()
            try:
                await self._run_task
            except asyncio.CancelledError:
                pass
            self._run_task = None
        if self._session:
            await self._session.close()
            logger.info("StreamSession closed")
        if self._diagnostics:
            await self._diagnostics.stop()

    async def reset(self) -> None:
        """Discard buffered events, open actions and diagnostics."""
        if self._session:
            self._session.reset()
        if self._diagnostics:
            self._diagnostics.clear()
        logger.info("Reset complete")

    async def ingest(self, raw: RawMessage) -> LifecycleEvent | None:
        """
        Feed one raw message into the session.

        Raises:
            DecodeError: The message is not a valid lifecycle event
        """
        return await self.session.ingest(raw)

    @property
    def session(self) -> StreamSession:
        """Get stream session instance."""
        if not self._session:
            raise RuntimeError("Application not started")
        return self._session

    @property
    def diagnostics(self) -> DiagnosticsTracker:
        """Get diagnostics tracker instance."""
        if not self._diagnostics:
            raise RuntimeError("Application not started")
        return self._diagnostics

    @property
    def event_bus(self) -> EventBus:
        """Get event bus instance."""
        if not self._event_bus:
            raise RuntimeError("Application not started")
        return self._event_bus
