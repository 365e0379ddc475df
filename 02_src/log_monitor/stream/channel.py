"""Inbound message channels."""

import asyncio
from typing import AsyncIterator, Protocol

import websockets
from websockets.exceptions import ConnectionClosedError, WebSocketException

from ..errors import ChannelError
from ..logging_config import get_logger

logger = get_logger(__name__)

RawMessage = str | bytes


class IChannel(Protocol):
    """A persistent connection delivering one text payload per message."""

    async def connect(self) -> None:
        """Open the connection. Raises ChannelError on failure."""
        ...

    def messages(self) -> AsyncIterator[RawMessage]:
        """Yield inbound payloads in arrival order until the channel closes."""
        ...

    async def close(self) -> None:
        """Release the connection."""
        ...


class WebSocketChannel:
    """Channel reading from a websocket endpoint."""

    def __init__(self, url: str, open_timeout: float = 10.0):
        self._url = url
        self._open_timeout = open_timeout
        self._ws = None

    @property
    def url(self) -> str:
        return self._url

    async def connect(self) -> None:
        """Open the websocket."""
        try:
            self._ws = await websockets.connect(
                self._url, open_timeout=self._open_timeout
            )
        except (OSError, asyncio.TimeoutError, TimeoutError, WebSocketException) as e:
            raise ChannelError(f"Failed to connect to {self._url}: {e}") from e
        logger.info("WebSocket connected to %s", self._url)

    async def messages(self) -> AsyncIterator[RawMessage]:
        """Yield frames until the peer closes the connection."""
        if self._ws is None:
            raise ChannelError("Channel is not connected")

        try:
            async for raw in self._ws:
                yield raw
        except ConnectionClosedError as e:
            raise ChannelError(f"Connection to {self._url} dropped: {e}") from e
        except WebSocketException as e:
            raise ChannelError(f"Protocol error on {self._url}: {e}") from e

    async def close(self) -> None:
        """Close the websocket if open."""
        if self._ws is None:
            return
        ws, self._ws = self._ws, None
        await ws.close()
        logger.info("WebSocket to %s closed", self._url)


class QueueChannel:
    """Channel fed in-process through an asyncio.Queue."""

    _END = object()

    def __init__(self, maxsize: int = 0):
        self._queue: asyncio.Queue = asyncio.Queue(maxsize)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def connect(self) -> None:
        if self._closed:
            raise ChannelError("Channel is closed")

    async def put(self, raw: RawMessage) -> None:
        """Enqueue one inbound payload."""
        if self._closed:
            raise ChannelError("Channel is closed")
        await self._queue.put(raw)

    def end(self) -> None:
        """Make the reader see the peer finish after queued messages."""
        self._queue.put_nowait(self._END)

    def fail(self, reason: str) -> None:
        """Make the reader see a transport failure after queued messages."""
        self._queue.put_nowait(ChannelError(reason))

    async def messages(self) -> AsyncIterator[RawMessage]:
        while True:
            item = await self._queue.get()
            if item is self._END:
                return
            if isinstance(item, ChannelError):
                raise item
            yield item

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(self._END)
