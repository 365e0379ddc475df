"""WebSocket push of dashboard snapshots."""

import asyncio
import json
from typing import Callable

from fastapi import WebSocket, WebSocketDisconnect

from ..logging_config import get_logger
from ..models import BusMessage, DashboardSnapshot
from .schemas import snapshot_response

logger = get_logger(__name__)


class ConnectionManager:
    """Manage dashboard WebSocket clients."""

    def __init__(self) -> None:
        self._active_connections: list[WebSocket] = []
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket) -> None:
        """Accept and register a new connection."""
        await websocket.accept()
        async with self._lock:
            self._active_connections.append(websocket)
        logger.info(
            "Dashboard client connected. Total connections: %d",
            len(self._active_connections),
        )

    async def disconnect(self, websocket: WebSocket) -> None:
        """Remove a connection."""
        async with self._lock:
            if websocket in self._active_connections:
                self._active_connections.remove(websocket)
        logger.info(
            "Dashboard client disconnected. Total connections: %d",
            len(self._active_connections),
        )

    async def broadcast(self, data: str) -> None:
        """Send a text frame to all connected clients."""
        disconnected: list[WebSocket] = []

        async with self._lock:
            for connection in self._active_connections:
                try:
                    await connection.send_text(data)
                except Exception as e:
                    logger.warning("Failed to send to dashboard client: %s", e)
                    disconnected.append(connection)

            for conn in disconnected:
                if conn in self._active_connections:
                    self._active_connections.remove(conn)

    @property
    def connection_count(self) -> int:
        """Number of active connections."""
        return len(self._active_connections)


def encode_snapshot(snapshot: DashboardSnapshot) -> str:
    """Serialize a snapshot in the same shape as GET /api/snapshot."""
    return json.dumps(snapshot_response(snapshot).model_dump(by_alias=True))


class SnapshotBroadcaster:
    """
    Pushes a fresh snapshot to dashboard clients after accepted events.

    The bus handler only marks the view dirty. Sending happens in a
    background task, so slow clients never hold up ingestion; events that
    arrive while a push is in flight are coalesced into the next one.
    """

    def __init__(
        self,
        manager: ConnectionManager,
        snapshot_provider: Callable[[], DashboardSnapshot],
    ):
        self._manager = manager
        self._snapshot_provider = snapshot_provider
        self._dirty = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the push loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Stop the push loop."""
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

    async def handle_bus_message(self, bus_message: BusMessage) -> None:
        self._dirty.set()

    async def _run(self) -> None:
        while True:
            await self._dirty.wait()
            self._dirty.clear()
            if not self._manager.connection_count:
                continue
            try:
                await self._manager.broadcast(
                    encode_snapshot(self._snapshot_provider())
                )
            except Exception as e:
                logger.error("Snapshot push failed: %s", e)


async def dashboard_endpoint(
    websocket: WebSocket,
    manager: ConnectionManager,
    snapshot_provider: Callable[[], DashboardSnapshot],
) -> None:
    """Send the current snapshot, then keep the client registered until it leaves."""
    await manager.connect(websocket)
    try:
        await websocket.send_text(encode_snapshot(snapshot_provider()))
        while True:
            # Clients do not send anything meaningful; this detects disconnects
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        await manager.disconnect(websocket)
