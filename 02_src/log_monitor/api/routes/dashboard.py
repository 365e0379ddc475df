"""Dashboard API routes."""

from fastapi import APIRouter, Query, WebSocket

from ...app import IApplication
from ...config import DEFAULT_RECENT_LIMIT
from ...metrics import compute
from ..schemas import (
    LogEntryResponse,
    MetricsResponse,
    SnapshotResponse,
    log_entry,
    metrics_response,
    snapshot_response,
)
from ..websocket import ConnectionManager, dashboard_endpoint


def create_dashboard_router(
    app: IApplication, manager: ConnectionManager
) -> APIRouter:
    """Create dashboard router."""
    router = APIRouter(tags=["dashboard"])

    @router.get("/api/logs", response_model=list[LogEntryResponse])
    async def get_logs(
        limit: int = Query(DEFAULT_RECENT_LIMIT, ge=1, le=1000),
    ) -> list[LogEntryResponse]:
        """Most recent events in arrival order."""
        return [log_entry(e) for e in app.session.buffer.recent(limit)]

    @router.get("/api/open-actions", response_model=list[LogEntryResponse])
    async def get_open_actions() -> list[LogEntryResponse]:
        """Start events of actions still in flight."""
        return [log_entry(e) for e in app.session.tracker.open_actions()]

    @router.get("/api/metrics", response_model=MetricsResponse)
    async def get_metrics() -> MetricsResponse:
        """Summary metrics over the current window."""
        return metrics_response(compute(app.session.buffer.snapshot()))

    @router.get("/api/snapshot", response_model=SnapshotResponse)
    async def get_snapshot(
        limit: int = Query(DEFAULT_RECENT_LIMIT, ge=0, le=1000),
    ) -> SnapshotResponse:
        """Logs, open actions and metrics from a single read of the window."""
        return snapshot_response(app.session.snapshot(recent=limit))

    @router.websocket("/ws/dashboard")
    async def dashboard_ws(websocket: WebSocket) -> None:
        """Push a snapshot on connect and after every accepted event."""
        await dashboard_endpoint(websocket, manager, app.session.snapshot)

    return router
