"""Observability API routes."""

from datetime import datetime
from typing import Any

from fastapi import APIRouter, Query
from pydantic import BaseModel

from ...app import IApplication
from ..schemas import CamelModel, CountersResponse


class TraceEventResponse(BaseModel):
    """Response model for trace event."""

    id: str
    event_type: str
    actor: str
    data: dict[str, Any]
    timestamp: datetime


class StatusResponse(CamelModel):
    """Response model for session status."""

    status: str
    last_error: str | None
    buffered: int
    open_actions: int
    counters: CountersResponse


def create_observability_router(app: IApplication) -> APIRouter:
    """Create observability router."""
    router = APIRouter(prefix="/api", tags=["observability"])

    @router.get("/status", response_model=StatusResponse)
    async def get_status() -> dict:
        """Channel status and ingestion counters."""
        session = app.session
        counters = session.counters
        return {
            "status": session.status.value,
            "last_error": session.last_error,
            "buffered": len(session.buffer),
            "open_actions": len(session.tracker),
            "counters": CountersResponse(
                accepted=counters.accepted,
                decode_failures=counters.decode_failures,
                orphan_terminals=counters.correlation.orphan_terminals,
                duplicate_starts=counters.correlation.duplicate_starts,
            ),
        }

    @router.get("/trace-events", response_model=list[TraceEventResponse])
    async def get_trace_events(
        limit: int = Query(100, ge=1, le=1000),
        event_type: str | None = Query(None, description="Filter by event type"),
    ) -> list[dict]:
        """Get recent diagnostic events with optional filters."""
        event_types = [event_type] if event_type else None
        events = app.diagnostics.get_trace_events(
            event_types=event_types, limit=limit
        )
        return [
            {
                "id": e.id,
                "event_type": e.event_type,
                "actor": e.actor,
                "data": e.data,
                "timestamp": e.timestamp.isoformat(),
            }
            for e in events
        ]

    return router
