"""Ingest API routes."""

from fastapi import APIRouter, HTTPException, Request, status

from ...app import IApplication
from ...errors import DecodeError
from ..schemas import CamelModel


class IngestResponse(CamelModel):
    """Response model for an accepted event."""

    status: str
    action_id: str


def create_ingest_router(app: IApplication) -> APIRouter:
    """Create ingest router."""
    router = APIRouter(prefix="/api", tags=["ingest"])

    @router.post(
        "/events",
        response_model=IngestResponse,
        status_code=status.HTTP_202_ACCEPTED,
    )
    async def ingest_event(request: Request) -> dict:
        """Feed one raw lifecycle message, exactly as it would arrive on the stream."""
        raw = await request.body()
        try:
            event = await app.ingest(raw)
        except DecodeError as e:
            raise HTTPException(status_code=422, detail=e.reason)

        if event is None:
            raise HTTPException(status_code=503, detail="Session is closed")
        return {"status": "accepted", "action_id": event.action_id}

    return router
