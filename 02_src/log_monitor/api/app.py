"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..app import Application
from ..models import Topic
from .routes import control, dashboard, ingest, observability
from .websocket import ConnectionManager, SnapshotBroadcaster


# Global application instance
_app: Application | None = None


def get_app() -> Application:
    """Get the global application instance."""
    global _app
    if not _app:
        _app = Application()
    return _app


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    if application is None:
        application = get_app()
    manager = ConnectionManager()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        broadcaster = SnapshotBroadcaster(manager, application.session.snapshot)
        application.event_bus.subscribe(
            Topic.EVENT_ACCEPTED, broadcaster.handle_bus_message
        )
        await broadcaster.start()
        sim_instance = control.get_sim_instance()
        if sim_instance and hasattr(sim_instance, "set_tracker"):
            sim_instance.set_tracker(application.diagnostics)
        yield
        if sim_instance:
            await sim_instance.stop()
        await broadcaster.stop()
        await application.stop()

    fastapi_app = FastAPI(
        title="Log Monitor API",
        description="Live action-lifecycle log dashboard",
        version="0.1.0",
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],  # Next.js dev server
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(dashboard.create_dashboard_router(application, manager))
    fastapi_app.include_router(ingest.create_ingest_router(application))
    fastapi_app.include_router(observability.create_observability_router(application))
    fastapi_app.include_router(control.create_control_router(application))

    return fastapi_app
