"""Response models shared by the API routes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..models import DashboardSnapshot, DurationPoint, LifecycleEvent, Metrics


class CamelModel(BaseModel):
    """Base for responses serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LogEntryResponse(CamelModel):
    """Display form of one lifecycle event."""

    action: str
    action_id: str
    short_id: str
    user_id: str
    session: str
    method: str
    ip: str | None = None
    route: str | None = None
    status_code: int | None = None
    duration: float
    time: str | None = None


class MetricsResponse(CamelModel):
    total_requests: int
    average_duration: float
    requests_by_method: dict[str, int]
    status_distribution: dict[str, int]


class DurationPointResponse(CamelModel):
    action_id: str
    route: str | None = None
    duration: float


class CountersResponse(CamelModel):
    accepted: int
    decode_failures: int
    orphan_terminals: int
    duplicate_starts: int


class SnapshotResponse(CamelModel):
    """Everything the dashboard renders, from one consistent read."""

    status: str
    logs: list[LogEntryResponse]
    open_actions: list[LogEntryResponse]
    metrics: MetricsResponse
    durations: list[DurationPointResponse]
    counters: CountersResponse
    window_size: int
    last_error: str | None = None


def log_entry(event: LifecycleEvent) -> LogEntryResponse:
    return LogEntryResponse(
        action=event.action.value,
        action_id=event.action_id,
        short_id=event.short_id,
        user_id=event.user_id,
        session=event.display_session,
        method=event.method,
        ip=event.ip,
        route=event.route,
        status_code=event.status_code,
        duration=event.duration,
        time=event.time,
    )


def metrics_response(metrics: Metrics) -> MetricsResponse:
    return MetricsResponse(
        total_requests=metrics.total_requests,
        average_duration=metrics.average_duration,
        requests_by_method=metrics.requests_by_method,
        status_distribution=metrics.status_distribution,
    )


def duration_point(point: DurationPoint) -> DurationPointResponse:
    return DurationPointResponse(
        action_id=point.action_id, route=point.route, duration=point.duration
    )


def snapshot_response(snapshot: DashboardSnapshot) -> SnapshotResponse:
    counters = snapshot.counters
    return SnapshotResponse(
        status=snapshot.status.value,
        logs=[log_entry(e) for e in snapshot.recent_logs],
        open_actions=[log_entry(e) for e in snapshot.open_actions],
        metrics=metrics_response(snapshot.metrics),
        durations=[duration_point(p) for p in snapshot.durations],
        counters=CountersResponse(
            accepted=counters.accepted,
            decode_failures=counters.decode_failures,
            orphan_terminals=counters.correlation.orphan_terminals,
            duplicate_starts=counters.correlation.duplicate_starts,
        ),
        window_size=snapshot.window_size,
        last_error=snapshot.last_error,
    )
