"""Metrics derived from a buffer snapshot."""

from typing import Iterable

from ..models import DurationPoint, LifecycleEvent, Metrics


def relevant_events(events: Iterable[LifecycleEvent]) -> list[LifecycleEvent]:
    """Terminal events, in input order."""
    return [event for event in events if event.is_terminal]


def compute(events: Iterable[LifecycleEvent]) -> Metrics:
    """
    Compute summary metrics over a sequence of events.

    Volume and duration figures use terminal events only. The method and
    status breakdowns use every event; events without a status code are
    left out of the status breakdown.

    Args:
        events: Buffer snapshot, oldest first

    Returns:
        Metrics for the snapshot
    """
    events = tuple(events)
    relevant = relevant_events(events)

    total = len(relevant)
    average = sum(event.duration for event in relevant) / total if total else 0.0

    by_method: dict[str, int] = {}
    by_status: dict[str, int] = {}
    for event in events:
        by_method[event.method] = by_method.get(event.method, 0) + 1
        if event.status_code is not None:
            key = str(event.status_code)
            by_status[key] = by_status.get(key, 0) + 1

    return Metrics(
        total_requests=total,
        average_duration=average,
        requests_by_method=by_method,
        status_distribution=by_status,
    )


def duration_series(events: Iterable[LifecycleEvent]) -> list[DurationPoint]:
    """Duration of each completed request, in input order."""
    return [
        DurationPoint(
            action_id=event.action_id,
            route=event.route,
            duration=event.duration,
        )
        for event in relevant_events(events)
    ]
