"""Derived metric data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Metrics:
    """Summary statistics over one buffer snapshot.

    Both count mappings iterate in first-seen key order.
    """

    total_requests: int = 0
    average_duration: float = 0.0
    requests_by_method: dict[str, int] = field(default_factory=dict)
    status_distribution: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class DurationPoint:
    """Duration of one completed request, for the duration chart."""

    action_id: str
    route: str | None
    duration: float
