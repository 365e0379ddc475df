"""Fixed-capacity rolling window of recent events."""

from collections import deque
from itertools import islice

from ..config import DEFAULT_WINDOW_SIZE
from ..models import LifecycleEvent


class RollingLogBuffer:
    """Most recent events in arrival order; the oldest is evicted on overflow."""

    def __init__(self, capacity: int = DEFAULT_WINDOW_SIZE):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._events: deque[LifecycleEvent] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._events.maxlen

    def __len__(self) -> int:
        return len(self._events)

    def append(self, event: LifecycleEvent) -> None:
        """Add an event at the tail, dropping the head when full."""
        self._events.append(event)

    def snapshot(self) -> tuple[LifecycleEvent, ...]:
        """Immutable copy of the whole window, oldest first."""
        return tuple(self._events)

    def recent(self, k: int) -> list[LifecycleEvent]:
        """Last k events in arrival order."""
        if k <= 0:
            return []
        newest_first = list(islice(reversed(self._events), k))
        newest_first.reverse()
        return newest_first

    def clear(self) -> None:
        """Drop all events (session teardown only)."""
        self._events.clear()
