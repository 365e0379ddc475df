"""Correlation of start events with their terminal events."""

from ..logging_config import get_logger
from ..models import CorrelationStats, LifecycleEvent

logger = get_logger(__name__)


class OpenActionTracker:
    """
    Actions whose start has been seen but whose terminal event has not.

    Per action id the state is either absent or open:
    - START on an absent id opens it.
    - START on an open id replaces the stored event (last start wins) and
      keeps the id's position in open_actions().
    - FINISHED/ERROR on an open id removes it.
    - FINISHED/ERROR on an absent id is ignored (orphan terminal).

    Anomalies are counted, never raised.
    """

    def __init__(self):
        self._open: dict[str, LifecycleEvent] = {}
        self._orphan_terminals = 0
        self._duplicate_starts = 0

    def __len__(self) -> int:
        return len(self._open)

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._open

    def is_open(self, action_id: str) -> bool:
        """Check whether an action is currently in flight."""
        return action_id in self._open

    def on_start(self, event: LifecycleEvent) -> None:
        """Open the event's action."""
        if event.action_id in self._open:
            self._duplicate_starts += 1
            logger.debug("Duplicate start for open action %s", event.action_id)
        self._open[event.action_id] = event

    def on_terminal(self, event: LifecycleEvent) -> None:
        """Close the event's action if it is open."""
        if self._open.pop(event.action_id, None) is None:
            self._orphan_terminals += 1
            logger.debug(
                "Terminal %s for unknown action %s",
                event.action.value,
                event.action_id,
            )

    def apply(self, event: LifecycleEvent) -> None:
        """Route an event to on_start or on_terminal."""
        if event.is_terminal:
            self.on_terminal(event)
        else:
            self.on_start(event)

    def open_actions(self) -> list[LifecycleEvent]:
        """Start events of open actions, in the order they were opened."""
        return list(self._open.values())

    @property
    def stats(self) -> CorrelationStats:
        return CorrelationStats(
            orphan_terminals=self._orphan_terminals,
            duplicate_starts=self._duplicate_starts,
        )

    def clear(self) -> None:
        """Forget all open actions and counters."""
        self._open.clear()
        self._orphan_terminals = 0
        self._duplicate_starts = 0
