"""Lifecycle event data models."""

from dataclasses import dataclass
from enum import Enum

ANONYMOUS_SESSION = "Anonymous"


class LifecycleAction(str, Enum):
    """Phase of a tracked action."""

    START = "start"
    FINISHED = "finished"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        """True for FINISHED and ERROR."""
        return self is not LifecycleAction.START


@dataclass(frozen=True)
class LifecycleEvent:
    """One phase of one action, as received from the stream."""

    action: LifecycleAction
    action_id: str
    method: str
    duration: float  # milliseconds, 0 for START
    user_id: str = ""
    session: str | None = None
    ip: str | None = None
    route: str | None = None
    status_code: int | None = None
    time: str | None = None

    @property
    def is_terminal(self) -> bool:
        """True if this event closes its action."""
        return self.action.is_terminal

    @property
    def display_session(self) -> str:
        """Session label for display; missing sessions show as anonymous."""
        return self.session or ANONYMOUS_SESSION

    @property
    def short_id(self) -> str:
        """Trailing 12 characters of the action id."""
        return self.action_id[-12:]
