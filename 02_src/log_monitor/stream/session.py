"""Stream session: feeds inbound messages into the buffer and tracker."""

from typing import Protocol

from ..actions import OpenActionTracker
from ..buffer import RollingLogBuffer
from ..config import DEFAULT_RECENT_LIMIT, DEFAULT_WINDOW_SIZE
from ..decoder import decode
from ..errors import ChannelError, DecodeError
from ..event_bus import IEventBus, make_message
from ..logging_config import get_logger
from ..metrics import compute, duration_series
from ..models import (
    DashboardSnapshot,
    LifecycleEvent,
    SessionCounters,
    SessionStatus,
    Topic,
)
from .channel import IChannel, RawMessage

logger = get_logger(__name__)


class IStreamSession(Protocol):
    """Owns one inbound channel and the state built from it."""

    async def run(self) -> None:
        """Connect and consume messages until the channel ends or fails."""
        ...

    async def ingest(self, raw: RawMessage) -> LifecycleEvent | None:
        """Process one inbound payload, raising DecodeError if it is malformed."""
        ...

    async def handle_message(self, raw: RawMessage) -> LifecycleEvent | None:
        """Process one inbound payload."""
        ...

    def snapshot(self, recent: int = DEFAULT_RECENT_LIMIT) -> DashboardSnapshot:
        """Consistent view for the presentation layer."""
        ...

    async def close(self) -> None:
        """Release the channel and discard state."""
        ...


class StreamSession:
    """
    Single consumer of one inbound channel.

    Messages are processed one at a time in arrival order. Malformed
    messages are counted and dropped; channel failures change the status
    but keep everything already buffered.
    """

    def __init__(
        self,
        channel: IChannel,
        event_bus: IEventBus | None = None,
        capacity: int = DEFAULT_WINDOW_SIZE,
    ):
        self._channel = channel
        self._event_bus = event_bus
        self._buffer = RollingLogBuffer(capacity)
        self._tracker = OpenActionTracker()
        self._status = SessionStatus.IDLE
        self._last_error: str | None = None
        self._accepted = 0
        self._decode_failures = 0
        self._closed = False

    @property
    def buffer(self) -> RollingLogBuffer:
        return self._buffer

    @property
    def tracker(self) -> OpenActionTracker:
        return self._tracker

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def counters(self) -> SessionCounters:
        return SessionCounters(
            accepted=self._accepted,
            decode_failures=self._decode_failures,
            correlation=self._tracker.stats,
        )

    async def run(self) -> None:
        """Connect and consume messages until the channel ends or fails."""
        if self._closed:
            logger.warning("run() called on a closed session")
            return

        await self._set_status(SessionStatus.CONNECTING)
        try:
            await self._channel.connect()
            await self._set_status(SessionStatus.CONNECTED)
            async for raw in self._channel.messages():
                if self._closed:
                    break
                await self.handle_message(raw)
        except ChannelError as e:
            if self._closed:
                return
            self._last_error = str(e)
            logger.error("Channel error: %s", e)
            await self._set_status(SessionStatus.ERROR, error=str(e))
            return

        if not self._closed:
            logger.info("Channel ended by peer")
            await self._set_status(SessionStatus.DISCONNECTED)

    def accept(self, event: LifecycleEvent) -> None:
        """Append a decoded event to the window and update open actions."""
        self._buffer.append(event)
        self._tracker.apply(event)
        self._accepted += 1

    async def ingest(self, raw: RawMessage) -> LifecycleEvent | None:
        """
        Process one inbound payload, surfacing decode failures to the caller.

        A malformed payload is counted, logged and published exactly as in
        handle_message() before the DecodeError is re-raised.

        Args:
            raw: Message text as received from the channel or HTTP body

        Returns:
            The accepted event, or None if the session is closed

        Raises:
            DecodeError: The payload is not a valid lifecycle event
        """
        if self._closed:
            logger.debug("Ignoring message on closed session")
            return None

        try:
            event = decode(raw)
        except DecodeError as e:
            self._decode_failures += 1
            logger.warning(
                "Discarding malformed message: %s",
                e.reason,
                extra={"context": {"raw": e.raw}},
            )
            await self._publish(
                Topic.DECODE_FAILED, {"reason": e.reason, "raw": e.raw}
            )
            raise

        self.accept(event)
        await self._publish(
            Topic.EVENT_ACCEPTED,
            {"action": event.action.value, "actionId": event.action_id},
        )
        return event

    async def handle_message(self, raw: RawMessage) -> LifecycleEvent | None:
        """Process one inbound payload; malformed ones are dropped (None)."""
        try:
            return await self.ingest(raw)
        except DecodeError:
            return None

    def snapshot(self, recent: int = DEFAULT_RECENT_LIMIT) -> DashboardSnapshot:
        """Build every derived view from a single read of the buffer."""
        events = self._buffer.snapshot()
        return DashboardSnapshot(
            status=self._status,
            recent_logs=list(events[-recent:]) if recent > 0 else [],
            open_actions=self._tracker.open_actions(),
            metrics=compute(events),
            durations=duration_series(events),
            counters=self.counters,
            window_size=self._buffer.capacity,
            last_error=self._last_error,
        )

    def reset(self) -> None:
        """Drop buffered events, open actions and counters; keep the channel."""
        self._buffer.clear()
        self._tracker.clear()
        self._accepted = 0
        self._decode_failures = 0
        self._last_error = None

    async def close(self) -> None:
        """Release the channel and discard all state."""
        if self._closed:
            return
        self._closed = True

        try:
            await self._channel.close()
        except ChannelError as e:
            logger.warning("Error while closing channel: %s", e)

        self.reset()
        await self._set_status(SessionStatus.CLOSED)

    async def _set_status(
        self, status: SessionStatus, error: str | None = None
    ) -> None:
        self._status = status
        payload = {"status": status.value}
        if error:
            payload["error"] = error
        await self._publish(Topic.CHANNEL_STATUS, payload)

    async def _publish(self, topic: Topic, payload: dict) -> None:
        if self._event_bus is None:
            return
        await self._event_bus.publish(
            make_message(topic, payload, source="stream_session")
        )

