"""Error types raised by the ingestion pipeline."""


class LogMonitorError(Exception):
    """Base class for log monitor errors."""


class DecodeError(LogMonitorError):
    """An inbound message could not be turned into a LifecycleEvent."""

    def __init__(self, reason: str, raw: str | bytes | None = None):
        self.reason = reason
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        # Keep only a prefix, payloads may be arbitrarily large
        self.raw = raw[:200] if raw is not None else None
        super().__init__(reason)


class ChannelError(LogMonitorError):
    """Transport-level failure of the inbound channel."""
