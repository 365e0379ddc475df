"""Tracing and observability data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class TraceEvent:
    """A single diagnostic event about the ingestion pipeline."""

    id: str
    event_type: str  # e.g. "decode_failed", "channel_status"
    actor: str  # who created this event
    data: dict
    timestamp: datetime
