"""EventBus message models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Topic(str, Enum):
    """EventBus topics."""

    EVENT_ACCEPTED = "event_accepted"
    DECODE_FAILED = "decode_failed"
    CHANNEL_STATUS = "channel_status"


@dataclass
class BusMessage:
    """A notification exchanged through EventBus."""

    id: str
    topic: Topic
    payload: dict  # varies by topic
    source: str  # component that published
    timestamp: datetime
