"""Stream session module."""

from .channel import IChannel, QueueChannel, RawMessage, WebSocketChannel
from .session import IStreamSession, StreamSession

__all__ = [
    "IChannel",
    "QueueChannel",
    "RawMessage",
    "WebSocketChannel",
    "IStreamSession",
    "StreamSession",
]
