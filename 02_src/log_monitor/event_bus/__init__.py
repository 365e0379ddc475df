"""EventBus module."""

from .event_bus import EventBus, IEventBus, TopicHandler, make_message

__all__ = ["EventBus", "IEventBus", "TopicHandler", "make_message"]
