"""Event decoder module."""

from .decoder import LifecyclePayload, decode

__all__ = ["LifecyclePayload", "decode"]
