"""Rolling log buffer module."""

from .rolling_buffer import RollingLogBuffer

__all__ = ["RollingLogBuffer"]
