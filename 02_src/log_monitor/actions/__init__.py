"""Open-action tracking module."""

from .tracker import OpenActionTracker

__all__ = ["OpenActionTracker"]
