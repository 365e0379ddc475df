"""Lifecycle event simulator."""

from .sim import ISim, Sim, build_lifecycle

__all__ = ["ISim", "Sim", "build_lifecycle"]
