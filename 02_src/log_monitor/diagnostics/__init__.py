"""Diagnostics module."""

from .tracker import DiagnosticsTracker, IDiagnosticsTracker

__all__ = ["DiagnosticsTracker", "IDiagnosticsTracker"]
