"""Metrics aggregation module."""

from .aggregator import compute, duration_series, relevant_events

__all__ = ["compute", "duration_series", "relevant_events"]
