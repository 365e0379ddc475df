"""Tests for RollingLogBuffer."""

import pytest

from log_monitor.buffer import RollingLogBuffer


class TestRollingLogBufferAppend:
    """Tests for append and ordering."""

    def test_default_capacity(self):
        assert RollingLogBuffer().capacity == 1000

    def test_append_preserves_arrival_order(self, make_event):
        buffer = RollingLogBuffer()
        events = [make_event(action_id=f"a{i}") for i in range(5)]
        for event in events:
            buffer.append(event)

        assert len(buffer) == 5
        assert buffer.snapshot() == tuple(events)

    def test_boundedness(self, make_event):
        """More than capacity appends leave exactly the last 1000."""
        buffer = RollingLogBuffer()
        events = [make_event(action_id=f"a{i}") for i in range(1500)]
        for event in events:
            buffer.append(event)
            assert len(buffer) <= 1000

        assert len(buffer) == 1000
        assert buffer.snapshot() == tuple(events[-1000:])

    def test_fifo_eviction(self, make_event):
        """Appending to a full buffer evicts only the oldest element."""
        buffer = RollingLogBuffer(capacity=3)
        a, b, c, d = (make_event(action_id=x) for x in "abcd")
        for event in (a, b, c):
            buffer.append(event)

        buffer.append(d)

        assert buffer.snapshot() == (b, c, d)

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            RollingLogBuffer(capacity=0)


class TestRollingLogBufferViews:
    """Tests for snapshot and recent."""

    def test_snapshot_is_detached(self, make_event):
        buffer = RollingLogBuffer()
        buffer.append(make_event(action_id="a"))
        snapshot = buffer.snapshot()

        buffer.append(make_event(action_id="b"))

        assert len(snapshot) == 1
        assert len(buffer.snapshot()) == 2

    def test_recent_returns_tail_in_order(self, make_event):
        buffer = RollingLogBuffer()
        events = [make_event(action_id=f"a{i}") for i in range(10)]
        for event in events:
            buffer.append(event)

        assert buffer.recent(3) == events[-3:]

    def test_recent_more_than_size(self, make_event):
        buffer = RollingLogBuffer()
        events = [make_event(action_id=f"a{i}") for i in range(2)]
        for event in events:
            buffer.append(event)

        assert buffer.recent(50) == events

    def test_recent_zero(self, make_event):
        buffer = RollingLogBuffer()
        buffer.append(make_event())
        assert buffer.recent(0) == []

    def test_clear(self, make_event):
        buffer = RollingLogBuffer()
        buffer.append(make_event())
        buffer.clear()
        assert len(buffer) == 0
