"""Tests for configuration and logging helpers."""

import json
import logging

import pytest

from log_monitor.config import (
    DEFAULT_STREAM_URL,
    DEFAULT_WINDOW_SIZE,
    resolve_stream_url,
    resolve_window_size,
)
from log_monitor.logging_config import JSONFormatter


class TestResolveConfig:
    """Tests for environment-backed settings."""

    def test_stream_url_default(self, monkeypatch):
        monkeypatch.delenv("STREAM_URL", raising=False)
        assert resolve_stream_url() == DEFAULT_STREAM_URL

    def test_stream_url_from_env(self, monkeypatch):
        monkeypatch.setenv("STREAM_URL", "ws://example:9000/logs")
        assert resolve_stream_url() == "ws://example:9000/logs"

    def test_stream_url_explicit_wins(self, monkeypatch):
        monkeypatch.setenv("STREAM_URL", "ws://example:9000/logs")
        assert resolve_stream_url("ws://other/logs") == "ws://other/logs"

    def test_window_size_default(self, monkeypatch):
        monkeypatch.delenv("LOG_WINDOW_SIZE", raising=False)
        assert resolve_window_size() == DEFAULT_WINDOW_SIZE

    def test_window_size_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_WINDOW_SIZE", "250")
        assert resolve_window_size() == 250

    def test_window_size_must_be_positive(self):
        with pytest.raises(ValueError):
            resolve_window_size("-5")


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_formats_record_with_context(self):
        record = logging.LogRecord(
            name="log_monitor.stream",
            level=logging.WARNING,
            pathname=__file__,
            lineno=10,
            msg="Discarding malformed message: %s",
            args=("bad",),
            exc_info=None,
        )
        record.context = {"raw": "{"}

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["logger"] == "log_monitor.stream"
        assert data["message"] == "Discarding malformed message: bad"
        assert data["context"] == {"raw": "{"}
