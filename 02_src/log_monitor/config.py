"""Project-level configuration and path helpers."""

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_STREAM_URL = "ws://localhost:7075/logs"
DEFAULT_WINDOW_SIZE = 1000
DEFAULT_RECENT_LIMIT = 50
DEFAULT_TRACE_LIMIT = 200


def resolve_stream_url(env_value: str | None = None) -> str:
    """Resolve STREAM_URL to the inbound channel endpoint."""
    if env_value is None:
        env_value = os.getenv("STREAM_URL")
    return env_value or DEFAULT_STREAM_URL


def resolve_window_size(env_value: str | int | None = None) -> int:
    """Resolve LOG_WINDOW_SIZE to a positive buffer capacity."""
    if env_value is None:
        env_value = os.getenv("LOG_WINDOW_SIZE")
    if not env_value:
        return DEFAULT_WINDOW_SIZE

    size = int(env_value)
    if size <= 0:
        raise ValueError(f"LOG_WINDOW_SIZE must be positive, got {size}")
    return size
