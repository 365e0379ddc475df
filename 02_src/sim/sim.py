"""SIM implementation - synthetic request lifecycles for the dashboard."""

import asyncio
import json
import random
import uuid
from datetime import datetime, timezone
from typing import Protocol

import httpx

from log_monitor.diagnostics import IDiagnosticsTracker
from log_monitor.logging_config import get_logger

logger = get_logger(__name__)

ROUTES = [
    ("GET", "/api/orders"),
    ("GET", "/api/orders/{id}"),
    ("POST", "/api/orders"),
    ("PUT", "/api/orders/{id}"),
    ("DELETE", "/api/orders/{id}"),
    ("GET", "/api/users/me"),
]

VIRTUAL_USERS = [
    {"user_id": "user_001", "session": "sess-alice"},
    {"user_id": "user_002", "session": "sess-bob"},
    {"user_id": "user_003", "session": None},  # anonymous
]


class ISim(Protocol):
    """Generate lifecycle events against the ingest API."""

    async def start(self) -> None:
        """Start generating traffic."""
        ...

    async def stop(self) -> None:
        """Stop generating traffic."""
        ...


def build_lifecycle(
    rng: random.Random, action_id: str | None = None
) -> tuple[dict, dict]:
    """Build a matching start/terminal payload pair for one request."""
    method, route = rng.choice(ROUTES)
    user = rng.choice(VIRTUAL_USERS)
    action_id = action_id or uuid.uuid4().hex
    base = {
        "actionId": action_id,
        "userId": user["user_id"],
        "session": user["session"],
        "method": method,
        "ip": f"10.0.0.{rng.randint(2, 254)}",
        "route": route,
    }

    start = {**base, "action": "start", "duration": 0, "time": _now()}

    if rng.random() < 0.1:
        terminal = {**base, "action": "error", "statusCode": rng.choice([500, 502, 504])}
    else:
        terminal = {**base, "action": "finished", "statusCode": rng.choice([200, 200, 201, 204, 404])}
    terminal["duration"] = round(rng.uniform(5, 800), 2)
    terminal["time"] = _now()
    return start, terminal


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class Sim:
    """SIM posting synthetic lifecycle events to POST /api/events."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        tracker: IDiagnosticsTracker | None = None,
        request_count: int = 50,
        seed: int | None = None,
    ):
        self._api_url = api_url
        self._tracker = tracker
        self._request_count = request_count
        self._rng = random.Random(seed)
        self._running = False
        self._task: asyncio.Task | None = None
        self._client: httpx.AsyncClient | None = None

    def set_tracker(self, tracker: IDiagnosticsTracker) -> None:
        """Inject tracker for SIM trace events."""
        self._tracker = tracker

    async def start(self) -> None:
        """Start the scenario in the background."""
        if self._running:
            return

        self._running = True
        self._client = httpx.AsyncClient()
        self._task = asyncio.create_task(self._run_scenario())

    async def stop(self) -> None:
        """Stop scenario."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        if self._client:
            await self._client.aclose()
            self._client = None

    async def _run_scenario(self) -> None:
        """Interleave overlapping requests, with the odd orphan and bad payload."""
        in_flight: list[dict] = []
        sent = 0

        try:
            if self._tracker:
                await self._tracker.track(
                    "sim_started", "sim", {"request_count": self._request_count}
                )

            while self._running and (sent < self._request_count or in_flight):
                if sent < self._request_count and (
                    not in_flight or self._rng.random() < 0.6
                ):
                    start, terminal = build_lifecycle(self._rng)
                    await self._send(json.dumps(start))
                    in_flight.append(terminal)
                    sent += 1
                else:
                    terminal = in_flight.pop(self._rng.randrange(len(in_flight)))
                    await self._send(json.dumps(terminal))

                roll = self._rng.random()
                if roll < 0.03:
                    _, orphan = build_lifecycle(self._rng)
                    await self._send(json.dumps(orphan))
                elif roll < 0.05:
                    await self._send('{"action": "start", "actionId": ')

                await asyncio.sleep(self._rng.uniform(0.05, 0.5))

        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("SIM scenario error: %s", e)
        finally:
            self._running = False
            if self._tracker:
                await self._tracker.track(
                    "sim_completed", "sim", {"request_count": sent}
                )

    async def _send(self, payload: str) -> None:
        """Send one raw payload via HTTP API."""
        if not self._client:
            return

        try:
            response = await self._client.post(
                f"{self._api_url}/api/events",
                content=payload,
                headers={"Content-Type": "application/json"},
                timeout=10.0,
            )

            if response.status_code == 202:
                logger.debug("SIM: accepted %s", response.json().get("actionId"))
            else:
                logger.warning(
                    "SIM: event rejected with %s", response.status_code
                )

        except httpx.HTTPError as e:
            logger.error("SIM: Failed to send event: %s", e)
