"""Decoding of raw stream messages into LifecycleEvents."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import DecodeError
from ..models import LifecycleAction, LifecycleEvent


class LifecyclePayload(BaseModel):
    """Wire shape of one lifecycle message."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    action: LifecycleAction
    action_id: str = Field(alias="actionId", min_length=1)
    method: str
    duration: float = Field(allow_inf_nan=False)
    user_id: str | None = Field(None, alias="userId")
    session: str | None = None
    ip: str | None = None
    route: str | None = None
    status_code: int | None = Field(None, alias="statusCode")
    time: str | None = None

    def to_event(self) -> LifecycleEvent:
        """Build the immutable event."""
        return LifecycleEvent(
            action=self.action,
            action_id=self.action_id,
            method=self.method,
            duration=self.duration,
            user_id=self.user_id or "",
            session=self.session,
            ip=self.ip,
            route=self.route,
            status_code=self.status_code,
            time=self.time,
        )


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "payload"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def decode(raw: str | bytes) -> LifecycleEvent:
    """
    Parse and validate one raw message.

    Args:
        raw: JSON text of a single lifecycle event

    Returns:
        The decoded LifecycleEvent

    Raises:
        DecodeError: payload is not JSON, not an object, misses a required
            field (action, actionId, method, duration) or has a bad value
    """
    if not raw or not raw.strip():
        raise DecodeError("empty payload", raw)

    try:
        payload = LifecyclePayload.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(_describe(e), raw) from e

    return payload.to_event()
