"""Standardized error response schema."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_serializer


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ErrorResponse(BaseModel):
    """Standard error body returned for every failed request."""

    model_config = ConfigDict(frozen=True)

    messages: frozenset[str] = Field(
        ..., min_length=1, description="Human-readable error messages"
    )
    timestamp: str = Field(
        default_factory=_utc_now_iso,
        description="ISO-8601 instant at which the error was produced",
    )
    status: int = Field(..., description="HTTP status code")
    path: str = Field(..., description="Path of the request that failed")

    @field_serializer("messages")
    def serialize_messages(self, messages: frozenset[str]) -> list[str]:
        # Sorted so identical documents serialize identically
        return sorted(messages)
