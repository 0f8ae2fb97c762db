"""Type definitions for errors reported by the server."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DomainError(BaseModel):
    """Error body returned by the delivery API, e.g. ``NotFound`` or ``AccessTokenInvalid``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="Error identifier from sys.id")
    message: str = Field("", description="Human readable message")
    request_id: str | None = Field(None, alias="requestId")
    details: dict[str, Any] | None = None

    @staticmethod
    def matches(payload: Any) -> bool:
        if not isinstance(payload, dict):
            return False
        sys = payload.get("sys")
        return isinstance(sys, dict) and sys.get("type") == "Error"

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "DomainError":
        return cls.model_validate(
            {
                "id": payload["sys"].get("id", "Unknown"),
                "message": payload.get("message") or "",
                "requestId": payload.get("requestId"),
                "details": payload.get("details"),
            }
        )
