"""Shared ``sys`` metadata block carried by every resource."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    link_type: str | None = Field(None, alias="linkType")

    @classmethod
    def from_json(cls, data: Any) -> "Link | None":
        if not isinstance(data, dict):
            return None
        sys = data.get("sys") or {}
        return cls.model_validate(sys)


class Sys(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: str = Field(..., description="Resource identifier")
    type: str = Field(..., description="Resource type, e.g. Entry, Asset, DeletedEntry")
    locale: str | None = None
    revision: int | None = None
    created_at: str | None = Field(None, alias="createdAt", description="ISO 8601 creation timestamp")
    updated_at: str | None = Field(None, alias="updatedAt", description="ISO 8601 update timestamp")
    content_type: Link | None = Field(None, alias="contentType")

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Sys":
        sys = dict(data)
        if "contentType" in sys:
            sys["contentType"] = Link.from_json(sys["contentType"])
        return cls.model_validate(sys)
