"""Type definitions for content type resources."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as ModelField

from .sys import Sys


class Field(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str = ""
    type: str
    localized: bool = False
    required: bool = False
    disabled: bool = False


class ContentType(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sys: Sys
    name: str = ""
    description: str | None = None
    display_field: str | None = ModelField(None, alias="displayField")
    fields: list[Field] = ModelField(default_factory=list)

    @property
    def id(self) -> str:
        return self.sys.id

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "ContentType":
        sys = Sys.from_json(data["sys"])
        if sys.type != "ContentType":
            raise ValueError(f"expected a ContentType, got {sys.type}")
        return cls(
            sys=sys,
            name=data.get("name", ""),
            description=data.get("description"),
            displayField=data.get("displayField"),
            fields=[Field.model_validate(field) for field in data.get("fields", [])],
        )
