"""Type definitions for entry resources."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .space import Space
from .sys import Sys


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    sys: Sys
    fields: dict[str, Any] = Field(default_factory=dict)
    locale: str | None = Field(None, description="Locale the fields were delivered in")

    @property
    def id(self) -> str:
        return self.sys.id

    @property
    def content_type_id(self) -> str | None:
        return self.sys.content_type.id if self.sys.content_type else None

    def field(self, name: str, locale: str | None = None) -> Any:
        """Return a field value.

        Entries fetched with ``locale=*`` carry ``{locale: value}`` mappings;
        the requested locale, then the entry locale, is picked from those.
        """
        value = self.fields.get(name)
        if self.sys.locale is None and isinstance(value, dict):
            wanted = locale or self.locale
            if wanted in value:
                return value[wanted]
        return value

    @classmethod
    def from_json(cls, data: dict[str, Any], space: Space | None) -> "Entry":
        sys = Sys.from_json(data["sys"])
        if sys.type != "Entry":
            raise ValueError(f"expected an Entry, got {sys.type}")
        locale = sys.locale or (space.default_locale if space else None)
        return cls(sys=sys, fields=data.get("fields") or {}, locale=locale)
