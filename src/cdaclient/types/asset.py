"""Type definitions for asset resources."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .space import Space
from .sys import Sys


class Asset(BaseModel):
    model_config = ConfigDict(frozen=True)

    sys: Sys
    fields: dict[str, Any] = Field(default_factory=dict)
    locale: str | None = None

    @property
    def id(self) -> str:
        return self.sys.id

    @property
    def file(self) -> dict[str, Any] | None:
        file = self.fields.get("file")
        if isinstance(file, dict) and self.sys.locale is None and self.locale in file:
            file = file[self.locale]
        return file if isinstance(file, dict) else None

    def url(self) -> str:
        """Absolute URL of the asset file.

        Raises:
            ValueError: If the asset carries no file URL.
        """
        file = self.file
        url = file.get("url") if file else None
        if not url:
            raise ValueError(f"asset {self.id} has no file url")
        if url.startswith("//"):
            return f"https:{url}"
        return url

    @classmethod
    def from_json(cls, data: dict[str, Any], space: Space | None) -> "Asset":
        sys = Sys.from_json(data["sys"])
        if sys.type != "Asset":
            raise ValueError(f"expected an Asset, got {sys.type}")
        locale = sys.locale or (space.default_locale if space else None)
        return cls(sys=sys, fields=data.get("fields") or {}, locale=locale)
