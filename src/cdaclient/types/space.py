"""Type definitions for space resources."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Locale(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Locale code, e.g. en-US")
    name: str = Field("", description="Display name")
    default: bool = Field(False, description="Whether this is the space default locale")


class Space(BaseModel):
    """Space model. Holds the locale metadata other resources are decoded against."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Space identifier")
    name: str = Field("", description="Space name")
    locales: list[Locale] = Field(default_factory=list, description="Locales enabled for the space")

    @property
    def default_locale(self) -> str | None:
        for locale in self.locales:
            if locale.default:
                return locale.code
        return self.locales[0].code if self.locales else None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Space":
        if data["sys"]["type"] != "Space":
            raise ValueError(f"expected a Space, got {data['sys']['type']}")
        return cls(
            id=data["sys"]["id"],
            name=data.get("name", ""),
            locales=[Locale.model_validate(locale) for locale in data.get("locales", [])],
        )
