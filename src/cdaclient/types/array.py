"""Collection envelope returned by list endpoints."""

from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Array(BaseModel, Generic[T]):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: list[T] = Field(default_factory=list)
    total: int = 0
    skip: int = 0
    limit: int = 0

    def first(self) -> T | None:
        return self.items[0] if self.items else None

    @classmethod
    def from_json(cls, data: dict[str, Any], decode_item: Callable[[Any], T]) -> "Array[T]":
        if data["sys"]["type"] != "Array":
            raise ValueError(f"expected an Array, got {data['sys']['type']}")
        items = [decode_item(item) for item in data.get("items", [])]
        return cls(
            items=items,
            total=data.get("total", len(items)),
            skip=data.get("skip", 0),
            limit=data.get("limit", len(items)),
        )
