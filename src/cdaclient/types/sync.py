"""Type definitions for synchronization results."""

import weakref
from typing import TYPE_CHECKING, Any, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .asset import Asset
from .entry import Entry
from .space import Space
from .sys import Sys

if TYPE_CHECKING:
    from ..async_result import AsyncResult
    from ..client import CDAClient
    from ..client_types import Completion, RequestHandle

SYNC_TOKEN_PARAMETER = "sync_token"


class DeletedResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    sys: Sys

    @property
    def id(self) -> str:
        return self.sys.id


SyncItem = Union[Entry, Asset, DeletedResource]


def decode_sync_item(data: dict[str, Any], space: Space | None) -> SyncItem:
    kind = data["sys"]["type"]
    if kind == "Entry":
        return Entry.from_json(data, space)
    if kind == "Asset":
        return Asset.from_json(data, space)
    if kind in ("DeletedEntry", "DeletedAsset"):
        return DeletedResource(sys=Sys.from_json(data["sys"]))
    raise ValueError(f"unexpected sync item type {kind}")


def token_from_url(url: str) -> str:
    token = httpx.URL(url).params.get(SYNC_TOKEN_PARAMETER)
    if not token:
        raise ValueError(f"no {SYNC_TOKEN_PARAMETER} in {url}")
    return token


class SyncPage(BaseModel):
    """One page of a synchronization."""

    items: list[Any] = Field(default_factory=list)
    sync_token: str
    has_more_pages: bool

    @classmethod
    def from_json(cls, data: dict[str, Any], space: Space | None) -> "SyncPage":
        if data["sys"]["type"] != "Array":
            raise ValueError(f"expected an Array, got {data['sys']['type']}")
        next_page_url = data.get("nextPageUrl")
        next_url = next_page_url or data.get("nextSyncUrl")
        if not next_url:
            raise ValueError("sync page has neither nextPageUrl nor nextSyncUrl")
        return cls(
            items=[decode_sync_item(item, space) for item in data.get("items", [])],
            sync_token=token_from_url(next_url),
            has_more_pages=next_page_url is not None,
        )


class SyncSpace(BaseModel):
    """Accumulated outcome of a completed synchronization.

    ``items`` keeps the order the server delivered changes in. The token
    continues the synchronization later through :meth:`sync`.
    """

    items: list[Any] = Field(default_factory=list)
    sync_token: str

    _client_ref: Any = PrivateAttr(default=None)

    @classmethod
    def build(cls, items: list[SyncItem], sync_token: str, client: "CDAClient | None") -> "SyncSpace":
        space = cls(items=items, sync_token=sync_token)
        if client is not None:
            space._client_ref = weakref.ref(client)
        return space

    @property
    def entries(self) -> list[Entry]:
        return [item for item in self.items if isinstance(item, Entry)]

    @property
    def assets(self) -> list[Asset]:
        return [item for item in self.items if isinstance(item, Asset)]

    @property
    def deleted_entry_ids(self) -> list[str]:
        return [
            item.id
            for item in self.items
            if isinstance(item, DeletedResource) and item.sys.type == "DeletedEntry"
        ]

    @property
    def deleted_asset_ids(self) -> list[str]:
        return [
            item.id
            for item in self.items
            if isinstance(item, DeletedResource) and item.sys.type == "DeletedAsset"
        ]

    def _client(self) -> "CDAClient":
        client = self._client_ref() if self._client_ref is not None else None
        if client is None:
            raise RuntimeError("the client that produced this sync result is gone")
        return client

    def sync(
        self, *, matching: dict[str, Any] | None = None, then: "Completion[SyncSpace]"
    ) -> "RequestHandle | None":
        """Fetch the changes made since this synchronization completed."""
        return self._client().sync_engine.next_sync(self, matching=matching, then=then)

    def sync_observable(
        self, *, matching: dict[str, Any] | None = None
    ) -> "tuple[RequestHandle | None, AsyncResult[SyncSpace]]":
        return self._client().sync_engine.next_sync_observable(self, matching=matching)
