"""
Default decoders turning parsed JSON into resource models.

Every decoder takes the parsed payload and a :class:`DecodeContext`. The
context carries the cached space for locale-aware resources and a weak
reference to the client for results that fetch further pages later.
"""

from typing import Any

from .client_types import DecodeContext
from .types.array import Array
from .types.asset import Asset
from .types.content_type import ContentType
from .types.entry import Entry
from .types.space import Space
from .types.sync import SyncPage


def decode_space(payload: Any, context: DecodeContext) -> Space:
    return Space.from_json(payload)


def decode_entry(payload: Any, context: DecodeContext) -> Entry:
    return Entry.from_json(payload, context.space)


def decode_entries(payload: Any, context: DecodeContext) -> Array[Entry]:
    return Array.from_json(payload, lambda item: Entry.from_json(item, context.space))


def decode_asset(payload: Any, context: DecodeContext) -> Asset:
    return Asset.from_json(payload, context.space)


def decode_assets(payload: Any, context: DecodeContext) -> Array[Asset]:
    return Array.from_json(payload, lambda item: Asset.from_json(item, context.space))


def decode_content_type(payload: Any, context: DecodeContext) -> ContentType:
    return ContentType.from_json(payload)


def decode_content_types(payload: Any, context: DecodeContext) -> Array[ContentType]:
    return Array.from_json(payload, ContentType.from_json)


def decode_sync_page(payload: Any, context: DecodeContext) -> SyncPage:
    return SyncPage.from_json(payload, context.space)
