"""
Content type endpoints.
"""

from collections.abc import Mapping
from typing import Any

from ..async_result import AsyncResult, observe
from ..client_types import Completion, RequestHandle
from ..decoders import decode_content_type, decode_content_types
from ..types.array import Array
from ..types.content_type import ContentType
from ._base import ResourceAPI, naming_missing


class ContentTypesAPI(ResourceAPI):
    def fetch(self, identifier: str, *, then: Completion[ContentType]) -> RequestHandle | None:
        return self._client.fetch(
            f"content_types/{identifier}",
            decode_content_type,
            then=naming_missing(identifier, then),
        )

    def fetch_observable(
        self, identifier: str
    ) -> tuple[RequestHandle | None, AsyncResult[ContentType]]:
        return observe(lambda then: self.fetch(identifier, then=then))

    def fetch_all(
        self, *, matching: Mapping[str, Any] | None = None, then: Completion[Array[ContentType]]
    ) -> RequestHandle | None:
        return self._client.fetch(
            "content_types", decode_content_types, parameters=matching, then=then
        )

    def fetch_all_observable(
        self, *, matching: Mapping[str, Any] | None = None
    ) -> tuple[RequestHandle | None, AsyncResult[Array[ContentType]]]:
        return observe(lambda then: self.fetch_all(matching=matching, then=then))
