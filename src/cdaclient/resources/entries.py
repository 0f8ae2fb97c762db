"""
Entry endpoints.
"""

from collections.abc import Mapping
from typing import Any

from ..async_result import AsyncResult, observe
from ..client_types import Completion, RequestHandle
from ..decoders import decode_entries
from ..result import Error, ErrorKind, Result
from ..types.array import Array
from ..types.entry import Entry
from ._base import ResourceAPI


class EntriesAPI(ResourceAPI):
    def fetch_all(
        self, *, matching: Mapping[str, Any] | None = None, then: Completion[Array[Entry]]
    ) -> RequestHandle | None:
        """Fetch the entries matching the given search parameters.

        Args:
            matching: Search parameters, e.g. ``{"content_type": "cat", "limit": 10}``.
                Defaults to None.
            then: Called once with an Array of Entry objects.

        Returns:
            The request task, or None if the request could not be built.
        """
        return self._client.fetch("entries", decode_entries, parameters=matching, then=then)

    def fetch_all_observable(
        self, *, matching: Mapping[str, Any] | None = None
    ) -> tuple[RequestHandle | None, AsyncResult[Array[Entry]]]:
        return observe(lambda then: self.fetch_all(matching=matching, then=then))

    def fetch(self, identifier: str, *, then: Completion[Entry]) -> RequestHandle | None:
        """Fetch a single entry.

        Entries are looked up through the collection endpoint filtered on
        ``sys.id``; an empty collection is a missing-resource error.

        Args:
            identifier: The entry ID.
            then: Called once with the Entry.
        """

        def _first(result: Result[Array[Entry]]) -> None:
            entries, error = result.unpack()
            if error:
                then(Result.reject(error))
                return
            entry = entries.first()
            if entry is None:
                then(
                    Result.reject(
                        Error.init(
                            ErrorKind.MISSING_RESOURCE,
                            f"No entry found for identifier {identifier}",
                            identifier=identifier,
                        )
                    )
                )
                return
            then(Result.resolve(entry))

        return self.fetch_all(matching={"sys.id": identifier}, then=_first)

    def fetch_observable(self, identifier: str) -> tuple[RequestHandle | None, AsyncResult[Entry]]:
        return observe(lambda then: self.fetch(identifier, then=then))
