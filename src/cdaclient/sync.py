"""
Multi-page synchronization on top of the client.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .async_result import AsyncResult, observe
from .client_types import Completion, RequestHandle
from .decoders import decode_sync_page
from .log import LOG
from .result import CDAClientError, Error, ErrorKind, Result
from .types.sync import SYNC_TOKEN_PARAMETER, SyncItem, SyncPage, SyncSpace

if TYPE_CHECKING:
    from .client import CDAClient

SYNC_PATH = "sync"
INITIAL_PARAMETER = "initial"


class SyncCursor:
    """State of one synchronization in progress."""

    def __init__(self, parameters: Mapping[str, Any]) -> None:
        self.parameters: dict[str, Any] = dict(parameters)
        self.items: list[SyncItem] = []
        self.sync_token: str | None = None
        self.complete = False
        self.pages = 0

    def absorb(self, page: SyncPage) -> None:
        self.items.extend(page.items)
        self.pages += 1
        self.sync_token = page.sync_token
        if page.has_more_pages:
            self.parameters.pop(INITIAL_PARAMETER, None)
            self.parameters[SYNC_TOKEN_PARAMETER] = page.sync_token
        else:
            self.complete = True


class SyncEngine:
    def __init__(self, client: "CDAClient") -> None:
        self._client = client

    def initial_sync(
        self, *, matching: Mapping[str, Any] | None = None, then: Completion[SyncSpace]
    ) -> RequestHandle | None:
        """Synchronize the whole space from scratch.

        Args:
            matching: Extra sync options, e.g. ``{"type": "Entry"}``. Defaults to None.
            then: Called once with the accumulated :class:`SyncSpace` or the first error.

        Returns:
            The task walking the pages, or None if the sync failed before any request.
        """
        parameters = dict(matching or {})
        parameters[INITIAL_PARAMETER] = True
        return self.sync(parameters, then=then)

    def initial_sync_observable(
        self, *, matching: Mapping[str, Any] | None = None
    ) -> tuple[RequestHandle | None, AsyncResult[SyncSpace]]:
        return observe(lambda then: self.initial_sync(matching=matching, then=then))

    def next_sync(
        self,
        sync_space: SyncSpace,
        *,
        matching: Mapping[str, Any] | None = None,
        then: Completion[SyncSpace],
    ) -> RequestHandle | None:
        """Fetch the changes made since ``sync_space`` completed."""
        parameters = dict(matching or {})
        parameters.pop(INITIAL_PARAMETER, None)
        parameters[SYNC_TOKEN_PARAMETER] = sync_space.sync_token
        return self.sync(parameters, then=then)

    def next_sync_observable(
        self, sync_space: SyncSpace, *, matching: Mapping[str, Any] | None = None
    ) -> tuple[RequestHandle | None, AsyncResult[SyncSpace]]:
        return observe(lambda then: self.next_sync(sync_space, matching=matching, then=then))

    def sync(self, parameters: Mapping[str, Any], *, then: Completion[SyncSpace]) -> RequestHandle | None:
        if self._client.config.preview_mode:
            LOG.error("Sync requested on a preview client")
            then(
                Result.reject(
                    Error.init(
                        ErrorKind.PREVIEW_SYNC_FORBIDDEN,
                        "The preview API does not support synchronization",
                    )
                )
            )
            return None
        try:
            self._client.url_for(SYNC_PATH, parameters)
        except CDAClientError as e:
            then(Result.reject(e.to_error()))
            return None
        return self._client.dispatch(self._run(SyncCursor(parameters)), then)

    async def _run(self, cursor: SyncCursor) -> Result[SyncSpace]:
        while not cursor.complete:
            r = await self._client.request(SYNC_PATH, decode_sync_page, parameters=cursor.parameters)
            page, error = r.unpack()
            if error:
                LOG.error(
                    f"Sync aborted on page {cursor.pages + 1}, dropping {len(cursor.items)} items: {error}"
                )
                return Result.reject(error)
            cursor.absorb(page)

        LOG.info(f"Sync complete: {len(cursor.items)} items over {cursor.pages} pages")
        return Result.resolve(SyncSpace.build(cursor.items, cursor.sync_token, self._client))
