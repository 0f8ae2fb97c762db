"""
Asynchronous client for the content delivery API.
"""

import asyncio
import json
import weakref
from collections.abc import Coroutine, Mapping
from typing import Any, TypeVar

import httpx

from ._utils import build_params
from .async_result import AsyncResult, observe
from .client_types import (
    Completion,
    DecodeContext,
    Decoder,
    RequestHandle,
    TransportProtocol,
)
from .config import ClientConfig
from .decoders import decode_entries, decode_space
from .log import LOG
from .resources import AssetsAPI, ContentTypesAPI, EntriesAPI
from .result import CDAClientError, Error, ErrorKind, InvalidRequestError, Result
from .space_cache import SpaceCache
from .sync import SyncEngine
from .transport import HttpxTransport
from .types.array import Array
from .types.asset import Asset
from .types.entry import Entry
from .types.error import DomainError
from .types.space import Space
from .types.sync import SyncSpace

T = TypeVar("T")

NOT_FOUND_ERROR_ID = "NotFound"


def checked_url(raw: str, params: Mapping[str, str] | None = None) -> str:
    """Return ``raw`` with ``params`` appended as an absolute http(s) URL.

    Raises:
        InvalidRequestError: If the result is not an absolute http(s) URL.
    """
    try:
        url = httpx.URL(raw, params=params) if params else httpx.URL(raw)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise InvalidRequestError(f"invalid URL {raw!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidRequestError(f"invalid URL {raw!r}: scheme and host are required")
    return str(url)


class CDAClient:
    """Client bound to one space of the delivery API.

    Every fetch except the space fetch waits for the space descriptor first.
    The descriptor is fetched once and kept for the lifetime of the client.

    Each operation takes a ``then`` callback, called exactly once with a
    :class:`Result`, and returns the task carrying the request, or ``None``
    when the outcome was known without network access. ``*_observable``
    variants return that handle together with an :class:`AsyncResult`.

    Args:
        space_id: The space all requests are made against.
        access_token: Delivery or preview API token.
        config: Client configuration. Defaults to ``ClientConfig()``.
        transport: Transport to send requests through. Defaults to an
            :class:`HttpxTransport` carrying the auth and user agent headers.
    """

    def __init__(
        self,
        space_id: str,
        access_token: str,
        *,
        config: ClientConfig | None = None,
        transport: TransportProtocol | None = None,
    ) -> None:
        self.space_id = space_id
        self.config = config or ClientConfig()
        self._owns_transport = transport is None
        self._transport: TransportProtocol = transport or HttpxTransport(
            headers={
                "Authorization": f"Bearer {access_token}",
                "User-Agent": self.config.user_agent,
            },
            timeout=self.config.timeout,
        )
        self.space_cache = SpaceCache()
        self._space_lock: asyncio.Lock | None = None
        self._space_lock_loop: asyncio.AbstractEventLoop | None = None

        self.entries = EntriesAPI(self)
        self.assets = AssetsAPI(self)
        self.content_types = ContentTypesAPI(self)
        self.sync_engine = SyncEngine(self)

    async def __aenter__(self) -> "CDAClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    @property
    def space(self) -> Space | None:
        return self.space_cache.get()

    def url_for(self, component: str = "", parameters: Mapping[str, Any] | None = None) -> str:
        """Build the absolute URL of ``component`` within the space.

        Raises:
            InvalidRequestError: If the URL cannot be built or a parameter
                value has an unsupported shape.
        """
        if not self.space_id:
            raise InvalidRequestError("space id must not be empty")
        query = build_params(parameters)
        return checked_url(
            f"{self.config.scheme}://{self.config.host}/spaces/{self.space_id}/{component}",
            query or None,
        )

    # Dispatch

    def dispatch(self, coro: Coroutine[Any, Any, Result[T]], then: Completion[T]) -> RequestHandle:
        """Run ``coro`` as a task and hand its result to ``then``.

        A cancelled task never calls ``then``.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro)

        def _deliver(task: RequestHandle) -> None:
            if task.cancelled():
                LOG.debug("Request cancelled, completion dropped")
                return
            exc = task.exception()
            if exc is not None:
                LOG.error("Request failed unexpectedly", exc_info=exc)
                then(
                    Result.reject(
                        Error.init(
                            ErrorKind.TRANSPORT_FAILURE,
                            f"{type(exc).__name__}: {exc}",
                            cause=exc,
                        )
                    )
                )
                return
            then(task.result())

        task.add_done_callback(_deliver)
        return task

    def fetch(
        self,
        component: str,
        decoder: Decoder[T],
        *,
        parameters: Mapping[str, Any] | None = None,
        requires_space: bool = True,
        then: Completion[T],
    ) -> RequestHandle | None:
        """Callback form of :meth:`request`.

        An unbuildable URL calls ``then`` right away and sends nothing.
        """
        try:
            url = self.url_for(component, parameters)
        except CDAClientError as e:
            error = e.to_error()
            LOG.error(f"Invalid request for {component!r}: {error.errmsg}")
            then(Result.reject(error))
            return None
        return self.dispatch(self._fetch_url(url, decoder, requires_space), then)

    async def request(
        self,
        component: str,
        decoder: Decoder[T],
        *,
        parameters: Mapping[str, Any] | None = None,
        requires_space: bool = True,
    ) -> Result[T]:
        try:
            url = self.url_for(component, parameters)
        except CDAClientError as e:
            return Result.reject(e.to_error())
        return await self._fetch_url(url, decoder, requires_space)

    async def _fetch_url(self, url: str, decoder: Decoder[T], requires_space: bool) -> Result[T]:
        if requires_space:
            r = await self.resolve_space()
            _, error = r.unpack()
            if error:
                LOG.error(f"Space unavailable, not requesting {url}: {error}")
                return Result.reject(error)

        r = await self._get(url)
        body, error = r.unpack()
        if error:
            return Result.reject(error)
        return self._handle_json(body, decoder)

    async def _get(self, url: str) -> Result[bytes]:
        LOG.debug(f"GET {url}")
        try:
            body = await self._transport.execute(url)
        except Exception as e:
            status_code = getattr(e, "status_code", None)
            kind = ErrorKind.MISSING_RESOURCE if status_code == 404 else ErrorKind.TRANSPORT_FAILURE
            LOG.error(f"Transport failure for {url}: {e!r}")
            return Result.reject(
                Error.init(kind, str(e) or type(e).__name__, cause=e, status_code=status_code)
            )
        return Result.resolve(body)

    def _handle_json(self, body: bytes, decoder: Decoder[T]) -> Result[T]:
        try:
            payload = json.loads(body)
        except (ValueError, RecursionError) as e:
            return Result.reject(Error.init(ErrorKind.MALFORMED_PAYLOAD, str(e), payload=body))

        if DomainError.matches(payload):
            try:
                domain_error = DomainError.from_json(payload)
            except ValueError as e:
                return Result.reject(Error.init(ErrorKind.MALFORMED_PAYLOAD, str(e), payload=body))
            kind = (
                ErrorKind.MISSING_RESOURCE
                if domain_error.id == NOT_FOUND_ERROR_ID
                else ErrorKind.SERVER_ERROR
            )
            LOG.error(f"Server reported {domain_error.id}: {domain_error.message}")
            return Result.reject(
                Error.init(kind, domain_error.message or domain_error.id, domain_error=domain_error)
            )

        context = DecodeContext(space=self.space_cache.get(), client_ref=weakref.ref(self))
        try:
            return Result.resolve(decoder(payload, context))
        except Exception as e:
            LOG.error(f"Undecodable payload: {e!r}")
            return Result.reject(
                Error.init(ErrorKind.MALFORMED_PAYLOAD, f"{type(e).__name__}: {e}", payload=body)
            )

    # Space

    def _lock_for_running_loop(self) -> asyncio.Lock:
        """Space lock of the running loop. A client reused under a new loop gets a new lock."""
        loop = asyncio.get_running_loop()
        if self._space_lock is None or self._space_lock_loop is not loop:
            self._space_lock = asyncio.Lock()
            self._space_lock_loop = loop
        return self._space_lock

    async def resolve_space(self) -> Result[Space]:
        """Return the cached space, fetching it first if needed.

        Concurrent callers share a single space request.
        """
        space = self.space_cache.get()
        if space is not None:
            return Result.resolve(space)
        async with self._lock_for_running_loop():
            space = self.space_cache.get()
            if space is not None:
                return Result.resolve(space)
            r = await self.request("", decode_space, requires_space=False)
            space, error = r.unpack()
            if error:
                return r
            self.space_cache.set(space)
            return r

    def fetch_space(self, *, then: Completion[Space]) -> RequestHandle | None:
        """Fetch the space this client is bound to.

        Calls ``then`` synchronously and returns ``None`` when the space is
        already cached.
        """
        space = self.space_cache.get()
        if space is not None:
            then(Result.resolve(space))
            return None
        try:
            self.url_for()
        except CDAClientError as e:
            then(Result.reject(e.to_error()))
            return None
        return self.dispatch(self.resolve_space(), then)

    def fetch_space_observable(self) -> tuple[RequestHandle | None, AsyncResult[Space]]:
        return observe(lambda then: self.fetch_space(then=then))

    # Queries

    def execute(
        self,
        component: str,
        *,
        matching: Mapping[str, Any] | None = None,
        then: Completion[Array[Entry]],
    ) -> RequestHandle | None:
        """Run a collection query against ``component`` and decode entries."""
        return self.fetch(component, decode_entries, parameters=matching, then=then)

    def execute_observable(
        self, component: str, *, matching: Mapping[str, Any] | None = None
    ) -> tuple[RequestHandle | None, AsyncResult[Array[Entry]]]:
        return observe(lambda then: self.execute(component, matching=matching, then=then))

    # Binary data

    def fetch_data(self, asset: Asset, *, then: Completion[bytes]) -> RequestHandle | None:
        """Fetch the raw file of ``asset``.

        The file lives on the asset host, so the space is not required.
        """
        try:
            url = checked_url(asset.url())
        except ValueError as e:
            then(Result.reject(Error.init(ErrorKind.INVALID_REQUEST, str(e))))
            return None
        except CDAClientError as e:
            then(Result.reject(e.to_error()))
            return None
        return self.dispatch(self._get(url), then)

    def fetch_data_observable(self, asset: Asset) -> tuple[RequestHandle | None, AsyncResult[bytes]]:
        return observe(lambda then: self.fetch_data(asset, then=then))

    # Sync

    def initial_sync(
        self, *, matching: Mapping[str, Any] | None = None, then: Completion[SyncSpace]
    ) -> RequestHandle | None:
        return self.sync_engine.initial_sync(matching=matching, then=then)

    def initial_sync_observable(
        self, *, matching: Mapping[str, Any] | None = None
    ) -> tuple[RequestHandle | None, AsyncResult[SyncSpace]]:
        return self.sync_engine.initial_sync_observable(matching=matching)

    def next_sync(
        self,
        sync_space: SyncSpace,
        *,
        matching: Mapping[str, Any] | None = None,
        then: Completion[SyncSpace],
    ) -> RequestHandle | None:
        return self.sync_engine.next_sync(sync_space, matching=matching, then=then)

    def next_sync_observable(
        self, sync_space: SyncSpace, *, matching: Mapping[str, Any] | None = None
    ) -> tuple[RequestHandle | None, AsyncResult[SyncSpace]]:
        return self.sync_engine.next_sync_observable(sync_space, matching=matching)
