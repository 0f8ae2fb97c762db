"""
Default HTTP transport built on httpx.
"""

import httpx

from .log import LOG


class TransportError(Exception):
    """Transport-level failure. ``status_code`` is set for bodiless HTTP errors."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpxTransport:
    """Performs GET requests with fixed headers through an ``httpx.AsyncClient``.

    Response bodies are returned whatever the status code: error bodies are
    classified by the client. Only responses without a body count as
    transport errors, so do network failures.
    """

    def __init__(
        self,
        *,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=headers, timeout=timeout, follow_redirects=True
        )

    async def execute(self, url: str) -> bytes:
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            LOG.error(f"GET {url} failed: {e!r}")
            raise TransportError(str(e) or type(e).__name__) from e

        content = response.content
        if not content and response.is_error:
            raise TransportError(
                f"HTTP {response.status_code} without body",
                status_code=response.status_code,
            )
        LOG.debug(f"GET {url} -> {response.status_code}, {len(content)} bytes")
        return content

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
