"""Tests for the httpx-backed transport."""

import asyncio

import httpx
import pytest

from cdaclient.transport import HttpxTransport, TransportError


def make_transport(handler) -> HttpxTransport:
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        headers={"Authorization": "Bearer secret", "User-Agent": "tests"},
    )
    return HttpxTransport(client=client)


class TestHttpxTransport:
    def test_returns_body_and_sends_headers(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b'{"ok": true}')

        body = asyncio.run(make_transport(handler).execute("https://cdn.example.com/spaces/sp/"))
        assert body == b'{"ok": true}'
        assert seen[0].headers["Authorization"] == "Bearer secret"
        assert seen[0].headers["User-Agent"] == "tests"

    def test_error_body_returned(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, content=b'{"sys": {"type": "Error", "id": "NotFound"}}')

        body = asyncio.run(make_transport(handler).execute("https://cdn.example.com/x"))
        assert b"NotFound" in body

    def test_bodiless_error_raises_with_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404)

        with pytest.raises(TransportError) as info:
            asyncio.run(make_transport(handler).execute("https://cdn.example.com/x"))
        assert info.value.status_code == 404

    def test_network_failure_wrapped(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(TransportError) as info:
            asyncio.run(make_transport(handler).execute("https://cdn.example.com/x"))
        assert isinstance(info.value.__cause__, httpx.ConnectError)
        assert info.value.status_code is None

    def test_injected_client_not_closed(self) -> None:
        client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        asyncio.run(HttpxTransport(client=client).aclose())
        assert not client.is_closed
