"""Shared fixtures: an in-memory transport and payload builders."""

import asyncio
import json
from typing import Any

import httpx
import pytest

from cdaclient import CDAClient, ClientConfig

SPACE_ID = "sp"
BASE = f"https://cdn.contentful.com/spaces/{SPACE_ID}/"

SPACE = {
    "sys": {"type": "Space", "id": SPACE_ID},
    "name": "Example space",
    "locales": [
        {"code": "en-US", "name": "English", "default": True},
        {"code": "de-DE", "name": "German", "default": False},
    ],
}


def entry(identifier: str, **fields: Any) -> dict[str, Any]:
    return {
        "sys": {
            "type": "Entry",
            "id": identifier,
            "locale": "en-US",
            "revision": 1,
            "contentType": {"sys": {"type": "Link", "linkType": "ContentType", "id": "cat"}},
        },
        "fields": fields,
    }


def asset(identifier: str, url: str | None = "//images.example.com/cat.png") -> dict[str, Any]:
    fields: dict[str, Any] = {"title": identifier}
    if url is not None:
        fields["file"] = {"url": url, "fileName": "cat.png", "contentType": "image/png"}
    return {"sys": {"type": "Asset", "id": identifier, "locale": "en-US"}, "fields": fields}


def array(*items: dict[str, Any]) -> dict[str, Any]:
    return {"sys": {"type": "Array"}, "total": len(items), "skip": 0, "limit": 100, "items": list(items)}


def sync_page(
    *items: dict[str, Any], next_page: str | None = None, next_sync: str | None = None
) -> dict[str, Any]:
    page: dict[str, Any] = {"sys": {"type": "Array"}, "items": list(items)}
    if next_page is not None:
        page["nextPageUrl"] = f"{BASE}sync?sync_token={next_page}"
    if next_sync is not None:
        page["nextSyncUrl"] = f"{BASE}sync?sync_token={next_sync}"
    return page


def server_error(error_id: str, message: str = "") -> dict[str, Any]:
    return {"sys": {"type": "Error", "id": error_id}, "message": message, "requestId": "req-1"}


class FakeTransport:
    """Serves queued responses by path component and records every URL.

    Responses may be dicts (sent as JSON), raw bytes, or exceptions to raise.
    The last queued response of a route is reused once the others are used up.
    """

    def __init__(self) -> None:
        self.routes: dict[str, list[Any]] = {}
        self.calls: list[str] = []
        self.closed = False

    def add(self, component: str, *responses: Any) -> "FakeTransport":
        self.routes.setdefault(component, []).extend(responses)
        return self

    def components(self) -> list[str]:
        return [self._component(url) for url in self.calls]

    def params(self, index: int) -> dict[str, str]:
        return dict(httpx.URL(self.calls[index]).params)

    @staticmethod
    def _component(url: str) -> str:
        path = httpx.URL(url).path
        prefix = f"/spaces/{SPACE_ID}/"
        return path[len(prefix):] if path.startswith(prefix) else url

    async def execute(self, url: str) -> bytes:
        self.calls.append(url)
        await asyncio.sleep(0)
        queue = self.routes[self._component(url)]
        response = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, bytes):
            return response
        return json.dumps(response).encode()

    async def aclose(self) -> None:
        self.closed = True


async def call(start):
    """Run a callback-form operation and wait for its single result."""
    results = []
    done = asyncio.Event()

    def _then(result):
        results.append(result)
        done.set()

    handle = start(_then)
    await done.wait()
    # Give a wrongly repeated completion the chance to show up.
    await asyncio.sleep(0)
    assert len(results) == 1
    return handle, results[0]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport().add("", SPACE)


@pytest.fixture
def client(transport: FakeTransport) -> CDAClient:
    return CDAClient(SPACE_ID, "token", transport=transport)


@pytest.fixture
def preview_client(transport: FakeTransport) -> CDAClient:
    return CDAClient(SPACE_ID, "token", config=ClientConfig(preview_mode=True), transport=transport)
