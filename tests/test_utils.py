"""Tests for parameter stringification and URL building."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import httpx
import pytest

from cdaclient import CDAClient, ClientConfig
from cdaclient._utils import build_params
from cdaclient.client import checked_url
from cdaclient.result import InvalidParameterError, InvalidRequestError


class TestBuildParams:
    def test_scalars(self) -> None:
        assert build_params({"limit": 10, "q": "cat", "ratio": 0.5, "price": Decimal("1.20")}) == {
            "limit": "10",
            "q": "cat",
            "ratio": "0.5",
            "price": "1.20",
        }

    def test_bools(self) -> None:
        assert build_params(initial=True, archived=False) == {"initial": "true", "archived": "false"}

    def test_datetime_to_gmt(self) -> None:
        cest = timezone(timedelta(hours=2))
        params = build_params({"sys.updatedAt[gte]": datetime(2024, 5, 1, 12, 30, 0, tzinfo=cest)})
        assert params == {"sys.updatedAt[gte]": "2024-05-01T10:30:00Z"}

    def test_naive_datetime_taken_as_utc(self) -> None:
        assert build_params(at=datetime(2024, 1, 2, 3, 4, 5)) == {"at": "2024-01-02T03:04:05Z"}

    def test_date(self) -> None:
        assert build_params(day=date(2024, 1, 2)) == {"day": "2024-01-02"}

    def test_collections_comma_joined(self) -> None:
        assert build_params({"sys.id[in]": ["a", "b", "c"], "n": (1, 2)}) == {
            "sys.id[in]": "a,b,c",
            "n": "1,2",
        }

    def test_none_dropped_and_order_kept(self) -> None:
        params = build_params({"b": 1, "skip": None, "a": 2})
        assert list(params) == ["b", "a"]

    def test_unsupported_value(self) -> None:
        with pytest.raises(InvalidParameterError):
            build_params({"where": {"nested": True}})

    def test_unsupported_collection_item(self) -> None:
        with pytest.raises(InvalidParameterError):
            build_params({"ids": ["a", object()]})

    def test_non_string_key(self) -> None:
        with pytest.raises(InvalidParameterError):
            build_params({1: "x"})


class TestUrlFor:
    def test_space_url(self) -> None:
        client = CDAClient("sp", "token", transport=object())
        assert client.url_for() == "https://cdn.contentful.com/spaces/sp/"

    def test_component_and_query(self) -> None:
        client = CDAClient("sp", "token", transport=object())
        url = httpx.URL(client.url_for("entries", {"content_type": "cat", "limit": 3}))
        assert url.path == "/spaces/sp/entries"
        assert list(url.params.items()) == [("content_type", "cat"), ("limit", "3")]

    def test_preview_host(self) -> None:
        client = CDAClient("sp", "token", config=ClientConfig(preview_mode=True), transport=object())
        assert httpx.URL(client.url_for()).host == "preview.contentful.com"

    def test_custom_server_kept_in_preview_mode(self) -> None:
        config = ClientConfig(preview_mode=True, server="cda.internal", secure=False)
        client = CDAClient("sp", "token", config=config, transport=object())
        assert client.url_for("sync") == "http://cda.internal/spaces/sp/sync"

    def test_empty_host(self) -> None:
        client = CDAClient("sp", "token", config=ClientConfig(server=""), transport=object())
        with pytest.raises(InvalidRequestError):
            client.url_for("entries")

    def test_empty_space_id(self) -> None:
        client = CDAClient("", "token", transport=object())
        with pytest.raises(InvalidRequestError):
            client.url_for()

    def test_bad_parameter(self) -> None:
        client = CDAClient("sp", "token", transport=object())
        with pytest.raises(InvalidRequestError):
            client.url_for("entries", {"x": object()})

    def test_checked_url_requires_http(self) -> None:
        with pytest.raises(InvalidRequestError):
            checked_url("ftp://example.com/file")
