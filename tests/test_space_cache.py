"""Tests for SpaceCache and the Space model."""

from cdaclient.space_cache import SpaceCache
from cdaclient.types import Space

from conftest import SPACE


class TestSpaceCache:
    def test_empty(self) -> None:
        cache = SpaceCache()
        assert cache.get() is None
        assert not cache.is_populated()

    def test_set_get(self) -> None:
        cache = SpaceCache()
        space = Space.from_json(SPACE)
        cache.set(space)
        assert cache.get() is space
        assert cache.is_populated()

    def test_last_writer_wins(self) -> None:
        cache = SpaceCache()
        first = Space.from_json(SPACE)
        second = Space.from_json(SPACE)
        cache.set(first)
        cache.set(second)
        assert cache.get() is second


class TestSpace:
    def test_default_locale_falls_back_to_first(self) -> None:
        space = Space.from_json(
            {"sys": {"type": "Space", "id": "s"}, "locales": [{"code": "fr-FR"}]}
        )
        assert space.default_locale == "fr-FR"

    def test_no_locales(self) -> None:
        assert Space.from_json({"sys": {"type": "Space", "id": "s"}}).default_locale is None
