from .log import LOG
from .types.space import Space


class SpaceCache:
    """Holds the space descriptor of one client for the client's lifetime.

    Nothing invalidates it. Concurrent writers store equivalent descriptors,
    so the last write wins.
    """

    def __init__(self) -> None:
        self._space: Space | None = None

    def get(self) -> Space | None:
        return self._space

    def set(self, space: Space) -> None:
        if self._space is None:
            LOG.info(f"Cached space {space.id} (default locale {space.default_locale})")
        self._space = space

    def is_populated(self) -> bool:
        return self._space is not None
