"""
Single-resolution result delivered to callbacks or awaited.
"""

import asyncio
from typing import Any, Callable, Generator, Generic, TypeVar

from .client_types import Completion, RequestHandle
from .log import LOG
from .result import Result

T = TypeVar("T")


class AsyncResult(Generic[T]):
    """Holds the eventual :class:`Result` of one operation.

    Observers subscribed while pending are notified once, in subscription
    order, when the result resolves. Observers subscribed afterwards are
    notified immediately with the held result. Only the first ``resolve``
    counts; later calls are ignored and logged. An observer that raises is
    logged and does not keep the others from being notified.
    """

    def __init__(self) -> None:
        self._result: Result[T] | None = None
        self._observers: list[Completion[T]] = []

    def done(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Result[T] | None:
        return self._result

    def subscribe(self, observer: Completion[T]) -> None:
        if self._result is not None:
            observer(self._result)
            return
        self._observers.append(observer)

    def resolve(self, result: Result[T]) -> None:
        if self._result is not None:
            LOG.warning(
                f"AsyncResult already resolved (ok={self._result.ok()}), ignoring second resolution"
            )
            return
        self._result = result
        observers, self._observers = self._observers, []
        for observer in observers:
            try:
                observer(result)
            except Exception:
                LOG.exception(f"AsyncResult observer {observer!r} raised")

    def __await__(self) -> Generator[Any, None, Result[T]]:
        if self._result is not None:
            return self._result
        future: asyncio.Future[Result[T]] = asyncio.get_running_loop().create_future()

        def _settle(result: Result[T]) -> None:
            if not future.done():
                future.set_result(result)

        self.subscribe(_settle)
        return (yield from future.__await__())


def observe(
    start: Callable[[Completion[T]], RequestHandle | None],
) -> tuple[RequestHandle | None, AsyncResult[T]]:
    """Turn a callback-form operation into its observable form.

    ``start`` is called with the resolver of a fresh :class:`AsyncResult`,
    so both forms share the same code path.
    """
    async_result: AsyncResult[T] = AsyncResult()
    handle = start(async_result.resolve)
    return handle, async_result
