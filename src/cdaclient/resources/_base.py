from typing import TYPE_CHECKING, TypeVar

from ..client_types import Completion
from ..result import ErrorKind, Result

if TYPE_CHECKING:
    from ..client import CDAClient

T = TypeVar("T")


class ResourceAPI:
    def __init__(self, client: "CDAClient") -> None:
        self._client = client


def naming_missing(identifier: str, then: Completion[T]) -> Completion[T]:
    """Wrap ``then`` so missing-resource errors carry ``identifier``."""

    def _completion(result: Result[T]) -> None:
        error = result.error
        if error is not None and error.kind is ErrorKind.MISSING_RESOURCE and error.identifier is None:
            result = Result.reject(error.model_copy(update={"identifier": identifier}))
        then(result)

    return _completion
