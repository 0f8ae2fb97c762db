"""
Protocols and shared aliases for the client and its collaborators.
"""

import asyncio
import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from .result import Result
from .types.space import Space

if TYPE_CHECKING:
    from .client import CDAClient

T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)

RequestHandle = asyncio.Task


class Completion(Protocol[T_contra]):
    """Callback receiving the single outcome of an operation."""

    def __call__(self, result: "Result[T_contra]") -> None: ...


class TransportProtocol(Protocol):
    async def execute(self, url: str) -> bytes:
        """Perform one GET and return the response body.

        Any exception raised is reported as a transport failure.
        """
        ...

    async def aclose(self) -> None: ...


@dataclass
class DecodeContext:
    space: Space | None
    client_ref: "weakref.ReferenceType[CDAClient] | None" = None

    @property
    def client(self) -> "CDAClient | None":
        return self.client_ref() if self.client_ref is not None else None


class Decoder(Protocol[T_co]):
    def __call__(self, payload: Any, context: DecodeContext) -> T_co: ...
