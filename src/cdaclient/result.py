"""
Result and error envelope shared by every operation.
"""

from enum import StrEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .types.error import DomainError

T = TypeVar("T")


class ErrorKind(StrEnum):
    INVALID_REQUEST = "invalid_request"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_PAYLOAD = "malformed_payload"
    SERVER_ERROR = "server_error"
    MISSING_RESOURCE = "missing_resource"
    PREVIEW_SYNC_FORBIDDEN = "preview_sync_forbidden"


class Error(BaseModel):
    """A failed operation. Exactly one ``kind`` applies."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ErrorKind
    errmsg: str = ""
    payload: bytes | None = Field(None, description="Raw response body for malformed payloads")
    domain_error: DomainError | None = Field(None, description="Error reported by the server")
    cause: BaseException | None = Field(None, description="Transport exception, passed through verbatim")
    identifier: str | None = Field(None, description="Identifier of a missing resource")
    status_code: int | None = None

    @classmethod
    def init(cls, kind: ErrorKind, errmsg: str = "", **kwargs: Any) -> "Error":
        return cls(kind=kind, errmsg=errmsg, **kwargs)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.errmsg}"


class CDAClientError(Exception):
    """Base exception of the package.

    Internal helpers raise subclasses of it; operations turn them into an
    :class:`Error` before delivery.
    """

    kind = ErrorKind.INVALID_REQUEST

    def __init__(self, message: str = "", error: Error | None = None) -> None:
        super().__init__(message or (error.errmsg if error else ""))
        self.error = error

    def to_error(self) -> Error:
        if self.error is not None:
            return self.error
        return Error.init(self.kind, str(self))


class InvalidRequestError(CDAClientError):
    pass


class InvalidParameterError(InvalidRequestError):
    pass


class Result(BaseModel, Generic[T]):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: T | None = None
    error: Error | None = None

    @classmethod
    def resolve(cls, data: T) -> "Result[T]":
        return cls(data=data)

    @classmethod
    def reject(cls, error: Error) -> "Result[T]":
        return cls(error=error)

    def ok(self) -> bool:
        return self.error is None

    def unpack(self) -> tuple[T | None, Error | None]:
        if self.error is not None:
            return None, self.error
        return self.data, None

    def expect(self) -> T:
        """Return the value or raise :class:`CDAClientError` with the error attached."""
        if self.error is not None:
            raise CDAClientError(error=self.error)
        return self.data
