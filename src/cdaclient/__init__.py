"""
Python client for a content delivery API.
"""

from importlib import metadata as _metadata

from .async_result import AsyncResult, observe
from .client import CDAClient
from .config import ClientConfig
from .log import LOG, configure_logging
from .resources import AssetsAPI, ContentTypesAPI, EntriesAPI
from .result import (
    CDAClientError,
    Error,
    ErrorKind,
    InvalidParameterError,
    InvalidRequestError,
    Result,
)
from .space_cache import SpaceCache
from .sync import SyncEngine
from .transport import HttpxTransport, TransportError

__all__ = [
    "CDAClient",
    "ClientConfig",
    "AsyncResult",
    "observe",
    "Result",
    "Error",
    "ErrorKind",
    "CDAClientError",
    "InvalidRequestError",
    "InvalidParameterError",
    "SpaceCache",
    "SyncEngine",
    "EntriesAPI",
    "AssetsAPI",
    "ContentTypesAPI",
    "HttpxTransport",
    "TransportError",
    "LOG",
    "configure_logging",
    "__version__",
]

try:
    __version__ = _metadata.version("cdaclient")
except _metadata.PackageNotFoundError:  # pragma: no cover - local/checkout usage
    __version__ = "0.0.0"
