"""Type definitions for delivery API resources."""

from .array import Array
from .asset import Asset
from .content_type import ContentType, Field
from .entry import Entry
from .error import DomainError
from .space import Locale, Space
from .sync import DeletedResource, SyncPage, SyncSpace
from .sys import Link, Sys

__all__ = [
    "Array",
    "Asset",
    "ContentType",
    "DeletedResource",
    "DomainError",
    "Entry",
    "Field",
    "Link",
    "Locale",
    "Space",
    "SyncPage",
    "SyncSpace",
    "Sys",
]
