"""Resource-specific API helpers for the delivery client."""

from .assets import AssetsAPI
from .content_types import ContentTypesAPI
from .entries import EntriesAPI

__all__ = [
    "AssetsAPI",
    "ContentTypesAPI",
    "EntriesAPI",
]
