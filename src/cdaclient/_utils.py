from collections.abc import Mapping
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any
from uuid import UUID

from .result import InvalidParameterError

ISO8601_GMT = "%Y-%m-%dT%H:%M:%SZ"

_SCALARS = (str, int, float, Decimal, UUID)


def _format_date(value: date) -> str:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime(ISO8601_GMT)
    return value.strftime("%Y-%m-%d")


def _format_scalar(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return _format_date(value)
    if isinstance(value, _SCALARS):
        return str(value)
    raise InvalidParameterError(
        f"parameter {key!r} has unsupported value of type {type(value).__name__}"
    )


def stringify(key: str, value: Any) -> str:
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_format_scalar(key, item) for item in value)
    return _format_scalar(key, value)


def build_params(params: Mapping[str, Any] | None = None, **kwargs: Any) -> dict[str, str]:
    """Stringify query parameters for the wire, keeping insertion order.

    ``None`` values are dropped. Dates become ISO 8601 GMT text and
    collections become comma-joined text.

    Raises:
        InvalidParameterError: If a key is not a string or a value is not a
            scalar, a date, or a collection of those.
    """
    merged: dict[str, Any] = dict(params or {})
    merged.update(kwargs)
    built: dict[str, str] = {}
    for key, value in merged.items():
        if not isinstance(key, str) or not key:
            raise InvalidParameterError(f"parameter key {key!r} must be a non-empty string")
        if value is None:
            continue
        built[key] = stringify(key, value)
    return built
