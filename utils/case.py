"""
snake_case -> camelCase conversion at the API boundary.

The admin UI speaks camelCase; models and services use snake_case. Keys are
converted with Pydantic's alias generator so they match schema aliases.
"""
from datetime import datetime
from typing import Any

from pydantic.alias_generators import to_camel

from utils.dates import as_utc


def to_camel_key(s: str) -> str:
    return to_camel(s)


def dict_keys_to_camel(obj: Any) -> Any:
    """Recursively camelCase dict keys (lists of dicts included)."""
    if isinstance(obj, dict):
        return {to_camel_key(k): dict_keys_to_camel(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [dict_keys_to_camel(x) for x in obj]
    return obj


def iso(value: datetime | None) -> str | None:
    """ISO 8601 with an explicit UTC offset; naive values are taken as UTC."""
    return as_utc(value).isoformat() if value else None


def row_to_camel(row: Any, fields: tuple[str, ...]) -> dict[str, Any]:
    """Pick `fields` off an ORM row into a camelCase dict; datetimes become ISO strings."""
    out: dict[str, Any] = {}
    for name in fields:
        value = getattr(row, name)
        out[to_camel_key(name)] = iso(value) if isinstance(value, datetime) else value
    return out
