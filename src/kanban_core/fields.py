"""Structural checks for JSON-shaped records.

These check presence and type only. Whether a value makes sense for the
board is decided by the store.
"""

from typing import Any

from kanban_core.errors import InvalidArgument

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_MISSING = object()


def record(value: Any, where: str) -> dict:
    """Require value to be a JSON object."""
    if not isinstance(value, dict):
        raise InvalidArgument(f"{where} must be an object")
    return value


def int_field(data: dict, *keys: str, where: str) -> int:
    """Return the first present key as a 64-bit signed integer."""
    value = _first(data, keys)
    if value is _MISSING:
        raise InvalidArgument(f"{where}.{keys[0]} is required")
    # bool is an int subclass; true/false are never ids
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{where}.{keys[0]} must be an integer")
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidArgument(f"{where}.{keys[0]} is out of range")
    return value


def optional_int_field(data: dict, key: str, where: str) -> int | None:
    if data.get(key) is None:
        return None
    return int_field(data, key, where=where)


def str_field(data: dict, key: str, where: str) -> str:
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise InvalidArgument(f"{where}.{key} is required")
    if not isinstance(value, str):
        raise InvalidArgument(f"{where}.{key} must be a string")
    return value


def optional_str_field(data: dict, key: str, where: str) -> str | None:
    if data.get(key) is None:
        return None
    return str_field(data, key, where)


def _first(data: dict, keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return _MISSING
