"""Shared validation utilities for to_dict / from_dict round-trips of archive records."""

from collections.abc import Mapping


def as_str_object_dict(value: object, *, field_name: str) -> dict[str, object]:
    """Validate and normalize a mapping value into ``dict[str, object]``."""
    if not isinstance(value, Mapping):
        msg = f"{field_name} must be a mapping."
        raise TypeError(msg)
    return {str(key): item for key, item in value.items()}


def require_string(value: object, *, field_name: str) -> str:
    """Validate a required string field."""
    if not isinstance(value, str):
        msg = f"{field_name} must be a string."
        raise TypeError(msg)
    return value


def optional_int(value: object, *, field_name: str) -> int | None:
    """Validate an optional integer field (rejects booleans)."""
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"{field_name} must be an int or None."
        raise TypeError(msg)
    return value


def require_int(value: object, *, field_name: str) -> int:
    """Validate a required integer field (rejects booleans)."""
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"{field_name} must be an int."
        raise TypeError(msg)
    return value


def require_size(value: object, *, field_name: str) -> int:
    """Validate a required non-negative integer field."""
    number = require_int(value, field_name=field_name)
    if number < 0:
        msg = f"{field_name} must be >= 0."
        raise ValueError(msg)
    return number


def require_float(value: object, *, field_name: str) -> float:
    """Validate a required real-number field (rejects booleans)."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        msg = f"{field_name} must be a float."
        raise TypeError(msg)
    return float(value)


def object_list(value: object, *, field_name: str) -> list[object]:
    """Validate a JSON array field into ``list[object]``."""
    if not isinstance(value, (list, tuple)):
        msg = f"{field_name} must be a sequence."
        raise TypeError(msg)
    return list(value)
