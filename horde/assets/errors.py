"""Exceptions raised while building or validating tuning content."""
from __future__ import annotations

from typing import Any


class ContentError(Exception):
    """Base exception for the content layer."""


class ContentValidationError(ContentError):
    """Raised when a tuning table fails structural or invariant validation."""


class UpgradePathError(ContentValidationError, LookupError):
    """Raised when an upgrade step names a property that does not exist."""


def require_number(value: Any, context: str) -> float:
    """Return ``value`` if it is an int or float (bools are rejected)."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ContentValidationError(f"{context} must be a number, got {value!r}")
    return value


def require_int(value: Any, context: str) -> int:
    """Return ``value`` as an int; whole floats such as ``4.0`` are accepted."""

    number = require_number(value, context)
    if isinstance(number, float):
        if not number.is_integer():
            raise ContentValidationError(f"{context} must be a whole number, got {value!r}")
        return int(number)
    return number


def require_bool(value: Any, context: str) -> bool:
    if not isinstance(value, bool):
        raise ContentValidationError(f"{context} must be true or false, got {value!r}")
    return value


__all__ = [
    "ContentError",
    "ContentValidationError",
    "UpgradePathError",
    "require_bool",
    "require_int",
    "require_number",
]
