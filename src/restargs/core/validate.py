"""
Presence and permitted-value validators.

Purpose
- Decide whether a value counts as "present" for a required argument.
- Validate parameter values against permitted collections or regular expressions.

Policy
- None is absent.
- str/bytes values are absent when empty after stripping whitespace.
- Everything else (0, False, empty containers) is present.

Notes
- Side-effect free; raises restargs.core.errors types only.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from .errors import MissingArgumentError, PresenceError, UnknownValueError

__all__ = [
    "is_blank",
    "assert_presence",
    "assert_presence_of_all",
    "assert_valid_values",
]


def is_blank(value: Any) -> bool:
    """Return True when ``value`` is None or a whitespace-only str/bytes."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray)):
        return not value.strip()
    return False


def assert_presence(*values: Any, what: str | None = None) -> None:
    """
    Assert every value is present.

    Args:
      *values (Any): Values to check, in order.
      what (str | None): Label used in the error message instead of the position.

    Raises:
      PresenceError: On the first None or blank value.
    """
    for index, value in enumerate(values):
        if is_blank(value):
            label = what or f"argument at position {index}"
            raise PresenceError(f"{label} cannot be None or empty (got {value!r})")


def assert_presence_of_all(mapping: Mapping[str, Any]) -> None:
    """
    Assert every value of a keyed batch is present.

    Args:
      mapping (Mapping[str, Any]): Name to value batch, e.g. required names read back
        from a request.

    Raises:
      MissingArgumentError: Naming every key whose value is blank.
    """
    missing = [key for key, value in mapping.items() if is_blank(value)]
    if missing:
        raise MissingArgumentError(missing)


def _describe(allowed: Any) -> str:
    if isinstance(allowed, re.Pattern):
        return allowed.pattern
    return ", ".join(str(item) for item in allowed)


def _accepts(allowed: Any, value: Any) -> bool:
    if isinstance(allowed, re.Pattern):
        return isinstance(value, str) and allowed.fullmatch(value) is not None
    if isinstance(allowed, (str, bytes)) or not isinstance(allowed, Iterable):
        raise TypeError(f"permitted values must be a collection or compiled pattern (got {allowed!r})")
    return value in allowed


def assert_valid_values(permitted: Mapping[str, Any], mapping: Mapping[str, Any]) -> None:
    """
    Check parameter values against permitted collections or patterns.

    Args:
      permitted (Mapping[str, Any]): Name to collection of accepted values, or to a
        compiled ``re.Pattern`` the value must fully match.
      mapping (Mapping[str, Any]): Parameters to check; keys absent here are skipped.

    Raises:
      UnknownValueError: On the first value that is not accepted.
      TypeError: If a permitted entry is neither a collection nor a pattern.

    Examples:
      >>> assert_valid_values({"sort": ("created", "updated")}, {"sort": "created"})
      >>> assert_valid_values({"sort": ("created",)}, {"sort": "pushed"})
      Traceback (most recent call last):
      ...
      restargs.core.errors.UnknownValueError: wrong value of 'pushed' for parameter 'sort'; accepted values are: created
    """
    for key, allowed in permitted.items():
        if key not in mapping:
            continue
        value = mapping[key]
        if not _accepts(allowed, value):
            raise UnknownValueError(key, value, _describe(allowed))
