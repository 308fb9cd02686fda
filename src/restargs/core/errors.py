"""
Exception types raised while normalizing and validating call arguments.

Provides typed exceptions for argument-layer failures:
- PresenceError for values that are None or blank.
- MissingArgumentError for named required keys absent from a mapping.
- ArityError for a wrong number of positional arguments.
- UnknownValueError for values outside a permitted set or pattern.

Notes:
    - All exceptions derive from ArgumentsError (a ValueError) so endpoint code can
      surface them as request-construction failures before any network IO.
    - This module uses only the Python standard library and has no side effects.

Examples:
    Catch a missing argument.

    >>> from restargs.core.errors import MissingArgumentError
    >>> try:
    ...     raise MissingArgumentError(["user"])
    ... except MissingArgumentError as e:
    ...     keys = e.keys
    >>> keys
    ('user',)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "ArgumentsError",
    "PresenceError",
    "MissingArgumentError",
    "ArityError",
    "UnknownValueError",
]


class ArgumentsError(ValueError):
    """Base class for argument normalization/validation failures."""


class PresenceError(ArgumentsError):
    """A required value is None or an empty/whitespace-only string."""


class MissingArgumentError(PresenceError):
    """
    One or more named required arguments are absent.

    Attributes:
        keys (tuple[str, ...]): Names of the absent arguments, in check order.
    """

    def __init__(self, keys: Iterable[str], message: str | None = None) -> None:
        self.keys: tuple[str, ...] = tuple(keys)
        if message is None:
            names = ", ".join(repr(k) for k in self.keys)
            message = f"missing required argument(s): {names}"
        super().__init__(message)


class ArityError(ArgumentsError):
    """
    Wrong number of positional arguments.

    Attributes:
        got (int): Number of positional arguments supplied.
        expected (int): Number of required arguments declared for the call.
    """

    def __init__(self, got: int, expected: int) -> None:
        self.got = got
        self.expected = expected
        super().__init__(f"wrong number of arguments ({got} for {expected})")


class UnknownValueError(ArgumentsError):
    """
    A parameter value is not one of the permitted values.

    Attributes:
        key (str): Parameter name.
        value (Any): Offending value.
        permitted (str): Human-readable description of what is allowed.
    """

    def __init__(self, key: str, value: Any, permitted: str) -> None:
        self.key = key
        self.value = value
        self.permitted = permitted
        super().__init__(
            f"wrong value of {value!r} for parameter {key!r}; accepted values are: {permitted}"
        )
