"""
Key normalization for caller-supplied option mappings.

Callers may key options with plain strings, Enum members or bytes; the rest of the
arguments layer compares keys against required-argument names, which are strings.
`normalize` rewrites a structure so every mapping key, at any depth, is a string.

Notes:
    - Mutable mappings and lists are rewritten in place and returned; tuples and
      read-only mappings cannot be, so their nested mutable members are rewritten and a
      new container is returned where needed.
    - Non-mapping leaves pass through unchanged.
    - Zero-IO; stdlib only.

Examples:
    >>> from enum import Enum
    >>> from restargs.core.normalize import normalize
    >>> class Opt(Enum):
    ...     SORT = "sort"
    >>> normalize({Opt.SORT: "created", 1: [{"a": {2: "x"}}]})
    {'sort': 'created', '1': [{'a': {'2': 'x'}}]}
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any

__all__ = [
    "normalize_key",
    "normalize",
]


def normalize_key(key: Any) -> str:
    """
    Convert a mapping key to its canonical string form.

    Args:
      key (Any): Candidate key.

    Returns:
      str: ``key`` for strings, ``str(member.value)`` for Enum members, UTF-8 decoded
      text for bytes, ``str(key)`` otherwise.

    Examples:
      >>> normalize_key(b"per_page")
      'per_page'
    """
    if isinstance(key, str):
        return key
    if isinstance(key, Enum):
        return str(key.value)
    if isinstance(key, (bytes, bytearray)):
        return bytes(key).decode("utf-8", errors="backslashreplace")
    return str(key)


def normalize(value: Any) -> Any:
    """
    Recursively stringify mapping keys inside ``value``.

    Args:
      value (Any): Mapping, sequence or scalar.

    Returns:
      Any: The normalized structure (the same object for mutable mappings and lists).
    """
    if isinstance(value, MutableMapping):
        items = [(normalize_key(key), normalize(item)) for key, item in value.items()]
        value.clear()
        value.update(items)
        return value
    if isinstance(value, Mapping):
        return {normalize_key(key): normalize(item) for key, item in value.items()}
    if isinstance(value, list):
        for index, item in enumerate(value):
            value[index] = normalize(item)
        return value
    # namedtuples are records, not sequences of options; leave them alone
    if isinstance(value, tuple) and not hasattr(value, "_fields"):
        return tuple(normalize(item) for item in value)
    return value
