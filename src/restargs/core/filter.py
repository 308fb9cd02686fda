"""
Parameter filtering and required-key checks.

Both helpers operate in place on the mapping they are given.

Notes:
    - ``filter_keys`` with an empty ``keys`` collection is a no-op.
    - With ``recursive=True`` the same key set is applied to nested mappings, including
      mappings inside lists, for endpoints whose payloads nest option objects.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, MutableMapping
from typing import Any

from .errors import MissingArgumentError

__all__ = [
    "filter_keys",
    "assert_required_keys",
]


def _filter(allowed: set[str], value: Any, recursive: bool) -> None:
    if isinstance(value, MutableMapping):
        for key in list(value.keys()):
            if key not in allowed:
                del value[key]
            elif recursive:
                _filter(allowed, value[key], recursive)
    elif recursive and isinstance(value, list):
        for item in value:
            _filter(allowed, item, recursive)


def filter_keys(
    keys: Iterable[str],
    mapping: MutableMapping[str, Any],
    *,
    always_permitted: Iterable[str] = (),
    recursive: bool = False,
) -> MutableMapping[str, Any]:
    """
    Remove every key of ``mapping`` that is not in ``keys``.

    Args:
      keys (Iterable[str]): Keys to keep. Empty means keep everything.
      mapping (MutableMapping[str, Any]): Parameters, filtered in place.
      always_permitted (Iterable[str]): Keys never removed (e.g. pagination keys).
      recursive (bool): Also filter nested mappings with the same key set.

    Returns:
      MutableMapping[str, Any]: ``mapping`` itself.

    Examples:
      >>> filter_keys(["a"], {"a": 1, "b": 2})
      {'a': 1}
      >>> filter_keys([], {"a": 1, "b": 2})
      {'a': 1, 'b': 2}
    """
    allowed = set(keys)
    if not allowed:
        return mapping
    allowed.update(always_permitted)
    _filter(allowed, mapping, recursive)
    return mapping


def assert_required_keys(required: Iterable[str], mapping: Collection[str]) -> None:
    """
    Assert every name in ``required`` is a key of ``mapping``.

    Raises:
      MissingArgumentError: Naming the first absent key.
    """
    for key in required:
        if key not in mapping:
            raise MissingArgumentError([key], f"missing required parameter: {key!r}")
