"""
restargs.core — zero-IO building blocks for argument handling.

## Contracts
- Errors — PresenceError, MissingArgumentError, ArityError, UnknownValueError.
- Normalize — deep key stringification for option mappings.
- Validate — presence checks and permitted-value checks.
- Filter — in-place key filtering and required-key assertions.
- Context — the RequestContext capability protocol and ApiRequest.

## Notes
- Stdlib only; no logging or configuration here (see restargs.arguments).
- Functions mutate only the mappings they are handed.

## Examples
```python
from restargs.core import normalize, filter_keys, assert_required_keys
params = normalize({b"per_page": 10, "sort": "created"})
filter_keys(["sort"], params)  # {'sort': 'created'}
assert_required_keys(["sort"], params)
```
"""

from __future__ import annotations

from .context import ApiRequest, RequestContext
from .errors import (
    ArgumentsError,
    ArityError,
    MissingArgumentError,
    PresenceError,
    UnknownValueError,
)
from .filter import assert_required_keys, filter_keys
from .normalize import normalize, normalize_key
from .validate import assert_presence, assert_presence_of_all, assert_valid_values, is_blank

__all__ = [
    "ApiRequest",
    "RequestContext",
    "ArgumentsError",
    "ArityError",
    "MissingArgumentError",
    "PresenceError",
    "UnknownValueError",
    "assert_required_keys",
    "filter_keys",
    "normalize",
    "normalize_key",
    "assert_presence",
    "assert_presence_of_all",
    "assert_valid_values",
    "is_blank",
]
