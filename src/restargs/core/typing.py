"""
Lightweight typing aliases used across the arguments layer.

This module contains no runtime logic and is zero-IO.

Examples:
    >>> from restargs.core.typing import ParameterMapping
    >>> def per_page(params: ParameterMapping) -> int:
    ...     return int(params.get("per_page", 30))
    >>> per_page({"per_page": "50"})
    50
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = [
    "ParameterMapping",
    "RequiredArguments",
    "Callback",
]

# Canonical options for a call: string keys only after normalization.
ParameterMapping = dict[str, Any]

RequiredArguments = tuple[str, ...]

# Trailing block handed to ArgumentParser.parse; receives the parser itself.
Callback = Callable[[Any], Any]
