"""
restargs core defaults.

Defines configuration lookup names and well-known parameter keys consumed by the
arguments layer. This module is zero-IO and uses only the Python standard library.

Notes:
    - restargs.arguments.config reads these when building ArgumentsSettings.
    - PAGINATION_KEYS is not applied by default; pass it as ``always_permitted`` to keep
      paging parameters through ``sift``.
"""

from __future__ import annotations

__all__ = [
    "ENV_PREFIX",
    "CONFIG_FILENAME",
    "CONFIG_TABLE",
    "PAGINATION_KEYS",
    "DEFAULT_LOG_LEVEL",
]

# Prefix for environment overrides (e.g., RESTARGS_LOG_LEVEL).
ENV_PREFIX: str = "RESTARGS_"

# Project-local config file searched in the working directory.
CONFIG_FILENAME: str = "restargs.toml"

# Table name inside restargs.toml; pyproject.toml uses [tool.restargs].
CONFIG_TABLE: str = "arguments"

# Paging/transport keys that most REST endpoints accept regardless of their own filters.
PAGINATION_KEYS: tuple[str, ...] = ("page", "per_page", "auto_pagination", "jsonp_callback")

DEFAULT_LOG_LEVEL: str = "WARNING"
