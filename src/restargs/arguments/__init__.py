"""
restargs.arguments — the argument parser and its ambient configuration.

## Public API
- ArgumentParser — parse/sift/assert_required/assert_values over one endpoint call.
- ArgumentsOptions — pydantic model for construction options (args_required).
- ArgumentsSettings — parser policy loaded with env > TOML > defaults precedence.
- configure_logging — opt-in JSON-lines handler for the ``restargs`` logger.

## Import DAG discipline
- Depends on stdlib, pydantic, python-dotenv and restargs.core.*.
"""

from __future__ import annotations

from .config import ArgumentsSettings
from .log import configure_logging
from .options import ArgumentsOptions
from .parser import ArgumentParser

__all__ = [
    "ArgumentParser",
    "ArgumentsOptions",
    "ArgumentsSettings",
    "configure_logging",
]
