"""
Pydantic model for ArgumentParser construction options.

Endpoint definitions hand the parser a loose mapping such as
``{"args_required": ["user", "repo"]}``. The model validates it and coerces every
required name to ``str`` so comparisons against normalized option keys line up.

Notes:
    - ``required_arguments`` is accepted as an alias of ``args_required``.
    - Unknown keys are ignored; endpoint definitions often carry routing options too.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from restargs.core.normalize import normalize_key

__all__ = ["ArgumentsOptions"]


class ArgumentsOptions(BaseModel):
    """
    Construction options for ArgumentParser.

    Attributes:
        args_required (tuple[str, ...]): Ordered names of arguments that must be bound
            on the request before it is sent.

    Raises:
        pydantic.ValidationError: If ``args_required`` is not a list of names.

    Examples:
        >>> from restargs.arguments.options import ArgumentsOptions
        >>> ArgumentsOptions.model_validate({"required_arguments": ["user", 1]}).args_required
        ('user', '1')
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    args_required: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("args_required", "required_arguments"),
    )

    @field_validator("args_required", mode="before")
    @classmethod
    def _stringify_names(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, (str, bytes, Enum)):
            return (normalize_key(v),)
        if isinstance(v, (list, tuple)):
            return tuple(normalize_key(name) for name in v)
        return v
