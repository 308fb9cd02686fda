"""
Request argument parser.

ArgumentParser lets endpoint methods accept either positional arguments or a trailing
options mapping, binds the endpoint's required arguments onto the request object, and
keeps the remaining options as the canonical parameter mapping for the request.

Modes
- Positional: ``parse("octocat", "hello-world")`` binds args in required-list order and
  fails with ArityError when fewer args than required names are given.
- Options: ``parse({"user": "octocat", "per_page": 10})`` moves required keys out of the
  mapping onto the request; names already bound on the request by an earlier call
  satisfy the requirement.

Examples:
    >>> from restargs import ApiRequest, ArgumentParser
    >>> req = ApiRequest()
    >>> parser = ArgumentParser(req, {"args_required": ["user"]})
    >>> parser.parse({"user": "octocat", "sort": "created"}).params
    {'sort': 'created'}
    >>> req.user
    'octocat'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from restargs.core.context import RequestContext
from restargs.core.errors import ArityError
from restargs.core.filter import assert_required_keys, filter_keys
from restargs.core.normalize import normalize
from restargs.core.typing import Callback, ParameterMapping, RequiredArguments
from restargs.core.validate import assert_presence, assert_presence_of_all, assert_valid_values

from .config import ArgumentsSettings
from .options import ArgumentsOptions

__all__ = ["ArgumentParser"]

logger = logging.getLogger(__name__)


class ArgumentParser:
    """
    Normalize, bind and validate the arguments of one endpoint call.

    Args:
        api (RequestContext): Request object required arguments are bound onto.
        options (Mapping[str, Any] | None): Construction options; ``args_required``
            (or ``required_arguments``) lists the required names in positional order.
        settings (ArgumentsSettings | None): Parser policy; defaults when omitted.

    Raises:
        TypeError: If ``api`` does not provide set/get/has.
        pydantic.ValidationError: If ``options`` is malformed.
    """

    def __init__(
        self,
        api: RequestContext,
        options: Mapping[str, Any] | None = None,
        *,
        settings: ArgumentsSettings | None = None,
    ) -> None:
        if not isinstance(api, RequestContext):
            raise TypeError(f"api must provide set/get/has (got {type(api).__name__})")
        self._api = api
        self._settings = settings or ArgumentsSettings()
        parsed = ArgumentsOptions.model_validate(normalize(options) if options is not None else {})
        self._required: RequiredArguments = parsed.args_required
        self._arguments: tuple[Any, ...] = ()
        self._params: ParameterMapping = {}

    @property
    def api(self) -> RequestContext:
        return self._api

    @property
    def required_arguments(self) -> RequiredArguments:
        return self._required

    @property
    def settings(self) -> ArgumentsSettings:
        return self._settings

    @property
    def arguments(self) -> tuple[Any, ...]:
        """Positional arguments of the last parse (used to build request paths)."""
        return self._arguments

    @property
    def params(self) -> ParameterMapping:
        """Canonical parameters of the last parse; required keys removed."""
        return self._params

    def parse(self, *args: Any, block: Callback | None = None) -> ArgumentParser:
        """
        Parse call arguments into request attributes and canonical params.

        Args:
            *args (Any): Positional values, optionally followed by an options mapping.
            block (Callable | None): Called with this parser once parsing succeeds.

        Returns:
            ArgumentParser: self, for chaining.

        Raises:
            PresenceError: A positional value or a required option is None/blank.
            ArityError: Fewer positional values than required names.
            MissingArgumentError: A required name is bound neither now nor earlier.
        """
        positional = list(args)
        options: Any = positional.pop() if positional and isinstance(positional[-1], Mapping) else {}
        options = normalize(options)

        if positional:
            self._parse_arguments(positional)
            # positional values win over same-named options
            for key in [k for k in options if k in self._required]:
                del options[key]
        else:
            self._parse_options(options)

        self._arguments = tuple(positional)
        self._params = options
        logger.debug(
            "parsed params with keys %s",
            sorted(options),
            extra={"api": type(self._api).__name__, "mode": "positional" if positional else "options"},
        )
        if block is not None:
            block(self)
        return self

    def sift(self, keys: Iterable[str], *, recursive: bool | None = None) -> ArgumentParser:
        """Keep only ``keys`` (plus always-permitted keys) in params; empty keys is a no-op."""
        filter_keys(
            keys,
            self._params,
            always_permitted=self._settings.always_permitted,
            recursive=self._settings.recursive_sift if recursive is None else recursive,
        )
        return self

    def assert_required(self, required: Iterable[str]) -> ArgumentParser:
        assert_required_keys(required, self._params)
        return self

    def assert_values(self, permitted: Mapping[str, Any]) -> ArgumentParser:
        """Check params against permitted values; see restargs.core.validate.assert_valid_values."""
        assert_valid_values(permitted, self._params)
        return self

    def _parse_arguments(self, args: list[Any]) -> None:
        assert_presence(*args)
        # zip stops at the shorter side; extra positionals are not bound here
        for name, value in zip(self._required, args):
            self._api.set(name, value)
            logger.debug("bound %r from positional argument", name)

        got, expected = len(args), len(self._required)
        if got < expected or (got > expected and not self._settings.ignore_extra_positional):
            raise ArityError(got, expected)

    def _parse_options(self, options: ParameterMapping) -> None:
        for key in [k for k in options if k in self._required]:
            value = options[key]
            assert_presence(value, what=f"required argument {key!r}")
            del options[key]
            self._api.set(key, value)
            logger.debug("bound %r from options", key)

        bound: dict[str, Any] = {}
        for name in self._required:
            if not self._api.has(name):
                self._api.set(name, "")
            bound[name] = self._api.get(name)
        assert_presence_of_all(bound)
