"""
Request context capability used by the argument parser.

The parser binds required argument values onto the object representing the in-flight
API call. It only needs three capabilities from that object, captured by the
`RequestContext` protocol: ``set(name, value)``, ``get(name)`` and ``has(name)``.

`ApiRequest` is a minimal implementation keeping bound values in its own store and
exposing them as attributes, so endpoint code can read ``request.user`` after parsing.

Examples:
    >>> from restargs.core.context import ApiRequest, RequestContext
    >>> req = ApiRequest(user="octocat")
    >>> isinstance(req, RequestContext)
    True
    >>> req.set("repo", "hello-world")
    >>> req.get("repo"), req.has("branch")
    ('hello-world', False)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = [
    "RequestContext",
    "ApiRequest",
]


@runtime_checkable
class RequestContext(Protocol):
    """Named-value store the parser binds required arguments onto."""

    def set(self, name: str, value: Any) -> None: ...

    def get(self, name: str) -> Any: ...

    def has(self, name: str) -> bool: ...


class ApiRequest:
    """
    Request context keeping bound values in its own store.

    Bound names are readable as attributes (``request.user``) but never shadow the
    request's own methods, so a required argument may be called ``get`` or ``has``.
    ``get`` of an unknown name raises AttributeError like normal attribute access.
    """

    def __init__(self, **attributes: Any) -> None:
        self._values: dict[str, Any] = {}
        for name, value in attributes.items():
            self.set(name, value)

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def get(self, name: str) -> Any:
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no bound argument {name!r}") from None

    def has(self, name: str) -> bool:
        return name in self._values

    def __getattr__(self, name: str) -> Any:
        # only reached when regular lookup fails
        values = self.__dict__.get("_values", {})
        if name in values:
            return values[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def bound(self) -> dict[str, Any]:
        """Copy of the bound name to value store."""
        return dict(self._values)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"{type(self).__name__}({fields})"
