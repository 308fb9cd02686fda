import pytest

from restargs.core.context import ApiRequest, RequestContext
from restargs.core.errors import ArgumentsError, ArityError, MissingArgumentError, PresenceError


class DictRequest:
    def __init__(self) -> None:
        self.values: dict[str, object] = {}

    def set(self, name: str, value: object) -> None:
        self.values[name] = value

    def get(self, name: str) -> object:
        return self.values[name]

    def has(self, name: str) -> bool:
        return name in self.values


def test_api_request_binds_attributes() -> None:
    req = ApiRequest(user="octocat")
    assert req.user == "octocat"
    assert req.has("user")
    assert not req.has("repo")
    req.set("repo", "hello-world")
    assert req.get("repo") == "hello-world"
    assert "repo='hello-world'" in repr(req)


def test_api_request_get_unknown_raises() -> None:
    with pytest.raises(AttributeError):
        ApiRequest().get("nope")


def test_protocol_is_structural() -> None:
    assert isinstance(ApiRequest(), RequestContext)
    assert isinstance(DictRequest(), RequestContext)
    assert not isinstance(object(), RequestContext)


def test_error_taxonomy() -> None:
    assert issubclass(PresenceError, ArgumentsError)
    assert issubclass(MissingArgumentError, PresenceError)
    assert issubclass(ArgumentsError, ValueError)
    err = ArityError(1, 2)
    assert (err.got, err.expected) == (1, 2)
    assert str(err) == "wrong number of arguments (1 for 2)"


def test_api_request_names_matching_its_methods() -> None:
    req = ApiRequest()
    assert not req.has("has")
    assert not req.has("get")
    assert not req.has("__class__")
    req.set("get", "x")
    req.set("has", "y")
    assert req.get("get") == "x"
    assert req.get("has") == "y"
    assert req.has("get") and req.has("has")
    assert req.bound() == {"get": "x", "has": "y"}


def test_api_request_attribute_access_reads_bound_values() -> None:
    req = ApiRequest(user="octocat")
    assert req.user == "octocat"
    with pytest.raises(AttributeError):
        req.repo
