from enum import Enum
from types import MappingProxyType

import pytest

from restargs import ApiRequest, ArgumentParser
from restargs.core.errors import MissingArgumentError, PresenceError


class Key(Enum):
    NAME = "name"
    OTHER = "other"


def test_required_key_moves_from_options_to_request() -> None:
    req = ApiRequest()
    parser = ArgumentParser(req, {"args_required": ["name"]})
    parser.parse({"name": "x", "other": "y"})
    assert req.get("name") == "x"
    assert parser.params == {"other": "y"}
    assert parser.arguments == ()


def test_enum_and_string_keys_produce_identical_params() -> None:
    a = ArgumentParser(ApiRequest()).parse({"a": 1, "other": "y"})
    b = ArgumentParser(ApiRequest()).parse({Enum("K", {"A": "a"}).A: 1, Key.OTHER: "y"})
    assert a.params == b.params == {"a": 1, "other": "y"}


def test_enum_keyed_required_argument_is_extracted() -> None:
    req = ApiRequest()
    parser = ArgumentParser(req, {"args_required": ["name"]}).parse({Key.NAME: "x"})
    assert req.name == "x"
    assert parser.params == {}


def test_missing_required_option_names_absent_keys() -> None:
    req = ApiRequest()
    parser = ArgumentParser(req, {"args_required": ["user", "repo"]})
    with pytest.raises(MissingArgumentError) as exc:
        parser.parse({"user": "octocat"})
    assert exc.value.keys == ("repo",)
    # placeholder created for the absent name
    assert req.repo == ""


def test_blank_required_option_raises_presence_error() -> None:
    parser = ArgumentParser(ApiRequest(), {"args_required": ["user"]})
    with pytest.raises(PresenceError, match="'user'"):
        parser.parse({"user": "  "})


def test_previously_bound_value_satisfies_requirement() -> None:
    req = ApiRequest()
    parser = ArgumentParser(req, {"args_required": ["name"]})
    parser.parse({"name": "x"})
    parser.parse({})
    parser.parse({})
    assert req.name == "x"
    assert parser.params == {}


def test_prebound_request_attribute_satisfies_requirement() -> None:
    req = ApiRequest(user="octocat")
    ArgumentParser(req, {"args_required": ["user"]}).parse()
    assert req.user == "octocat"


def test_params_replaced_on_each_parse() -> None:
    parser = ArgumentParser(ApiRequest())
    parser.parse({"a": 1})
    parser.parse({"b": 2})
    assert parser.params == {"b": 2}


def test_trailing_mapping_is_normalized_in_place() -> None:
    opts = {Key.OTHER: "y", "name": "x"}
    parser = ArgumentParser(ApiRequest(), {"args_required": ["name"]}).parse(opts)
    assert parser.params is opts
    assert opts == {"other": "y"}


def test_read_only_mapping_is_copied() -> None:
    opts = MappingProxyType({"name": "x", "other": "y"})
    req = ApiRequest()
    parser = ArgumentParser(req, {"args_required": ["name"]}).parse(opts)
    assert parser.params == {"other": "y"}
    assert dict(opts) == {"name": "x", "other": "y"}
    assert req.name == "x"


def test_block_receives_parser_after_parse() -> None:
    seen = []
    parser = ArgumentParser(ApiRequest(), {"args_required": ["user"]})
    out = parser.parse(
        {"user": "octocat", "sort": "created", "junk": 1},
        block=lambda p: seen.append(p.sift(["sort"]).params.copy()),
    )
    assert out is parser
    assert seen == [{"sort": "created"}]
    assert parser.params == {"sort": "created"}


def test_block_not_called_when_validation_fails() -> None:
    calls = []
    parser = ArgumentParser(ApiRequest(), {"args_required": ["user"]})
    with pytest.raises(MissingArgumentError):
        parser.parse({}, block=calls.append)
    assert calls == []


def test_required_name_matching_request_method_must_be_supplied() -> None:
    req = ApiRequest()
    parser = ArgumentParser(req, {"args_required": ["has"]})
    with pytest.raises(MissingArgumentError) as exc:
        parser.parse({})
    assert exc.value.keys == ("has",)
    parser.parse({"has": "value"})
    assert req.get("has") == "value"
