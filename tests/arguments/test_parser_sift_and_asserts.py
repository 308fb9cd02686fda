import re

import pytest
from pydantic import ValidationError

from restargs import ApiRequest, ArgumentParser, ArgumentsSettings
from restargs.core.constants import PAGINATION_KEYS
from restargs.core.errors import MissingArgumentError, UnknownValueError


def test_sift_filters_params() -> None:
    parser = ArgumentParser(ApiRequest()).parse({"a": 1, "b": 2})
    assert parser.sift(["a"]) is parser
    assert parser.params == {"a": 1}


def test_sift_empty_keys_is_noop() -> None:
    parser = ArgumentParser(ApiRequest()).parse({"a": 1, "b": 2})
    parser.sift([])
    assert parser.params == {"a": 1, "b": 2}


def test_sift_honours_always_permitted_setting() -> None:
    settings = ArgumentsSettings(always_permitted=PAGINATION_KEYS)
    parser = ArgumentParser(ApiRequest(), settings=settings)
    parser.parse({"a": 1, "b": 2, "page": 2, "per_page": 100}).sift(["a"])
    assert parser.params == {"a": 1, "page": 2, "per_page": 100}


def test_sift_recursive_from_setting_and_override() -> None:
    parser = ArgumentParser(ApiRequest(), settings=ArgumentsSettings(recursive_sift=True))
    parser.parse({"a": {"a": 1, "b": 2}}).sift(["a"])
    assert parser.params == {"a": {"a": 1}}

    parser.parse({"a": {"a": 1, "b": 2}}).sift(["a"], recursive=False)
    assert parser.params == {"a": {"a": 1, "b": 2}}


def test_assert_required_passes_and_chains() -> None:
    parser = ArgumentParser(ApiRequest()).parse({"a": 1})
    assert parser.assert_required(["a"]) is parser


def test_assert_required_names_missing_key() -> None:
    parser = ArgumentParser(ApiRequest()).parse({"a": 1})
    with pytest.raises(MissingArgumentError) as exc:
        parser.assert_required(["missing"])
    assert exc.value.keys == ("missing",)
    assert "missing" in str(exc.value)


def test_assert_values() -> None:
    parser = ArgumentParser(ApiRequest()).parse({"state": "open", "sha": "abc1234"})
    permitted = {"state": ("open", "closed", "all"), "sha": re.compile(r"[0-9a-f]{7,40}")}
    assert parser.assert_values(permitted) is parser
    parser.parse({"state": "merged"})
    with pytest.raises(UnknownValueError):
        parser.assert_values(permitted)


def test_chained_endpoint_flow() -> None:
    req = ApiRequest()
    parser = (
        ArgumentParser(req, {"required_arguments": ["user", "repo"]})
        .parse("octocat", "hello-world", {"title": "Bug", "body": "text", "junk": 1})
        .sift(["title", "body"])
        .assert_required(["title"])
    )
    assert (req.user, req.repo) == ("octocat", "hello-world")
    assert parser.params == {"title": "Bug", "body": "text"}


def test_construction_options() -> None:
    parser = ArgumentParser(ApiRequest(), {b"args_required": ["user", 2]})
    assert parser.required_arguments == ("user", "2")
    assert ArgumentParser(ApiRequest()).required_arguments == ()
    assert ArgumentParser(ApiRequest(), {"args_required": "user"}).required_arguments == ("user",)


def test_construction_rejects_bad_inputs() -> None:
    with pytest.raises(TypeError):
        ArgumentParser(object())  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        ArgumentParser(ApiRequest(), {"args_required": 5})


def test_required_arguments_are_immutable() -> None:
    parser = ArgumentParser(ApiRequest(), {"args_required": ["user"]})
    with pytest.raises(AttributeError):
        parser.required_arguments = ("other",)  # type: ignore[misc]
    assert isinstance(parser.required_arguments, tuple)
