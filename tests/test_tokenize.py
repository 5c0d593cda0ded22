import pytest

from argvmap import InvalidParameterCountError, tokenize
from argvmap.core import normalize_tokens, strip_prefix


@pytest.mark.parametrize(
    "token, expected",
    [
        ("--foo", "foo"),
        ("-foo", "foo"),
        ("foo", "foo"),
        ("---foo", "-foo"),
        ("--", ""),
        ("-", ""),
    ],
)
def test_strip_prefix(token, expected):
    assert strip_prefix(token) == expected


def test_tokenize_pairs():
    assert tokenize(["--arg1", "1", "-arg2", "two", "arg3", "3.0"]) == {
        "arg1": "1",
        "arg2": "two",
        "arg3": "3.0",
    }


def test_tokenize_value_is_not_stripped():
    assert tokenize(["--delta", "-5"]) == {"delta": "-5"}


def test_tokenize_empty():
    assert tokenize([]) == {}


@pytest.mark.parametrize("tokens", [["foo"], ["--foo", "1", "--bar"]])
def test_tokenize_odd(tokens):
    with pytest.raises(InvalidParameterCountError):
        tokenize(tokens)


def test_tokenize_prefix_styles_collide():
    """Last occurrence wins."""
    assert tokenize(["--foo", "1", "-foo", "2", "foo", "3"]) == {"foo": "3"}


def test_normalize_tokens_string():
    assert normalize_tokens('--CN "example com" --days 10') == ["--CN", "example com", "--days", "10"]


def test_normalize_tokens_none():
    assert normalize_tokens(None) == []


def test_normalize_tokens_iterable():
    assert normalize_tokens(iter(("a", "b"))) == ["a", "b"]
