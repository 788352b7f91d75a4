"""Tests for RequestParams."""

import pytest

from scrapekit.errors import InvalidArgumentError
from scrapekit.params import RequestParams


class TestRequestParams:
    """Test the ordered parameter multimap."""

    def test_repeated_keys_keep_order(self):
        params = RequestParams()
        params["q"] = "a b"
        params["q"] = "c"

        assert params.query == "q=a+b&q=c"
        assert params["q"] == "a b"
        assert params.get_all("q") == ["a b", "c"]
        assert len(params) == 2

    def test_values_are_encoded(self):
        params = RequestParams({"term": "a&b", "n": 5})
        assert params.query == "term=a%26b&n=5"

    def test_unescaped_values(self):
        params = RequestParams([("t", "a&b")], values_unescaped=True)
        assert params.query == "t=a&b"

    def test_unescaped_keys(self):
        params = RequestParams([("a b", "x y")], keys_unescaped=True)
        assert params.query == "a b=x+y"

    def test_none_becomes_empty(self):
        params = RequestParams().add("flag", None)
        assert params.query == "flag="

    def test_lookup(self):
        params = RequestParams({"a": "1"})

        assert "a" in params
        assert "b" not in params
        assert params.get("b") is None
        assert params.get("b", "x") == "x"
        with pytest.raises(KeyError):
            params["b"]

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidArgumentError):
            RequestParams().add("", "x")

    def test_empty(self):
        assert RequestParams().query == ""
        assert list(RequestParams()) == []
