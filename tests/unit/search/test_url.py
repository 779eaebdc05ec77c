"""Unit tests for search URL construction."""

from tracelink.search.url import (
    encoded_length,
    get_ddg_url,
    get_search_url,
    stringify_query,
    trace_ids_from_url,
)


class TestGetSearchUrl:
    def test_bare_url(self):
        assert get_search_url() == "/search"
        assert get_search_url({}) == "/search"

    def test_repeats_trace_id_param(self):
        assert get_search_url({"traceID": ["a", "b"]}) == "/search?traceID=a&traceID=b"

    def test_prefix(self):
        url = get_search_url({"traceID": ["a"]}, prefix="http://jaeger:16686/")
        assert url == "http://jaeger:16686/search?traceID=a"

    def test_keys_are_sorted(self):
        assert get_search_url({"traceID": ["a"], "end": "1"}) == "/search?end=1&traceID=a"


class TestStringifyQuery:
    def test_skips_none(self):
        assert stringify_query({"a": None, "b": "x"}) == "b=x"

    def test_sets_are_sorted(self):
        assert stringify_query({"traceID": {"b", "a"}}) == "traceID=a&traceID=b"

    def test_encodes_values(self):
        assert stringify_query({"q": "a b/c"}) == "q=a%20b%2Fc"


class TestHelpers:
    def test_encoded_length(self):
        assert encoded_length("abc") == 3
        assert encoded_length("a b") == 5

    def test_get_ddg_url_default_path(self):
        assert get_ddg_url({"service": "svc"}) == "/deep-dependencies?service=svc"

    def test_trace_ids_from_url(self):
        assert trace_ids_from_url("/search?end=1&traceID=a&traceID=b") == ["a", "b"]
        assert trace_ids_from_url("/search") == []
