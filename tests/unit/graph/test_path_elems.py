"""Unit tests for the JSON-backed path element provider."""

import json

import pytest

from tracelink.core.exceptions import InvalidPathElemsError, PathElemsNotFoundError
from tracelink.graph.path_elems import PathElemIndex, load_path_elems

DOCUMENT = {
    "vertices": {
        "frontend\tGET /dispatch": [
            {"memberOf": {"traceIDs": ["a", "b", ""]}, "service": "frontend", "operation": "GET /dispatch"},
            {"memberOf": {"traceIDs": ["b", "c"]}, "distance": 1},
        ],
        "driver\tFindNearest": [
            {"memberOf": {"traceIDs": ["d"]}},
        ],
    }
}


class TestPathElemIndex:
    @pytest.fixture
    def index(self):
        return PathElemIndex.from_dict(DOCUMENT)

    def test_get_visible_path_elems(self, index):
        elems = index.get_visible_path_elems("frontend\tGET /dispatch")

        assert len(elems) == 2
        assert elems[0].trace_ids == ["a", "b", ""]
        assert elems[0].service == "frontend"
        assert elems[1].distance == 1

    def test_unknown_vertex_returns_none(self, index):
        assert index.get_visible_path_elems("nope") is None

    def test_find_keys_case_insensitive(self, index):
        assert index.find_keys("DRIVER") == ["driver\tFindNearest"]
        assert index.find_keys("zzz") == []

    def test_trace_count_ignores_empty_and_duplicates(self, index):
        assert index.trace_count("frontend\tGET /dispatch") == 3
        assert index.trace_count("missing") == 0

    def test_invalid_document(self):
        with pytest.raises(InvalidPathElemsError):
            PathElemIndex.from_dict({"vertices": {"k": [{"service": "no memberOf"}]}})


class TestLoadPathElems:
    def test_load_from_file(self, tmp_path):
        f = tmp_path / "paths.json"
        f.write_text(json.dumps(DOCUMENT))

        index = load_path_elems(f)
        assert sorted(index.keys()) == sorted(DOCUMENT["vertices"])

    def test_missing_file(self, tmp_path):
        with pytest.raises(PathElemsNotFoundError) as exc_info:
            load_path_elems(tmp_path / "missing.json")
        assert "missing.json" in str(exc_info.value)

    def test_malformed_json(self, tmp_path):
        f = tmp_path / "paths.json"
        f.write_text("{not json")

        with pytest.raises(InvalidPathElemsError):
            load_path_elems(f)

    def test_non_object_json(self, tmp_path):
        f = tmp_path / "paths.json"
        f.write_text("[]")

        with pytest.raises(InvalidPathElemsError, match="expected a JSON object"):
            load_path_elems(f)
