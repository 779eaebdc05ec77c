"""
Unit tests for the 'link' command.
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from tracelink.cli.commands.link import link
from tracelink.cli.main import main
from tracelink.config import MAX_LINKED_TRACES

DOCUMENT = {
    "vertices": {
        "frontend\tHTTP GET /dispatch": [
            {"memberOf": {"traceIDs": ["t1", "t2", ""]}},
            {"memberOf": {"traceIDs": ["t2", "t3"]}},
        ],
        "mysql\tSQL SELECT": [
            {"memberOf": {"traceIDs": [f"m{i:03d}" for i in range(50)]}},
            {"memberOf": {"traceIDs": [f"n{i:03d}" for i in range(50)]}},
        ],
        "route\tempty": [],
    }
}


@pytest.fixture
def paths_file(tmp_path):
    f = tmp_path / "paths.json"
    f.write_text(json.dumps(DOCUMENT))
    return f


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.delenv("TRACELINK_URL_PREFIX", raising=False)
    monkeypatch.delenv("TRACELINK_NO_BROWSER", raising=False)
    f = tmp_path / "config.yaml"
    f.write_text("search:\n  prefix: http://jaeger:16686\n")
    return f


class TestLinkCommand:
    """Integration tests for the link CLI."""

    @patch("tracelink.cli.commands.link.webbrowser")
    def test_opens_link(self, mock_browser, paths_file, config_file):
        runner = CliRunner()

        result = runner.invoke(link, ["dispatch", "-i", str(paths_file), "-c", str(config_file)])

        assert result.exit_code == 0
        assert "3 trace(s)" in result.output
        mock_browser.open_new_tab.assert_called_once()
        url = mock_browser.open_new_tab.call_args[0][0]
        assert url.startswith("http://jaeger:16686/search?")
        assert url in result.output

    @patch("tracelink.cli.commands.link.webbrowser")
    def test_no_open(self, mock_browser, paths_file, config_file):
        runner = CliRunner()

        result = runner.invoke(link, ["dispatch", "-i", str(paths_file), "-c", str(config_file), "--no-open"])

        assert result.exit_code == 0
        mock_browser.open_new_tab.assert_not_called()
        assert "Browser disabled" in result.output

    @patch("tracelink.cli.commands.link.webbrowser")
    def test_json_output_respects_budget(self, mock_browser, paths_file, config_file):
        runner = CliRunner()

        result = runner.invoke(
            link, ["mysql", "-i", str(paths_file), "-c", str(config_file), "--json", "--no-open"]
        )

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["meta"]["status"] == "success"
        data = payload["data"]
        assert data["count"] == MAX_LINKED_TRACES
        assert len(set(data["trace_ids"])) == MAX_LINKED_TRACES
        # Equal share from the tail of each path
        assert "m049" in data["trace_ids"]
        assert "n049" in data["trace_ids"]
        assert "m000" not in data["trace_ids"]

    @patch("tracelink.cli.commands.link.webbrowser")
    def test_vertex_without_elems_is_no_op(self, mock_browser, paths_file, config_file):
        runner = CliRunner()

        result = runner.invoke(link, ["route", "-i", str(paths_file), "-c", str(config_file)])

        assert result.exit_code == 0
        assert "nothing to open" in result.output
        mock_browser.open_new_tab.assert_not_called()

    def test_unknown_vertex(self, paths_file, config_file):
        runner = CliRunner()

        result = runner.invoke(link, ["ghost", "-i", str(paths_file), "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Vertex not found: ghost" in result.output

    def test_missing_file_json(self, tmp_path, config_file):
        runner = CliRunner()

        result = runner.invoke(
            link, ["x", "-i", str(tmp_path / "missing.json"), "-c", str(config_file), "--json"]
        )

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["meta"]["status"] == "error"

    def test_registered_on_main(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        for name in ("link", "limits", "vertices"):
            assert name in result.output
