"""
Unit tests for the 'limits' and 'vertices' commands.
"""

import json

from click.testing import CliRunner

from tracelink.cli.commands.limits import limits
from tracelink.cli.commands.vertices import vertices
from tracelink.config import MAX_LENGTH, MAX_LINKED_TRACES


class TestLimitsCommand:
    def test_shows_budgets(self):
        runner = CliRunner()
        result = runner.invoke(limits)

        assert result.exit_code == 0
        assert "MAX_LINKED_TRACES" in result.output
        assert str(MAX_LINKED_TRACES) in result.output
        assert str(MAX_LENGTH) in result.output


class TestVerticesCommand:
    def test_lists_vertices(self, tmp_path):
        f = tmp_path / "paths.json"
        f.write_text(json.dumps({
            "vertices": {
                "svc-a": [{"memberOf": {"traceIDs": ["1", "2"]}}],
                "svc-b": [],
            }
        }))
        runner = CliRunner()

        result = runner.invoke(vertices, ["-i", str(f)])

        assert result.exit_code == 0
        assert "svc-a" in result.output
        assert "svc-b" in result.output

    def test_filter_without_matches(self, tmp_path):
        f = tmp_path / "paths.json"
        f.write_text(json.dumps({"vertices": {"svc-a": []}}))
        runner = CliRunner()

        result = runner.invoke(vertices, ["-i", str(f), "--filter", "zzz"])

        assert result.exit_code == 0
        assert "No vertices found" in result.output

    def test_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(vertices, ["-i", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
