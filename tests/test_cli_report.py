"""Tests for the pexeval report CLI command."""

import json
from pathlib import Path

from typer.testing import CliRunner

from pexeval.cli.main import app

runner = CliRunner()


def _evaluate_and_save(root: Path) -> None:
    (root / "pd.json").write_text(json.dumps({"id": "open", "input_descriptors": [{"id": "any"}]}))
    (root / "vp.json").write_text(json.dumps([{"id": "urn:uuid:1"}]))
    result = runner.invoke(app, ["evaluate", "pd.json", "vp.json", "--save"])
    assert result.exit_code == 0


class TestReportCommand:
    """Tests for pexeval report."""

    def test_no_reports(self, tmp_path: Path, monkeypatch):
        (tmp_path / "pexeval.yaml").write_text("")
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["report"])
        assert result.exit_code == 1
        assert "No stored reports" in result.output

    def test_latest_report_json(self, tmp_path: Path, monkeypatch):
        (tmp_path / "pexeval.yaml").write_text("")
        monkeypatch.chdir(tmp_path)
        _evaluate_and_save(tmp_path)

        result = runner.invoke(app, ["report", "--json"])
        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["definition_id"] == "open"
        assert report["passed"] is True

    def test_latest_report_rendered(self, tmp_path: Path, monkeypatch):
        (tmp_path / "pexeval.yaml").write_text("")
        monkeypatch.chdir(tmp_path)
        _evaluate_and_save(tmp_path)

        result = runner.invoke(app, ["report", "--definition", "open"])
        assert result.exit_code == 0
        assert "SATISFIED" in result.output

    def test_unknown_run_id(self, tmp_path: Path, monkeypatch):
        (tmp_path / "pexeval.yaml").write_text("")
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["report", "does-not-exist"])
        assert result.exit_code == 1
