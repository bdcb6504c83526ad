"""JSON file storage for evaluation reports.

Stores EvaluationReport objects as JSON files under .pexeval/runs/ with
an index file mapping definition ids to run ids. Uses atomic writes to
prevent corruption.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pexeval.models.report import EvaluationReport

logger = logging.getLogger(__name__)


def _atomic_write(path: Path, content: str) -> None:
    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_text(content, encoding="utf-8")
    tmp_path.replace(path)


class ReportStore:
    """Persist and query EvaluationReport objects as JSON files.

    File layout:
        .pexeval/
            runs/
                {run-id}.json    # Individual evaluation reports
            index.json           # Definition id -> [run IDs] mapping

    Run IDs start with a UTC timestamp, so lexical order is chronological.
    """

    def __init__(self, project_root: Path, storage_dir: str | None = None) -> None:
        self.base_dir = project_root / (storage_dir or ".pexeval")
        self.runs_dir = self.base_dir / "runs"
        self.index_path = self.base_dir / "index.json"

    def save_report(self, report: EvaluationReport) -> str:
        """Write *report* to disk and index it under its definition id.

        Returns:
            The report's run ID.
        """
        self.runs_dir.mkdir(parents=True, exist_ok=True)
        _atomic_write(
            self.runs_dir / f"{report.run_id}.json",
            report.model_dump_json(indent=2),
        )

        index = self._load_index()
        index.setdefault(report.definition_id, []).append(report.run_id)
        self._write_index(index)
        logger.debug("saved report %s for %s", report.run_id, report.definition_id)
        return report.run_id

    def load_report(self, run_id: str) -> EvaluationReport:
        """Load a stored report.

        Raises:
            FileNotFoundError: If no report with that ID exists.
        """
        content = (self.runs_dir / f"{run_id}.json").read_text(encoding="utf-8")
        return EvaluationReport.model_validate_json(content)

    def list_reports(self, definition_id: str | None = None) -> list[str]:
        """List run IDs in chronological order, optionally for one definition."""
        if definition_id is not None:
            return sorted(self._load_index().get(definition_id, []))
        if not self.runs_dir.exists():
            return []
        return sorted(f.stem for f in self.runs_dir.glob("*.json"))

    def latest_report_id(self, definition_id: str | None = None) -> str | None:
        runs = self.list_reports(definition_id)
        return runs[-1] if runs else None

    def delete_report(self, run_id: str) -> bool:
        """Delete a report file and drop it from the index.

        Returns:
            True if the report existed and was deleted, False otherwise.
        """
        run_file = self.runs_dir / f"{run_id}.json"
        existed = run_file.exists()
        if existed:
            run_file.unlink()

        index = self._load_index()
        pruned = {
            definition_id: [r for r in runs if r != run_id]
            for definition_id, runs in index.items()
        }
        pruned = {k: v for k, v in pruned.items() if v}
        if pruned != index:
            self._write_index(pruned)
        return existed

    def _load_index(self) -> dict[str, list[str]]:
        if self.index_path.exists():
            return json.loads(self.index_path.read_text(encoding="utf-8"))
        return {}

    def _write_index(self, index: dict[str, list[str]]) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        _atomic_write(self.index_path, json.dumps(index, indent=2, ensure_ascii=False))
