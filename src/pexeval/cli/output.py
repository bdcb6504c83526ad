"""Rich terminal output for evaluation reports.

Provides the headline verdict table, the per-record result table,
the per-descriptor outcome table, and pure JSON output for CI.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

from pexeval.models.result import Status

if TYPE_CHECKING:
    from pexeval.models.report import EvaluationReport

# Status styling: status value -> (label, Rich markup style)
_STATUS_STYLES: dict[str, tuple[str, str]] = {
    "info": ("✓ info", "green"),
    "warn": ("~ warn", "yellow"),
    "error": ("✗ error", "bold red"),
}


def _format_result(result: object, limit: int = 60) -> str:
    if isinstance(result, dict) and "value" in result:
        text = f"{result.get('path', '?')} = {json.dumps(result['value'], ensure_ascii=False)}"
    else:
        text = json.dumps(result, ensure_ascii=False)
    return text if len(text) <= limit else text[: limit - 3] + "..."


def render_headline(report: EvaluationReport, console: Console) -> None:
    """Render a compact key-value table with the overall verdict."""
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")

    if report.passed:
        verdict = "[bold green]✓ SATISFIED[/bold green]"
    else:
        verdict = "[bold red]✗ UNSATISFIED[/bold red]"
    table.add_row("Verdict", verdict)
    table.add_row("Definition", report.definition_id)

    satisfied = sum(1 for o in report.outcomes if o.satisfied)
    table.add_row("Descriptors", f"{satisfied}/{len(report.outcomes)} satisfied")
    table.add_row("Credentials", str(report.credential_count))
    table.add_row(
        "Checks",
        f"{len(report.results) - report.error_count}/{len(report.results)} valid",
    )
    table.add_row("Run", report.run_id)

    console.print()
    console.print(table)


def render_results(
    report: EvaluationReport,
    console: Console,
    *,
    errors_only: bool = False,
) -> None:
    """Render one row per result record, in evaluation order."""
    records = report.results
    if errors_only:
        records = [r for r in records if r.status == Status.ERROR]
    if not records:
        return

    table = Table(box=box.ROUNDED)
    table.add_column("Descriptor")
    table.add_column("Credential")
    table.add_column("Evaluator")
    table.add_column("Status")
    table.add_column("Message")
    table.add_column("Result")

    for record in records:
        label, style = _STATUS_STYLES.get(record.status.value, ("?", "bold red"))
        table.add_row(
            record.input_descriptor_path,
            record.verifiable_credential_path,
            record.evaluator,
            f"[{style}]{label}[/{style}]",
            record.message,
            _format_result(record.payload.result),
        )

    console.print(table)


def render_outcomes(report: EvaluationReport, console: Console) -> None:
    """Render which credentials satisfy each input descriptor."""
    if not report.outcomes:
        return

    console.print("[bold]Descriptor Outcomes[/bold]")
    table = Table(box=box.SIMPLE)
    table.add_column("Descriptor")
    table.add_column("Id")
    table.add_column("Satisfied by")

    for outcome in report.outcomes:
        if outcome.satisfied:
            by = ", ".join(outcome.satisfied_by)
        else:
            by = "[red]none[/red]"
        table.add_row(outcome.input_descriptor_path, outcome.descriptor_id, by)

    console.print(table)


def output_json(report: EvaluationReport) -> None:
    """Write the report as pure JSON to stdout."""
    sys.stdout.write(report.model_dump_json(indent=2))
    sys.stdout.write("\n")
