"""pexeval report -- display a stored evaluation report.

Shows the latest stored report by default, or the one named by run ID.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from pexeval.cli.output import output_json, render_headline, render_outcomes, render_results
from pexeval.models.config import find_project_root, load_project_config
from pexeval.storage.json_store import ReportStore


def report(
    run_id: Optional[str] = typer.Argument(None, help="Run ID to show (default: latest)"),
    definition: Optional[str] = typer.Option(
        None, "--definition", "-d", help="Latest report for this definition id"
    ),
    format_json: bool = typer.Option(False, "--json", help="Output the report as pure JSON"),
    errors_only: bool = typer.Option(False, "--errors-only", help="Only list failing checks"),
) -> None:
    """Show a stored evaluation report."""
    project_root = find_project_root()
    config = load_project_config(project_root)
    store = ReportStore(project_root, config.storage_dir)

    if run_id is None:
        run_id = store.latest_report_id(definition)
        if run_id is None:
            typer.echo("No stored reports found. Run 'pexeval evaluate --save' first.")
            raise typer.Exit(code=1)

    try:
        stored = store.load_report(run_id)
    except FileNotFoundError:
        typer.echo(f"Error: No report with run ID {run_id}", err=True)
        raise typer.Exit(code=1)

    if format_json:
        output_json(stored)
        return

    console = Console()
    render_headline(stored, console)
    render_results(stored, console, errors_only=errors_only)
    render_outcomes(stored, console)
