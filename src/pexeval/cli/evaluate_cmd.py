"""pexeval evaluate -- check a credential set against a presentation definition.

Loads and validates the definition, loads the credentials, runs the
configured handler chain, renders the result records and descriptor
outcomes, optionally stores the report, and exits with a verdict code.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from pexeval.cli.output import output_json, render_headline, render_outcomes, render_results
from pexeval.evaluation.client import EvaluationClient
from pexeval.evaluation.errors import EvaluationConfigError
from pexeval.evaluation.summary import build_report
from pexeval.loader.errors import ErrorFormatter
from pexeval.loader.validator import load_credential_set, validate_definition_file
from pexeval.loader.yaml_parser import DocumentParseError
from pexeval.models.config import find_project_root, load_project_config
from pexeval.storage.json_store import ReportStore

logger = logging.getLogger(__name__)

console = Console(stderr=True)

EXIT_SATISFIED = 0
EXIT_UNSATISFIED = 1
EXIT_INVALID_INPUT = 2


def evaluate(
    definition_path: Path = typer.Argument(..., help="Presentation definition (JSON or YAML)"),
    credentials_path: Path = typer.Argument(
        ..., help="Presentation, credential list, or single credential (JSON or YAML)"
    ),
    format_json: bool = typer.Option(False, "--json", help="Output the report as pure JSON"),
    save: bool = typer.Option(False, "--save", help="Store the report under .pexeval/runs/"),
    errors_only: bool = typer.Option(False, "--errors-only", help="Only list failing checks"),
    ci: bool = typer.Option(False, "--ci", help="CI-friendly concise error output"),
) -> None:
    """Evaluate credentials against a presentation definition's field constraints."""
    for path in (definition_path, credentials_path):
        if not path.exists():
            console.print(f"[bold red]Error:[/bold red] File not found: {escape(str(path))}")
            raise typer.Exit(code=EXIT_INVALID_INPUT)

    project_root = find_project_root(definition_path)
    project_config = load_project_config(project_root)

    definition, errors = validate_definition_file(definition_path)
    if errors:
        formatter = ErrorFormatter(ci_mode=ci or project_config.ci_mode or None)
        source = definition_path.read_text(encoding="utf-8")
        typer.echo(formatter.format_all(errors, source, str(definition_path)), err=True)
        raise typer.Exit(code=EXIT_INVALID_INPUT)

    try:
        credentials = load_credential_set(credentials_path)
    except (DocumentParseError, ValidationError) as exc:
        console.print(f"[bold red]Credential set error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_INVALID_INPUT)

    client = EvaluationClient(project_config.evaluation)
    try:
        results = client.evaluate(definition, credentials)
    except (EvaluationConfigError, ValueError) as exc:
        logger.error("evaluation aborted: %s", exc)
        console.print(f"[bold red]Definition error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_INVALID_INPUT)

    report = build_report(
        definition,
        len(credentials.verifiable_credential),
        results,
        definition_file=str(definition_path),
        credentials_file=str(credentials_path),
    )

    if save:
        store = ReportStore(project_root, project_config.storage_dir)
        store.save_report(report)

    if format_json:
        output_json(report)
    else:
        output_console = Console()
        render_headline(report, output_console)
        render_results(report, output_console, errors_only=errors_only)
        render_outcomes(report, output_console)
        if save:
            output_console.print(f"[dim]Saved report {report.run_id}[/dim]")

    raise typer.Exit(code=EXIT_SATISFIED if report.passed else EXIT_UNSATISFIED)
