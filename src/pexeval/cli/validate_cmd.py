"""pexeval validate CLI command for presentation definition files.

Validates definition documents against the Presentation Exchange
model, reporting all errors at once with annotated or CI formatting.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from pexeval.loader.errors import ErrorFormatter
from pexeval.loader.validator import validate_definition_file
from pexeval.models.config import find_project_root, load_project_config

DEFINITION_SUFFIXES = ("*.json", "*.yaml", "*.yml")


def _discover_definitions(definitions_dir: Path) -> list[Path]:
    if not definitions_dir.is_dir():
        return []
    found: list[Path] = []
    for pattern in DEFINITION_SUFFIXES:
        found.extend(definitions_dir.glob(f"**/{pattern}"))
    return sorted(found)


def validate(
    definitions: Optional[list[str]] = typer.Argument(
        None, help="Definition files to validate (default: all in definitions/)"
    ),
    ci: bool = typer.Option(False, "--ci", help="CI-friendly concise output"),
) -> None:
    """Validate presentation definition files.

    Checks JSON/YAML syntax and the definition structure, reporting all
    errors at once. Exits with code 0 if all valid, 1 if any errors.
    """
    files: list[Path] = []
    if definitions:
        for d in definitions:
            p = Path(d)
            if not p.exists():
                typer.echo(f"Error: File not found: {d}", err=True)
                raise typer.Exit(code=1)
            files.append(p)
    else:
        project_root = find_project_root()
        config = load_project_config(project_root)
        files = _discover_definitions(project_root / config.definitions_dir)
        if not files:
            typer.echo(
                "No definition files found. Specify files or create a definitions/ directory."
            )
            raise typer.Exit(code=1)

    formatter = ErrorFormatter(ci_mode=ci or None)
    valid_count = 0
    for filepath in files:
        _, errors = validate_definition_file(filepath)
        if errors:
            source = filepath.read_text(encoding="utf-8")
            typer.echo(formatter.format_all(errors, source, str(filepath)), err=not ci)
        else:
            valid_count += 1
            typer.echo(f"  {filepath} ... valid")

    typer.echo(f"\n{valid_count}/{len(files)} definitions valid")
    if valid_count < len(files):
        raise typer.Exit(code=1)
