"""pexeval CLI entry point."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from pexeval import __version__
from pexeval.cli.evaluate_cmd import evaluate
from pexeval.cli.report_cmd import report
from pexeval.cli.validate_cmd import validate

app = typer.Typer(
    name="pexeval",
    help="Evaluate verifiable credentials against presentation definitions",
    no_args_is_help=True,
)

# Register subcommands
app.command()(evaluate)
app.command()(report)
app.command()(validate)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pexeval {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)."
    ),
) -> None:
    """Evaluate verifiable credentials against presentation definitions."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
