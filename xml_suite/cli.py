"""Command-line interface for XML Suite."""

import logging

import typer
from rich.console import Console

from . import __version__, commands, config
from .logging_config import setup_logging
from .menu import InteractiveMenu
from .results import ERROR, CommandResult, render

app = typer.Typer(
    help="XML suite: XSD generation, XML filter creation, and validation",
    invoke_without_command=True,
)
console = Console()
err_console = Console(stderr=True)
log = logging.getLogger(__name__)


def _finish(result: CommandResult) -> None:
    render(console, result, err_console)
    if not result.ok:
        log.info("Exit %d: %s", result.exit_code, "; ".join(result.texts(ERROR)))
        raise typer.Exit(result.exit_code)


def _version_callback(value: bool):
    if value:
        console.print(f"xml-suite {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug output to stderr",
    ),
    log_file: str = typer.Option(
        config.LOG_FILE, "--log-file", help="Also write JSON logs to this file",
    ),
    json_logs: bool = typer.Option(
        False, "--json-logs", help="Emit stderr logs as JSON lines",
    ),
    version: bool = typer.Option(
        False, "--version",
        callback=_version_callback, is_eager=True,
        help="Show the version and exit",
    ),
):
    """Run a command, or the interactive menu when none is given."""
    setup_logging(
        command=ctx.invoked_subcommand or "menu",
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        log_file=log_file,
        json_format=json_logs,
    )
    if ctx.invoked_subcommand is None:
        log.debug("No subcommand, starting interactive menu")
        InteractiveMenu(console=console, err_console=err_console).run()


@app.command()
def schema(
    source: str = typer.Option(
        config.SOURCE_PATTERN, "--source", "-s", help="Source XML files pattern",
    ),
    output: str = typer.Option(
        config.SCHEMA_PATH, "--output", "-o", help="Output XSD schema file",
    ),
):
    """Generate XSD schema from existing XML filters."""
    _finish(commands.run_schema(source, output))


@app.command()
def create(
    intermediate: str = typer.Option(
        ..., "--intermediate", "-i",
        help="Intermediate JSON file (created by Claude analysis)",
    ),
    strictness: str = typer.Option(
        config.DEFAULT_STRICTNESS, "--strictness", "-s", help="Filter strictness level",
    ),
    output: str = typer.Option(
        None, "--output", "-o", help="Output XML filter file",
    ),
):
    """Create XML filter from intermediate JSON file."""
    _finish(commands.run_create(intermediate, strictness, output))


@app.command()
def validate(
    schema: str = typer.Option(
        config.SCHEMA_PATH, "--schema", "-s", help="XSD schema file",
    ),
    directory: str = typer.Option(
        config.FILTER_DIR, "--directory", "-d", help="Directory containing XML filters",
    ),
):
    """Validate all XML filters in a directory against an XSD schema."""
    _finish(commands.run_validate(schema, directory))


if __name__ == "__main__":
    app()
