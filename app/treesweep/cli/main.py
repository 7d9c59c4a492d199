"""Main CLI application entry point.

Defines the Typer application: running ``treesweep`` sweeps the current
directory, ``treesweep rules`` lists what a sweep removes.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from treesweep import __version__
from treesweep.cli.display import print_action, print_summary, print_sweep_error, render_json
from treesweep.sweeper.engine import RootNotFoundError, Sweeper
from treesweep.sweeper.models import SweepActionResult
from treesweep.sweeper.rules import DEFAULT_RULES
from treesweep.utils.formatting import configure_logging, console, print_error, print_warning

app = typer.Typer(
    name="treesweep",
    help=(
        "Remove unwanted files and directories from a project tree.\n\n"
        "Removes temporary files (*.tmp, *.bak, *~, *.swp), build directories "
        "(build, debug, release, ...), IDE artifacts (.vs, .idea) and system files "
        "(.DS_Store, Thumbs.db). Source files (*.cpp, *.h, *.hpp) and project "
        "files are preserved."
    ),
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class OutputFormat(str, Enum):
    """Output format options for a sweep."""

    TABLE = "table"
    JSON = "json"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"treesweep version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Show what would be deleted without actually deleting.",
        ),
    ] = False,
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            "-r",
            help="Directory to sweep. Defaults to the current directory.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress per-item output.",
        ),
    ] = False,
) -> None:
    """Sweep the project tree rooted at the current directory."""
    configure_logging(verbose)

    if ctx.invoked_subcommand is not None:
        return

    sweep_root = (root if root is not None else Path.cwd()).absolute()
    as_json = output_format == OutputFormat.JSON

    def on_action(result: SweepActionResult) -> None:
        if not (quiet or as_json):
            print_action(result)

    if not as_json:
        root_text = escape(str(sweep_root))
        console.print(f"Starting cleanup in project directory: [bold]{root_text}[/]")
        if dry_run:
            print_warning("DRY RUN MODE - No files will be deleted")
        console.print("Scanning for unwanted files and directories...\n")

    sweeper = Sweeper(
        DEFAULT_RULES,
        dry_run=dry_run,
        on_action=on_action,
        on_error=print_sweep_error,
    )
    try:
        result = sweeper.run(sweep_root)
    except RootNotFoundError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if as_json:
        typer.echo(render_json(result))
        return

    print_summary(result)


@app.command()
def rules() -> None:
    """List the rules deciding what a sweep removes."""
    table = Table(
        title="Sweep Rules",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Rule", style="text", no_wrap=True)
    table.add_column("Matches", style="muted")
    table.add_column("Values")

    table.add_row("Directory names", "basename, any case", _join(DEFAULT_RULES.directory_names))
    table.add_row("Extensions", "extension, any case", _join(DEFAULT_RULES.extensions))
    table.add_row("Suffixes", "end of filename, exact case", _join(DEFAULT_RULES.suffix_patterns))
    table.add_row("System files", "filename, any case", _join(DEFAULT_RULES.system_files))
    table.add_row("Exact names", "filename, exact case", _join(DEFAULT_RULES.exact_names))

    console.print(table)


def _join(values: frozenset[str]) -> str:
    """Join rule values in a stable order."""
    return ", ".join(sorted(values))


if __name__ == "__main__":
    app()
