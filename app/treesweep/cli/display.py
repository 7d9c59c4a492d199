"""Rich display functions for sweep progress and results.

Provides the per-item progress lines, the summary table and the JSON
rendering used by the sweep command. Rendering never modifies the
ScanResult it is given.
"""

import json

from rich.markup import escape
from rich.table import Table

from treesweep.sweeper.models import (
    EntryKind,
    ErrorStage,
    ScanResult,
    SweepActionResult,
    SweepError,
)
from treesweep.utils.formatting import console, err_console, format_size, print_info, print_success


def format_action_line(result: SweepActionResult) -> str:
    """Format a per-item outcome as a progress line with Rich markup.

    Args:
        result: Successful outcome of a single action.

    Returns:
        Line such as ``✓ Deleted file: ./a.tmp (12.0 B)``.
    """
    style = "entry.directory" if result.kind == EntryKind.DIRECTORY else "entry.file"
    if result.dry_run:
        prefix = "[info]◇ Would delete[/]"
    else:
        prefix = "[success]✓ Deleted[/]"
    size = format_size(result.size_bytes)
    return (
        f"{prefix} {result.kind.value}: [{style}]{escape(result.path)}[/] "
        f"([entry.size]{size}[/])"
    )


def format_error_line(error: SweepError) -> str:
    """Format a recovered error as a line with Rich markup.

    Args:
        error: Error recovered during the sweep.

    Returns:
        Line naming the offending path and the underlying reason.
    """
    if error.stage == ErrorStage.ENUMERATE:
        action = "reading directory"
    else:
        action = "deleting"
    return f"[error]✗ Error {action}[/] {escape(error.path)}: {escape(error.message)}"


def print_action(result: SweepActionResult) -> None:
    """Print a progress line for a per-item outcome."""
    console.print(format_action_line(result), highlight=False)


def print_sweep_error(error: SweepError) -> None:
    """Print a recovered error to the error console."""
    err_console.print(format_error_line(error), highlight=False)


def create_summary_table(result: ScanResult) -> Table:
    """Create a Rich table summarizing a sweep.

    Args:
        result: Result of the sweep.

    Returns:
        Rich Table with file, directory and reclaimed-space rows.
    """
    title = "Sweep Summary (Dry Run)" if result.dry_run else "Sweep Summary"

    table = Table(
        title=title,
        show_header=False,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Metric", style="text")
    table.add_column("Value", justify="right")

    table.add_row("Files deleted", str(result.files_deleted))
    table.add_row("Directories deleted", str(result.directories_deleted))
    table.add_row("Total space freed", format_size(result.total_bytes_reclaimed))
    if result.errors:
        table.add_row("Errors", f"[error]{len(result.errors)}[/]")

    return table


def print_summary(result: ScanResult) -> None:
    """Print the summary block, elapsed time and closing hint.

    Args:
        result: Result of the sweep.
    """
    console.print()
    console.print(create_summary_table(result))

    elapsed_ms = int(result.elapsed_seconds * 1000)
    console.print(f"[muted]Cleanup completed in {elapsed_ms} ms.[/]")

    if result.is_clean:
        print_success("\n✓ Project directory is already clean!")
    elif result.dry_run:
        print_info("\nRun without --dry-run to actually delete these files.")


def render_json(result: ScanResult) -> str:
    """Render a sweep result as a JSON document.

    Args:
        result: Result of the sweep.

    Returns:
        Indented JSON string.
    """
    return json.dumps(result.to_dict(), indent=2)
