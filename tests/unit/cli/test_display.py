"""Unit tests for sweep display functions."""

import json
from unittest.mock import patch

from rich.console import Console
from rich.table import Table
from treesweep.cli.display import (
    create_summary_table,
    format_action_line,
    format_error_line,
    print_summary,
    render_json,
)
from treesweep.core.theme import get_theme
from treesweep.sweeper.models import (
    EntryKind,
    ErrorStage,
    ScanResult,
    SweepActionResult,
    SweepError,
)


def _render(renderable: object) -> str:
    """Render a Rich object to plain text."""
    console = Console(theme=get_theme(), record=True, width=200)
    console.print(renderable)
    return console.export_text()


def _action(
    path: str = "/p/a.tmp",
    kind: EntryKind = EntryKind.FILE,
    size: int = 1536,
    dry_run: bool = False,
) -> SweepActionResult:
    return SweepActionResult(path=path, kind=kind, size_bytes=size, success=True, dry_run=dry_run)


class TestFormatActionLine:
    """Tests for format_action_line."""

    def test_deleted_file(self) -> None:
        line = _render(format_action_line(_action()))
        assert "✓ Deleted file: /p/a.tmp (1.5 KB)" in line

    def test_would_delete_directory(self) -> None:
        line = _render(
            format_action_line(_action("/p/build", EntryKind.DIRECTORY, 100, dry_run=True))
        )
        assert "◇ Would delete directory: /p/build (100.0 B)" in line

    def test_path_markup_is_escaped(self) -> None:
        """Brackets in paths are shown literally."""
        line = _render(format_action_line(_action("/p/[bold]x.tmp")))
        assert "/p/[bold]x.tmp" in line


class TestFormatErrorLine:
    """Tests for format_error_line."""

    def test_delete_error(self) -> None:
        error = SweepError(path="/p/locked.tmp", stage=ErrorStage.DELETE, message="busy")
        assert "✗ Error deleting /p/locked.tmp: busy" in _render(format_error_line(error))

    def test_enumerate_error(self) -> None:
        error = SweepError(path="/p/secret", stage=ErrorStage.ENUMERATE, message="denied")
        text = _render(format_error_line(error))
        assert "reading directory /p/secret: denied" in text


class TestSummary:
    """Tests for the summary table and block."""

    def _result(self, dry_run: bool = False) -> ScanResult:
        result = ScanResult(root="/p", dry_run=dry_run, elapsed_seconds=0.0421)
        result.record(_action(size=2048))
        result.record(_action("/p/build", EntryKind.DIRECTORY, 3 * 1024 * 1024))
        return result

    def test_table_rows(self) -> None:
        table = create_summary_table(self._result())
        assert isinstance(table, Table)
        assert table.title == "Sweep Summary"

        text = _render(table)
        assert "Files deleted" in text
        assert "Directories deleted" in text
        assert "3.0 MB" in text
        assert "Errors" not in text

    def test_dry_run_title(self) -> None:
        assert create_summary_table(self._result(dry_run=True)).title == "Sweep Summary (Dry Run)"

    def test_errors_row(self) -> None:
        result = self._result()
        result.errors.append(SweepError(path="/p/x", stage=ErrorStage.DELETE, message="busy"))
        assert "Errors" in _render(create_summary_table(result))

    def test_reporting_is_read_only(self) -> None:
        result = self._result()
        before = result.to_dict()

        recorder = Console(theme=get_theme(), record=True, width=200)
        with patch("treesweep.cli.display.console", recorder):
            create_summary_table(result)
            render_json(result)
            print_summary(result)

        assert result.to_dict() == before
        text = recorder.export_text()
        assert "Cleanup completed in 42 ms." in text

    def test_render_json(self) -> None:
        data = json.loads(render_json(self._result()))
        assert data["summary"]["files_deleted"] == 1
        assert data["summary"]["directories_deleted"] == 1
        assert data["summary"]["total_bytes_reclaimed"] == 2048 + 3 * 1024 * 1024
