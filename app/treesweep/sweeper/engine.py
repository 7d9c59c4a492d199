"""Sweep traversal engine.

Walks a project tree depth-first. Each directory is handled in three
passes: enumeration (classify children, recurse into kept
subdirectories), sizing (measure every unwanted child before any
mutation) and action (delete or report each unwanted child). An entry
classified as unwanted is never descended into.
"""

import logging
import time
from collections.abc import Callable
from pathlib import Path

from treesweep.sweeper.models import (
    EntryKind,
    ErrorStage,
    PendingAction,
    ScanResult,
    SweepActionResult,
    SweepError,
)
from treesweep.sweeper.operator import SweepOperator
from treesweep.sweeper.rules import DEFAULT_RULES, ClassificationRules, Classifier
from treesweep.sweeper.sizing import measure_size

logger = logging.getLogger(__name__)

ActionCallback = Callable[[SweepActionResult], None]
ErrorCallback = Callable[[SweepError], None]


class SweeperError(Exception):
    """Base exception for fatal sweep errors."""


class RootNotFoundError(SweeperError):
    """Raised when the sweep root is missing or not a directory."""


class Sweeper:
    """Finds and removes unwanted entries beneath a root directory.

    Args:
        rules: Classification rules to apply. Defaults to DEFAULT_RULES.
        dry_run: If True, report matches without touching the filesystem.
        on_action: Called with each successful per-item outcome as it happens.
        on_error: Called with each recovered error as it happens.
    """

    def __init__(
        self,
        rules: ClassificationRules = DEFAULT_RULES,
        *,
        dry_run: bool = False,
        on_action: ActionCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._classifier = Classifier(rules)
        self._operator = SweepOperator(dry_run=dry_run)
        self._on_action = on_action
        self._on_error = on_error

    @property
    def dry_run(self) -> bool:
        """Whether the sweep suppresses filesystem mutation."""
        return self._operator.dry_run

    def run(self, root: Path) -> ScanResult:
        """Sweep a directory tree.

        Args:
            root: Directory to sweep.

        Returns:
            ScanResult with counters, per-item outcomes and recovered errors.

        Raises:
            RootNotFoundError: If root does not exist or is not a directory.
        """
        if not root.is_dir():
            msg = f"Directory does not exist: {root}"
            raise RootNotFoundError(msg)

        result = ScanResult(root=str(root), dry_run=self.dry_run)
        logger.debug("Sweeping %s (dry_run=%s)", root, self.dry_run)

        start = time.perf_counter()
        self._clean_directory(root, result)
        result.elapsed_seconds = time.perf_counter() - start

        logger.debug(
            "Sweep finished: %d file(s), %d directory(ies), %d bytes, %d error(s)",
            result.files_deleted,
            result.directories_deleted,
            result.total_bytes_reclaimed,
            len(result.errors),
        )
        return result

    def _clean_directory(self, directory: Path, result: ScanResult) -> None:
        """Run the enumerate, size and act passes on one directory."""
        children = self._list_children(directory, result)
        if children is None:
            return

        batch: list[tuple[Path, EntryKind]] = []
        try:
            for child in children:
                if self._classifier.is_unwanted(child):
                    batch.append((child, _kind_of(child)))
                elif child.is_dir() and not child.is_symlink():
                    self._clean_directory(child, result)
        except OSError as e:
            self._record_enumerate_error(directory, e, result)
            return

        pending = [
            PendingAction(path=str(path), kind=kind, size_bytes=measure_size(path))
            for path, kind in batch
        ]

        for action in pending:
            outcome = self._operator.remove(action)
            result.record(outcome)
            if outcome.success:
                if self._on_action is not None:
                    self._on_action(outcome)
            elif self._on_error is not None:
                self._on_error(result.errors[-1])

    def _list_children(self, directory: Path, result: ScanResult) -> list[Path] | None:
        """List a directory's immediate children.

        The directory handle is closed before the caller recurses.

        Returns:
            Child paths, or None if the directory could not be read.
        """
        try:
            return list(directory.iterdir())
        except OSError as e:
            self._record_enumerate_error(directory, e, result)
            return None

    def _record_enumerate_error(self, directory: Path, exc: OSError, result: ScanResult) -> None:
        """Record a directory whose children could not be listed or inspected."""
        error = SweepError(
            path=str(directory),
            stage=ErrorStage.ENUMERATE,
            message=exc.strerror or str(exc),
        )
        logger.debug("Cannot read directory %s: %s", directory, exc)
        result.errors.append(error)
        if self._on_error is not None:
            self._on_error(error)


def _kind_of(path: Path) -> EntryKind:
    """Kind of an unwanted entry; anything resolving to a directory is a directory."""
    if path.is_dir():
        return EntryKind.DIRECTORY
    return EntryKind.FILE
