"""Sweep domain models.

This module defines the data structures passed between the traversal
engine, the deletion operator and the reporter: entry kinds, pending
actions collected per directory, per-item outcomes, recovered errors
and the run-wide scan result.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EntryKind(str, Enum):
    """Kind of an unwanted filesystem entry.

    Attributes:
        FILE: Regular file (or anything that is not a directory).
        DIRECTORY: Directory removed as a single unit.
    """

    FILE = "file"
    DIRECTORY = "directory"


class ErrorStage(str, Enum):
    """Phase of the sweep in which a recovered error occurred.

    Attributes:
        ENUMERATE: Listing a directory's children failed; subtree skipped.
        DELETE: Removing a batch entry failed; entry left in place.
    """

    ENUMERATE = "enumerate"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class PendingAction:
    """Unwanted entry discovered during a directory's enumeration pass.

    Attributes:
        path: Path of the entry.
        kind: Whether the entry is removed as a file or a directory.
        size_bytes: Size measured before any mutation (0 if unavailable).
    """

    path: str
    kind: EntryKind
    size_bytes: int = 0

    def __post_init__(self) -> None:
        """Validate pending action data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.size_bytes < 0:
            msg = f"Size cannot be negative, got {self.size_bytes}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class SweepActionResult:
    """Outcome of acting on a single pending action.

    Attributes:
        path: Path that was operated on.
        kind: Kind of the entry.
        size_bytes: Bytes reclaimed (or that would be reclaimed).
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    kind: EntryKind
    size_bytes: int
    success: bool
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the action failed."""
        return not self.success


@dataclass(frozen=True, slots=True)
class SweepError:
    """An error that was recovered from during the sweep.

    Attributes:
        path: Path the error relates to.
        stage: Phase in which the error occurred.
        message: Underlying reason.
    """

    path: str
    stage: ErrorStage
    message: str


@dataclass(slots=True)
class ScanResult:
    """Accumulated outcome of one sweep run.

    Owned by a single ``Sweeper.run`` invocation and never shared.

    Attributes:
        root: Root directory of the sweep.
        dry_run: Whether the run suppressed filesystem mutation.
        files_deleted: Files deleted (or that would be deleted).
        directories_deleted: Directories deleted (or that would be deleted).
        total_bytes_reclaimed: Sum of sizes of the counted batch entries.
        actions: Successful per-item outcomes, in processing order.
        errors: Errors recovered from during the run.
        elapsed_seconds: Wall-clock duration of the run.
    """

    root: str
    dry_run: bool = False
    files_deleted: int = 0
    directories_deleted: int = 0
    total_bytes_reclaimed: int = 0
    actions: list[SweepActionResult] = field(default_factory=lambda: [])
    errors: list[SweepError] = field(default_factory=lambda: [])
    elapsed_seconds: float = 0.0

    @property
    def items_deleted(self) -> int:
        """Total number of counted entries."""
        return self.files_deleted + self.directories_deleted

    @property
    def is_clean(self) -> bool:
        """Check if the sweep found nothing to remove."""
        return self.items_deleted == 0

    def record(self, result: SweepActionResult) -> None:
        """Add a per-item outcome to the counters.

        Failed outcomes are kept out of the counters and stored as
        errors instead.

        Args:
            result: Outcome of a single action.
        """
        if result.failed:
            self.errors.append(
                SweepError(
                    path=result.path,
                    stage=ErrorStage.DELETE,
                    message=result.error or "Unknown error",
                )
            )
            return

        if result.kind == EntryKind.DIRECTORY:
            self.directories_deleted += 1
        else:
            self.files_deleted += 1
        self.total_bytes_reclaimed += result.size_bytes
        self.actions.append(result)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "root": self.root,
            "dry_run": self.dry_run,
            "summary": {
                "files_deleted": self.files_deleted,
                "directories_deleted": self.directories_deleted,
                "total_bytes_reclaimed": self.total_bytes_reclaimed,
                "elapsed_seconds": round(self.elapsed_seconds, 3),
            },
            "actions": [
                {
                    "path": a.path,
                    "kind": a.kind.value,
                    "size_bytes": a.size_bytes,
                }
                for a in self.actions
            ],
            "errors": [
                {
                    "path": e.path,
                    "stage": e.stage.value,
                    "message": e.message,
                }
                for e in self.errors
            ],
        }
