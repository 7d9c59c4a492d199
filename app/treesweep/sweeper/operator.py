"""Sweep deletion operator.

Removes unwanted entries one at a time with dry-run support. Every
outcome, including failures, is returned as a SweepActionResult so
callers can keep going after a single entry fails.
"""

import logging
import shutil
from pathlib import Path

from treesweep.sweeper.models import PendingAction, SweepActionResult

logger = logging.getLogger(__name__)


class SweepOperator:
    """Handles removal of pending sweep actions.

    Attributes:
        _dry_run: If True, simulate removals without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the SweepOperator.

        Args:
            dry_run: If True, report what would be removed without removing.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Whether removals are simulated."""
        return self._dry_run

    def remove(self, action: PendingAction) -> SweepActionResult:
        """Remove a single entry.

        Dispatches on the entry type found on disk:
        - Directories (not symlinks): shutil.rmtree
        - Files, symlinks and dead symlinks: Path.unlink

        Args:
            action: Pending action to carry out.

        Returns:
            SweepActionResult indicating success or failure.
        """
        if self._dry_run:
            logger.debug("Dry-run: would delete %s %s", action.kind.value, action.path)
            return self._result(action, success=True)

        target = Path(action.path)
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            elif target.exists() or target.is_symlink():
                target.unlink()
            else:
                return self._result(
                    action,
                    success=False,
                    error=f"Path does not exist: {action.path}",
                )
        except OSError as e:
            logger.debug("Failed to delete %s: %s", action.path, e)
            return self._result(action, success=False, error=str(e))

        logger.debug("Deleted %s %s", action.kind.value, action.path)
        return self._result(action, success=True)

    def _result(
        self,
        action: PendingAction,
        *,
        success: bool,
        error: str | None = None,
    ) -> SweepActionResult:
        """Build a result for an action."""
        return SweepActionResult(
            path=action.path,
            kind=action.kind,
            size_bytes=action.size_bytes if success else 0,
            success=success,
            error=error,
            dry_run=self._dry_run,
        )
