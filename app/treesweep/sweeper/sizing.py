"""Best-effort size measurement for sweep candidates."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def measure_size(path: Path) -> int:
    """Get the number of bytes a path occupies.

    For files and symlinks, returns the entry's own size (symlinks are
    not followed). For directories, returns the sum of all regular
    files beneath it.

    The result is intentionally partial: children that cannot be read
    are left out of the sum instead of failing the measurement, so a
    directory with unreadable parts reports only what could be counted.
    A failure on the path itself yields 0.

    Args:
        path: Path to measure.

    Returns:
        Size in bytes, 0 if unavailable.
    """
    try:
        if path.is_symlink() or path.is_file():
            return path.lstat().st_size

        if path.is_dir():
            total = 0
            for child in path.rglob("*"):
                try:
                    if child.is_file() and not child.is_symlink():
                        total += child.stat().st_size
                except OSError:
                    continue
            return total
    except OSError as e:
        logger.debug("Cannot measure %s: %s", path, e)

    return 0
