"""Project tree sweeping.

This module provides the classification rules for unwanted project
artifacts, the traversal engine that finds them, and the operator
that removes them.
"""

from treesweep.sweeper.engine import RootNotFoundError, Sweeper, SweeperError
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

__all__ = [
    "DEFAULT_RULES",
    "ClassificationRules",
    "Classifier",
    "EntryKind",
    "ErrorStage",
    "PendingAction",
    "RootNotFoundError",
    "ScanResult",
    "SweepActionResult",
    "SweepError",
    "SweepOperator",
    "Sweeper",
    "SweeperError",
    "measure_size",
]
