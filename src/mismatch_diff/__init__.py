"""Mismatch reports with bounded unified diffs for failed equality assertions."""

from loguru import logger

from mismatch_diff.config import DiffSettings, load_settings
from mismatch_diff.diff import UnifiedDiffer, skip_lines
from mismatch_diff.exceptions import (
    ComparisonFailure,
    ConfigurationError,
    InvalidBudgetError,
    MismatchDiffError,
)
from mismatch_diff.models import MismatchRecord

# Silent unless the application opts in with logger.enable("mismatch_diff")
logger.disable("mismatch_diff")

__version__ = "0.1.0"

__all__ = [
    "ComparisonFailure",
    "ConfigurationError",
    "DiffSettings",
    "InvalidBudgetError",
    "MismatchDiffError",
    "MismatchRecord",
    "UnifiedDiffer",
    "load_settings",
    "skip_lines",
]
