"""Exceptions for mismatch reporting and diff rendering."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mismatch_diff.models.mismatch_models import MismatchRecord


class MismatchDiffError(Exception):
    """Base exception for all mismatch diff operations."""


class InvalidBudgetError(MismatchDiffError, ValueError):
    """Raised when a threshold, window size or context size is negative."""


class ConfigurationError(MismatchDiffError):
    """Raised when diff settings cannot be loaded from the environment."""


class ComparisonFailure(AssertionError):
    """Raised when an equality assertion fails.

    Carries the MismatchRecord describing the failure. The string form is the
    record's message followed by its full diff.
    """

    def __init__(self, mismatch: "MismatchRecord"):
        super().__init__(mismatch.to_string())
        self.mismatch = mismatch

    def __str__(self) -> str:
        return self.mismatch.to_string()

    def __reduce__(self):
        return type(self), (self.mismatch,)
