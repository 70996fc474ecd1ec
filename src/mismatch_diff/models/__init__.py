"""Data models for mismatch reports."""

from mismatch_diff.models.mismatch_models import MismatchRecord

__all__ = [
    "MismatchRecord",
]
