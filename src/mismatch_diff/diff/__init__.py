"""Line diffing: bounded input windows and unified rendering."""

from mismatch_diff.diff.differ import UnifiedDiffer
from mismatch_diff.diff.line_window import (
    normalize_lines,
    skip_lines,
    skip_marker,
    split_lines,
)

__all__ = [
    "UnifiedDiffer",
    "normalize_lines",
    "skip_lines",
    "skip_marker",
    "split_lines",
]
