"""Reduce large diff inputs to a window around the first differing line."""

import re
from collections.abc import Sequence

from loguru import logger

from mismatch_diff.exceptions import InvalidBudgetError

LineInput = str | Sequence[str]

# Only "\n" ends a line; "\r", "\f" and other separators stay inside it.
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


def split_lines(text: str) -> list[str]:
    """Split text into lines, keeping each line's terminator.

    Lines end at a line feed only. Joining the result reproduces the input
    exactly. An empty string yields an empty list.
    """
    return _LINE_RE.findall(text)


def normalize_lines(value: LineInput) -> list[str]:
    """Return value as a list of lines.

    Strings are split with split_lines(); line sequences are copied as-is.
    """
    if isinstance(value, str):
        return split_lines(value)
    return list(value)


def skip_marker(count: int) -> str:
    """Synthetic line standing in for ``count`` omitted lines."""
    return f"skipping {count} lines...\n"


def skip_lines(
    expected: LineInput,
    actual: LineInput,
    threshold: int,
    window_size: int,
) -> tuple[list[str], list[str]]:
    """Reduce both inputs to ``window_size`` lines when they are too big to diff.

    Inputs are left untouched while ``len(expected) * len(actual)`` stays below
    ``threshold``, or when no line differs within their common length.
    Otherwise both are cut to ``window_size`` lines starting half a window
    before the first differing line. Skipped leading lines become a marker at
    the head of the expected side. Skipped trailing expected lines become a
    marker at the tail of the actual side.

    Args:
        expected: Expected text or its lines.
        actual: Actual text or its lines.
        threshold: Line-count product that triggers truncation.
        window_size: Number of lines kept from each side.

    Returns:
        Tuple of (expected_lines, actual_lines).

    Raises:
        InvalidBudgetError: If threshold or window_size is negative.
    """
    if threshold < 0:
        raise InvalidBudgetError(f"threshold must be non-negative, got {threshold}")
    if window_size < 0:
        raise InvalidBudgetError(f"window_size must be non-negative, got {window_size}")

    expected_lines = normalize_lines(expected)
    actual_lines = normalize_lines(actual)

    expected_count = len(expected_lines)
    actual_count = len(actual_lines)

    if expected_count * actual_count < threshold:
        return expected_lines, actual_lines

    common_count = min(expected_count, actual_count)
    diff_index = next(
        (i for i in range(common_count) if expected_lines[i] != actual_lines[i]),
        None,
    )
    if diff_index is None:
        logger.debug(
            f"No divergence within {common_count} common lines, diffing in full "
            f"({expected_count} x {actual_count} lines)"
        )
        return expected_lines, actual_lines

    half_window = window_size // 2
    start = max(diff_index - half_window, 0)
    end = min(diff_index + half_window, common_count)

    reduced_expected: list[str] = []
    if start > 0:
        reduced_expected.append(skip_marker(start))
    reduced_expected.extend(expected_lines[start:start + window_size])

    reduced_actual = actual_lines[start:start + window_size]
    # The trailing marker counts expected lines but sits on the actual side.
    if end < expected_count:
        reduced_actual.append(skip_marker(expected_count - end))

    logger.debug(
        f"Truncated diff input around line {diff_index + 1}: "
        f"kept lines {start + 1}-{start + window_size} of {expected_count} x {actual_count}"
    )
    return reduced_expected, reduced_actual
