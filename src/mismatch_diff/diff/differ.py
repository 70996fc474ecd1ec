"""Line diff rendered as unified hunks with bare ``@@ @@`` markers."""

import difflib

from loguru import logger

from mismatch_diff.config import DEFAULT_CONTEXT_LINES, DEFAULT_HEADER
from mismatch_diff.diff.line_window import LineInput, normalize_lines
from mismatch_diff.exceptions import InvalidBudgetError

DEFAULT_COMMON_LINE_THRESHOLD = 6
HUNK_MARKER = "@@ @@\n"

# Entry tags
SAME = " "
REMOVED = "-"
ADDED = "+"


class UnifiedDiffer:
    """Diff two texts line by line and render the result as unified hunks."""

    def __init__(
        self,
        header: str = DEFAULT_HEADER,
        context_lines: int = DEFAULT_CONTEXT_LINES,
        common_line_threshold: int = DEFAULT_COMMON_LINE_THRESHOLD,
    ):
        """Initialize the differ.

        Args:
            header: Text written before the first hunk. A trailing newline is
                added when missing.
            context_lines: Unchanged lines shown before and after each change.
            common_line_threshold: Minimum run of unchanged lines between two
                changes that splits them into separate hunks.

        Raises:
            InvalidBudgetError: If context_lines or common_line_threshold is
                negative.
        """
        if context_lines < 0:
            raise InvalidBudgetError(f"context_lines must be non-negative, got {context_lines}")
        if common_line_threshold < 0:
            raise InvalidBudgetError(
                f"common_line_threshold must be non-negative, got {common_line_threshold}"
            )

        self.header = header
        self.context_lines = context_lines
        self.common_line_threshold = common_line_threshold

    def diff(self, expected: LineInput, actual: LineInput) -> str:
        """Render the diff between expected and actual.

        Args:
            expected: Expected text or its lines.
            actual: Actual text or its lines.

        Returns:
            Header followed by the hunks. Only the header when nothing differs.
        """
        expected_lines = normalize_lines(expected)
        actual_lines = normalize_lines(actual)

        entries = self._entries(expected_lines, actual_lines)
        hunks = self._hunks(entries)
        logger.debug(
            f"Diffed {len(expected_lines)} expected against {len(actual_lines)} actual lines "
            f"into {len(hunks)} hunk(s)"
        )

        parts: list[str] = []
        if self.header:
            parts.append(self.header if self.header.endswith("\n") else self.header + "\n")

        for hunk in hunks:
            parts.append(HUNK_MARKER)
            for tag, line in hunk:
                parts.append(tag + line if line.endswith("\n") else tag + line + "\n")

        return "".join(parts)

    def _entries(self, expected_lines: list[str], actual_lines: list[str]) -> list[tuple[str, str]]:
        matcher = difflib.SequenceMatcher(None, expected_lines, actual_lines, autojunk=False)

        entries: list[tuple[str, str]] = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                entries.extend((SAME, line) for line in expected_lines[i1:i2])
                continue
            # "replace" shows all removals before the additions
            entries.extend((REMOVED, line) for line in expected_lines[i1:i2])
            entries.extend((ADDED, line) for line in actual_lines[j1:j2])

        return entries

    def _hunks(self, entries: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
        changed = [index for index, (tag, _) in enumerate(entries) if tag != SAME]
        if not changed:
            return []

        # A gap of at least cutoff unchanged lines starts a new hunk. Context
        # of neighbouring hunks may repeat lines when context_lines > cutoff / 2.
        cutoff = max(self.common_line_threshold, self.context_lines)

        groups: list[tuple[int, int]] = []
        group_start = group_end = changed[0]
        for index in changed[1:]:
            if index - group_end - 1 >= cutoff:
                groups.append((group_start, group_end))
                group_start = index
            group_end = index
        groups.append((group_start, group_end))

        hunks = []
        for first, last in groups:
            start = max(first - self.context_lines, 0)
            stop = min(last + self.context_lines + 1, len(entries))
            hunks.append(entries[start:stop])

        return hunks
