"""Model for an expected/actual mismatch and its diff."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from mismatch_diff.config import (
    DEFAULT_HEADER,
    DEFAULT_THRESHOLD,
    DEFAULT_WINDOW_SIZE,
    DiffSettings,
)
from mismatch_diff.diff.differ import UnifiedDiffer
from mismatch_diff.diff.line_window import LineInput, skip_lines


class MismatchRecord(BaseModel):
    """Expected and actual values of a failed equality check.

    The string forms are rendered by the caller before construction and may
    be plain text or a sequence of lines. Line sequences are stored as tuples.
    """

    model_config = ConfigDict(frozen=True)

    expected: Any  # Stored as given, never re-serialized
    actual: Any
    expected_as_string: str | tuple[str, ...]
    actual_as_string: str | tuple[str, ...]
    identical: bool = False
    message: str = ""  # Placed in front of the rendered diff

    @classmethod
    def create(
        cls,
        expected: Any,
        actual: Any,
        expected_as_string: LineInput,
        actual_as_string: LineInput,
        identical: bool = False,
        message: str = "",
    ) -> "MismatchRecord":
        """Build a record from positional arguments."""
        return cls(
            expected=expected,
            actual=actual,
            expected_as_string=expected_as_string,
            actual_as_string=actual_as_string,
            identical=identical,
            message=message,
        )

    def get_diff(self) -> str:
        """Unified diff of the full string forms."""
        return self._call_differ(self.expected_as_string, self.actual_as_string)

    def get_partial_diff(
        self,
        threshold: int = DEFAULT_THRESHOLD,
        window_size: int = DEFAULT_WINDOW_SIZE,
    ) -> str:
        """Unified diff that stays small for very large inputs.

        Args:
            threshold: Truncate when expected lines x actual lines reaches this.
            window_size: Number of lines shown around the first difference.

        Returns:
            Diff of the reduced inputs, with "skipping N lines..." markers
            in place of the omitted lines.

        Raises:
            InvalidBudgetError: If threshold or window_size is negative.
        """
        expected, actual = skip_lines(
            self.expected_as_string,
            self.actual_as_string,
            threshold,
            window_size,
        )
        return self._call_differ(expected, actual)

    def render(self, settings: DiffSettings | None = None) -> str:
        """Message followed by a partial diff using the given settings."""
        if settings is None:
            settings = DiffSettings()
        expected, actual = skip_lines(
            self.expected_as_string,
            self.actual_as_string,
            settings.threshold,
            settings.window_size,
        )
        differ = UnifiedDiffer(header=settings.header, context_lines=settings.context_lines)
        return self.message + self._call_differ(expected, actual, differ)

    def to_string(self) -> str:
        """Message followed by the full diff."""
        return self.message + self.get_diff()

    def __str__(self) -> str:
        return self.to_string()

    @staticmethod
    def _call_differ(
        expected: LineInput,
        actual: LineInput,
        differ: UnifiedDiffer | None = None,
    ) -> str:
        # Nothing to show for two empty inputs
        if not expected and not actual:
            return ""

        differ = differ or UnifiedDiffer(header=DEFAULT_HEADER)
        return differ.diff(expected, actual)
