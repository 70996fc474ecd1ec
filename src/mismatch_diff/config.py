"""Settings for bounded diff rendering."""

import os
from pathlib import Path

from dotenv import dotenv_values, find_dotenv
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from mismatch_diff.exceptions import ConfigurationError

# Defaults
DEFAULT_THRESHOLD = 1_000_000
DEFAULT_WINDOW_SIZE = 20
DEFAULT_CONTEXT_LINES = 3
DEFAULT_HEADER = "\n--- Expected\n+++ Actual\n"

# Environment variables read by load_settings()
ENV_THRESHOLD = "MISMATCH_DIFF_THRESHOLD"
ENV_WINDOW_SIZE = "MISMATCH_DIFF_WINDOW_SIZE"
ENV_CONTEXT_LINES = "MISMATCH_DIFF_CONTEXT_LINES"


class DiffSettings(BaseModel):
    """Budget and rendering options for partial diffs."""

    model_config = ConfigDict(frozen=True)

    threshold: int = Field(default=DEFAULT_THRESHOLD, ge=0)  # E x A at which inputs get truncated
    window_size: int = Field(default=DEFAULT_WINDOW_SIZE, ge=0)  # lines kept around the first divergence
    context_lines: int = Field(default=DEFAULT_CONTEXT_LINES, ge=0)
    header: str = DEFAULT_HEADER


def _read_int(name: str, default: int, file_values: dict[str, str | None]) -> int:
    raw = os.getenv(name)
    if raw is None:
        raw = file_values.get(name)
    if raw is None or not raw.strip():
        return default

    try:
        value = int(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e

    if value < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {value}")

    return value


def load_settings(env_file: str | Path | None = None) -> DiffSettings:
    """Build DiffSettings from the environment.

    Args:
        env_file: Optional path to a .env file. When omitted, the nearest .env
            found from the current directory upwards is used, if any.
            Variables already set in the process environment win over the file.
            The file is read without modifying os.environ.

    Returns:
        DiffSettings with defaults for every unset variable.

    Raises:
        ConfigurationError: If a variable is not a non-negative integer.
    """
    dotenv_path = env_file if env_file is not None else find_dotenv(usecwd=True)
    file_values = dotenv_values(dotenv_path) if dotenv_path else {}

    settings = DiffSettings(
        threshold=_read_int(ENV_THRESHOLD, DEFAULT_THRESHOLD, file_values),
        window_size=_read_int(ENV_WINDOW_SIZE, DEFAULT_WINDOW_SIZE, file_values),
        context_lines=_read_int(ENV_CONTEXT_LINES, DEFAULT_CONTEXT_LINES, file_values),
    )
    logger.debug(
        f"Loaded diff settings: threshold={settings.threshold} "
        f"window_size={settings.window_size} context_lines={settings.context_lines}"
    )
    return settings
