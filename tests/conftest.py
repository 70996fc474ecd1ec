import pytest
from loguru import logger


@pytest.fixture
def nine_lines():
    """Nine expected lines and the same lines with line5 modified."""
    expected = [f"line{i}" for i in range(1, 10)]
    actual = [f"modified line{i}" if i == 5 else f"line{i}" for i in range(1, 10)]
    return "\n".join(expected), "\n".join(actual)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted by the package."""
    messages: list[str] = []
    logger.enable("mismatch_diff")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("mismatch_diff")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no diff settings in the environment."""
    for name in (
        "MISMATCH_DIFF_THRESHOLD",
        "MISMATCH_DIFF_WINDOW_SIZE",
        "MISMATCH_DIFF_CONTEXT_LINES",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
