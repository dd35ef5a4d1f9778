# tests/conftest.py
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """A resolved project root (tmp_path may sit behind a symlink)."""
    return tmp_path.resolve()
