from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def log_messages():
    """Collect (level, message) pairs logged while the test runs."""

    messages = []
    handler_id = logger.add(
        lambda message: messages.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def restore_logger():
    """Reinstall a stderr sink after tests that reconfigure loguru."""

    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message), level="DEBUG")
