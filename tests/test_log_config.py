"""Tests for logging initialization."""

from loguru import logger

from exifbridge.log_config import init_logging


def test_init_logging_replaces_sinks(restore_logger):
    messages = []

    init_logging("warning", sink=messages.append)
    logger.info("dropped")
    logger.warning("kept {}", 1)

    assert len(messages) == 1
    assert "WARNING" in messages[0]
    assert messages[0].rstrip().endswith("kept 1")
