# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Logging initialization using loguru.

Library modules log through the shared loguru logger and never add sinks;
applications call init_logging() once.

Copyright 2025 DNAi inc.
"""

import sys
from typing import Any

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"

# loguru built-in levels, lowest first
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def init_logging(level: str = "WARNING", sink: Any = None) -> int:
    """
    Replace loguru's default sink with a single sink at the given level.

    Args:
        level: Minimum level name (e.g., "DEBUG", "WARNING")
        sink: Any loguru sink; defaults to stderr

    Returns:
        Identifier of the added sink
    """
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level.upper(),
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
