"""Universal debug/logging utility for anilistkit.

Provides debug(), info(), warn(), error() functions for consistent logging.
Debug output is controlled by the ANILISTKIT_DEBUG environment variable.
Everything goes to stderr via the ``anilistkit`` logger, so stdout stays
reserved for command output such as ``--json``.
"""

import logging
import os
from typing import Optional

DEBUG_ON = os.getenv("ANILISTKIT_DEBUG", "0") == "1"

_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    global _logger
    if _logger is not None:
        return _logger
    logger = logging.getLogger("anilistkit")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if DEBUG_ON else logging.INFO)
    _logger = logger
    return logger


def debug(msg: str) -> None:
    """Log a debug message if debugging is enabled."""
    if DEBUG_ON:
        setup_logger().debug(msg)


def info(msg: str) -> None:
    """Log an info message."""
    setup_logger().info(msg)


def warn(msg: str) -> None:
    """Log a warning message."""
    setup_logger().warning(msg)


def error(msg: str) -> None:
    """Log an error message."""
    setup_logger().error(msg)
