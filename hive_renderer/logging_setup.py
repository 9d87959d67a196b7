"""
Loguru sink setup for applications embedding the renderer.
The library itself only emits through ``loguru.logger``; sinks are opt-in.
"""

import sys
from typing import Optional

from loguru import logger

from .config import LOG_FILE, LOG_LEVEL, LOG_RETENTION


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Replace the default sink with stderr and an optional rotating file."""
    effective_level = (level or LOG_LEVEL).upper()
    logger.remove()
    logger.add(sys.stderr, level=effective_level)

    target = log_file or LOG_FILE
    if target:
        logger.add(target, rotation="1 day", retention=LOG_RETENTION, level=effective_level)
