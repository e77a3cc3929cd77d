"""
Logging setup for ixheap.

The package logger is disabled on import; applications opt in with
``configure_logging``.
"""

import os
import sys
from typing import Optional

from loguru import logger

DEFAULT_LEVEL = "INFO"


def configure_logging(level: Optional[str] = None) -> int:
    """
    Enable ixheap log output on stderr.

    Parameters
    ----------
    level : str, optional
        Minimum level. Falls back to IXHEAP_LOG_LEVEL, then INFO.

    Returns
    -------
    sink_id : int
        Handler id, usable with ``logger.remove``.
    """
    if level is None:
        level = os.getenv("IXHEAP_LOG_LEVEL", DEFAULT_LEVEL)
    level = level.strip().upper()
    logger.enable("ixheap")
    return logger.add(
        sys.stderr,
        level=level,
        filter="ixheap",
        format="{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
    )
