"""
Logging setup for the hollow package
"""

import logging
import os
from typing import Optional, Union

from ..core.config import DEFAULT_LOG_LEVEL

LOG_FORMAT = "[%(name)s %(levelname)s] %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the 'hollow' logger.

    Args:
        level: Logging level (default: HOLLOW_LOG_LEVEL, else WARNING)

    Returns:
        The configured 'hollow' logger
    """
    logger = logging.getLogger("hollow")
    resolved = level if level is not None else os.getenv("HOLLOW_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
