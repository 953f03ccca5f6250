"""
Logging setup.

Every module logs through `logging.getLogger(__name__)`; this installs the
one stream handler on the package logger.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the `placement_portal` logger once and return it."""
    logger = logging.getLogger("placement_portal")

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level.upper())
    return logger
