"""
Central logging setup shared by the web app and the CLI.
"""
from __future__ import annotations

import logging
import sys

from travel_recs.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a stdout handler to the package logger (once) and set its level."""
    logger = logging.getLogger("travel_recs")

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(level)

    return logger
