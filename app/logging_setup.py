"""
Logging configuration for the Streamlit app.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """
    Send core/app logs to a rotating file and to the console.

    Safe to call on every Streamlit rerun; handlers are only attached once.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)

    for name in ("core", "app"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
            continue
        file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    # Also configure root logger to see logs from other libraries
    logging.basicConfig(level=level, format=LOG_FORMAT)
