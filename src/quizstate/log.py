import logging
import os
from logging.handlers import RotatingFileHandler

from .config import settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging() -> logging.Logger:
    """Attach a handler to the package logger, once."""
    logger = logging.getLogger("quizstate")
    logger.setLevel(settings.LOG_LEVEL)

    if logger.handlers:
        return logger

    if settings.LOG_TO_FILE:
        if not os.path.exists(settings.LOG_DIR):
            os.makedirs(settings.LOG_DIR)
        log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)
        handler: logging.Handler = RotatingFileHandler(
            log_path, maxBytes=5_000_000, backupCount=3
        )
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
