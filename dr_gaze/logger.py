"""
Dr.Gaze — Логування
"""
import logging
import sys
from typing import Optional

from dr_gaze.config import LoggingConfig


def setup_logger(
    name: str = "dr_gaze",
    config: Optional[LoggingConfig] = None
) -> logging.Logger:
    """
    Налаштувати логер з форматуванням.

    Повторний виклик не додає другий handler, лише оновлює рівень.
    """
    config = config or LoggingConfig()
    level = getattr(logging, config.level.value.upper())

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter(fmt=config.fmt, datefmt=config.datefmt)
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger
