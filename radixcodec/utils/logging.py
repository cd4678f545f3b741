"""Logging configuration for radixcodec."""
from __future__ import annotations

import logging
import sys

from ..config import get_settings

_ROOT = "radixcodec"

# Library default: stay silent unless the caller configures logging
logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def setup_logging() -> None:
    """Configure stdout logging for the radixcodec loggers."""
    settings = get_settings()
    log_level = settings.effective_level

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logging.getLogger(_ROOT).setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"{_ROOT}.{name}")
