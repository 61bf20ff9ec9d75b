"""
Logging Configuration
Sets up the package logger for geocalc.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'geocalc' namespace.

    Records go to stderr so stdout carries only the prompt/result transcript.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("geocalc")
    logger.setLevel(level)

    # Repeated calls (tests, re-entry) must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
