"""
Logging system for the heuristics library.
Provides centralized logging with console and optional file handlers.
"""

import logging
import os
from datetime import datetime
from typing import Optional

from heuristics.config import LOGGING_CONFIG


def setup_logger(name: str, log_file: Optional[str] = None,
                 level: int = logging.INFO, log_dir: Optional[str] = None) -> logging.Logger:
    """
    Setup logger with console and optional file handlers.

    Args:
        name: Logger name (usually __name__)
        log_file: Optional log file path. If None and log_dir is None, logs only to console.
        level: Logging level (default: INFO)
        log_dir: Directory for log files. A timestamped file is created when log_file is None.

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger('heuristics', log_dir='logs')
        >>> logger.info("Starting VNS run...")
        >>> logger.debug(f"Iteration {i}: best objective = {best}")
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(level)

    formatter = logging.Formatter(
        LOGGING_CONFIG['format'],
        datefmt=LOGGING_CONFIG['datefmt']
    )

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if log_file is None and log_dir is not None:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f'heuristics_{timestamp}.log')
    elif log_file is not None:
        # Ensure directory exists
        file_dir = os.path.dirname(log_file)
        if file_dir:
            os.makedirs(file_dir, exist_ok=True)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Logger initialized. Log file: {log_file}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get existing logger or create new one with default settings.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        level = logging.getLevelName(LOGGING_CONFIG['level'])
        return setup_logger(name, level=level, log_dir=LOGGING_CONFIG['log_dir'])

    return logger
