# core/logging_config.py
"""
Logging Configuration
Sets up the package loggers. The library itself never calls this on
import; applications and tests opt in.
"""
import logging
import sys
from typing import List, Optional, Union

from core import config


def setup_logging(level: Union[int, str, None] = None,
                  log_file: Optional[str] = None) -> List[logging.Logger]:
    """
    Configures the 'core' and 'geometry' loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG"). Defaults to
            config.DEFAULT_LOG_LEVEL.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured loggers.
    """
    if level is None:
        level = config.DEFAULT_LOG_LEVEL
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)

    loggers = []
    for name in config.LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Drop handlers from a previous call so records are not duplicated
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        loggers.append(logger)

    loggers[0].debug("Logging initialized.")
    return loggers
