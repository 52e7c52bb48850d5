"""
Console (and optional file) logging for the pen tool.
"""
import logging
import sys
from typing import List, Optional, Union

from . import config


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    return handlers


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Routes the package's log records to stdout and, if given, to ``log_file``.

    Calling it again replaces the previous handlers instead of stacking new ones.

    Args:
        level: A logging level number or its name ("DEBUG", "INFO", ...).
        log_file: Optional path; the file is truncated on start.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(config.LOGGER_NAME)
    logger.setLevel(level)
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    for handler in _build_handlers(log_file):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", log_file or "stdout only")
    return logger
