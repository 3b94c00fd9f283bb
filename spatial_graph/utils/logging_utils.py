import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "spatial_graph"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Setup basic logging configuration for the spatial_graph package.

    Args:
        level: The logging level to use. Defaults to "INFO".
        log_format: Custom log format string. If None, uses default format.
        date_format: Custom date format string. If None, uses default format.
        log_file: Optional path of a file receiving the same records.

    Returns:
        The configured package logger
    """
    if log_format is None:
        log_format = DEFAULT_LOG_FORMAT
    if date_format is None:
        date_format = DEFAULT_DATE_FORMAT
    formatter = logging.Formatter(fmt=log_format, datefmt=date_format)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())

    # Repeated calls (tests, reloads) must not stack handlers
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    # Create a StreamHandler that writes to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent the logger from propagating messages to the root logger
    logger.propagate = False
    return logger
