"""
Logging Configuration
Attaches handlers to the 'planegeom' logger. Shapes only emit DEBUG records
about applied transforms; nothing is printed until a host application or
script calls `setup_logging`.
"""
import logging
import sys
from typing import Optional

from planegeom.config import LOG_LEVEL

LOGGER_NAME = "planegeom"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = LOG_LEVEL, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the library's log records to stdout and, optionally, to a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Threshold for the package logger and its handlers. Defaults to
            the PLANEGEOM_LOG_LEVEL environment variable, see `planegeom.config`.
        log_file: Optional path of a log file, overwritten on every setup.

    Returns:
        The 'planegeom' logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # drop handlers of a previous setup so records are not written twice
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    targets: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        targets.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in targets:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
