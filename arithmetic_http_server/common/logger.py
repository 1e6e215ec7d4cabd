"""Shared logger for the arithmetic HTTP server and client."""
import logging
import sys
from typing import Union

LOGGER_NAME = "arithmetic_http_server"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# No handler until configure_logger() is called by the entrypoint
logger = logging.getLogger(LOGGER_NAME)


def configure_logger(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a stderr handler to the application logger and set its level.

    The handler is attached only once, so calling this again just changes the level.
    Records stop propagating to the root logger to avoid printing each line twice.

    :param level: Logging level, as a number or a name such as "DEBUG"

    :return: The configured logger
    :rtype: logging.Logger
    """
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
