"""Log utilities."""

import logging
import os

from rich.logging import RichHandler

import constants


def _resolve_log_level() -> int:
    """Return the log level named by the environment, or the default one."""
    level_name = os.getenv(constants.LOG_LEVEL_ENV_VAR, constants.DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        return logging.getLevelName(constants.DEFAULT_LOG_LEVEL)
    return level


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for Rich console output.

    The returned logger has its level taken from the API_KEY_AUTH_LOG_LEVEL
    environment variable (INFO when unset or unknown), its handlers replaced
    with a single RichHandler and propagation to ancestor loggers disabled.

    Parameters:
        name (str): Name of the logger to retrieve or create.

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_log_level())
    logger.handlers = [RichHandler()]
    logger.propagate = False
    return logger
