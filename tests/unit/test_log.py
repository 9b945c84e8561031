"""Unit tests for functions defined in src/log.py."""

import logging

import pytest
from pytest_mock import MockerFixture
from rich.logging import RichHandler

from constants import LOG_LEVEL_ENV_VAR
from log import get_logger


def test_get_logger(mocker: MockerFixture) -> None:
    """Check the function to retrieve logger."""
    mocker.patch.dict("os.environ", {}, clear=True)
    logger_name = "foo"
    logger = get_logger(logger_name)
    assert logger is not None
    assert logger.name == logger_name

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    assert logger.propagate is False


@pytest.mark.parametrize(
    "level_name,expected_level",
    [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("not-a-level", logging.INFO),
    ],
)
def test_get_logger_level_from_environment(
    mocker: MockerFixture, level_name: str, expected_level: int
) -> None:
    """Check that the log level is taken from the environment."""
    mocker.patch.dict("os.environ", {LOG_LEVEL_ENV_VAR: level_name})
    logger = get_logger("bar")
    assert logger.level == expected_level
