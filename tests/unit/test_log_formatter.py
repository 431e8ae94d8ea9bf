##############################################################################
# Copyright (c) crudbench developers. See the top-level LICENSE file for
# dates and other details. No copyright assignment is required to contribute
# to crudbench.
##############################################################################

"""
Tests for the `log_formatter.py` module.
"""

import logging

import pytest
from pytest_mock import MockerFixture

from crudbench.log_formatter import FORMATS, setup_logging


@pytest.fixture
def fresh_logger(request: pytest.FixtureRequest) -> logging.Logger:
    """
    A logger nobody else uses, with its handlers removed afterwards.

    Args:
        request: The pytest request object, used to name the logger after the test.

    Returns:
        The logger.
    """
    logger = logging.getLogger(f"crudbench_test.{request.node.name}")
    yield logger
    logger.handlers.clear()
    logger.propagate = True


def test_setup_logging_without_colors(fresh_logger: logging.Logger, capsys: pytest.CaptureFixture):
    """
    Records are written to stdout in the default format at the requested level.

    Args:
        fresh_logger: A logger nobody else uses.
        capsys: PyTest capsys fixture.
    """
    setup_logging(fresh_logger, log_level="INFO", colors=False)

    fresh_logger.debug("hidden")
    fresh_logger.info("SQLAlchemy: Inserted 100 entities in 12 ms")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "INFO] SQLAlchemy: Inserted 100 entities in 12 ms" in out
    assert fresh_logger.level == logging.INFO
    assert fresh_logger.propagate is False
    assert fresh_logger.handlers[0].formatter._fmt == FORMATS["DEFAULT"]


def test_setup_logging_debug_format(fresh_logger: logging.Logger):
    """
    The debug level switches to the format that names the module and line.

    Args:
        fresh_logger: A logger nobody else uses.
    """
    setup_logging(fresh_logger, log_level="DEBUG", colors=False)
    assert fresh_logger.handlers[0].formatter._fmt == FORMATS["DEBUG"]


def test_setup_logging_with_colors(mocker: MockerFixture, fresh_logger: logging.Logger):
    """
    Colored logs are installed on the logger when asked for.

    Args:
        mocker: PyTest mocker fixture.
        fresh_logger: A logger nobody else uses.
    """
    mock_install = mocker.patch("crudbench.log_formatter.coloredlogs.install")
    setup_logging(fresh_logger, log_level="WARNING", colors=True)
    mock_install.assert_called_once_with(level="WARNING", logger=fresh_logger, fmt=FORMATS["DEFAULT"])
