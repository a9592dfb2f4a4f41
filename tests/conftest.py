"""Pytest configuration and fixtures."""
import logging

import pytest

from arithmetic_cli.common.logger import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to captured streams once a test is done."""
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
