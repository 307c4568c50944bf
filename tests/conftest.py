"""
Shared pytest fixtures for tandemsim tests.
"""

import logging

import pytest

from tandemsim.config import StageConfig


@pytest.fixture(autouse=True)
def reset_tandemsim_logging():
    """Reset logging state before each test.

    Removes all handlers except NullHandler and resets the level to NOTSET,
    so logging configuration from one test does not leak into another.
    """
    logger = logging.getLogger("tandemsim")

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()

    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)

    yield

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def single_stage() -> list[StageConfig]:
    """One G/G/1/1 stage: arrivals every U(0, 10), service U(0, 5)."""
    return [StageConfig(servers=1, capacity=1, arrival_range=(0.0, 10.0), service_range=(0.0, 5.0))]

