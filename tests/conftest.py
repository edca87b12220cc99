import logging
import os
import random
import sys

import pytest

# Add src to the Python path so the tests run from a plain checkout
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: full-width searches that take a few seconds"
    )


@pytest.fixture(autouse=True)
def reset_hashprobe_logging():
    """Drop handlers the CLI installed so they never outlive a CliRunner stream."""
    yield
    logger = logging.getLogger("hashprobe")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def rng():
    """A seeded generator so every random-mode test is reproducible."""
    return random.Random(1234)


@pytest.fixture
def sample_message():
    return b"TEST"
