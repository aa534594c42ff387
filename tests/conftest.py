"""
Shared fixtures for async_stream tests.
"""

import pytest

from async_stream.logging.config import LoggingConfig
from async_stream.streams import StreamConfig


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as async"
    )


@pytest.fixture
def logging_config():
    """LoggingConfig restored to its defaults once the test finishes."""
    config = LoggingConfig()

    yield config

    config.update(
        log_level="info",
        log_output="stderr",
    )
    config.enable()
    for name in list(config._disabled_loggers.get()):
        config.enable(name)

    config._log_directory.set(None)


@pytest.fixture
def stream_config():
    """StreamConfig restored to lax conversion once the test finishes."""
    config = StreamConfig()

    yield config

    config.update(strict_conversion=False)
