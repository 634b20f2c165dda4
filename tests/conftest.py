import logging

import pytest


@pytest.fixture(autouse=True)
def reset_awesome_logger():
    """Drop handlers the CLI attaches so they never outlive a CliRunner stream."""
    yield
    package_logger = logging.getLogger("awesome")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
