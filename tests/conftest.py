"""Shared fixtures for Axiology tests."""

import pytest

from axiology.config import set_config


@pytest.fixture(autouse=True)
def reset_scoring_config():
    """Each test starts from the environment-default scoring config."""
    set_config(None)
    yield
    set_config(None)
