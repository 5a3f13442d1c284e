"""Shared pytest fixtures for reqdiff tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    for handler in logging.getLogger().handlers[:]:
        logging.getLogger().removeHandler(handler)
