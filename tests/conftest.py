"""Shared test fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_handlers():
    """Drop handlers that configure_logging attached during a test."""
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
