"""Shared fixtures for the GMN test suite."""

import logging

import pytest

from gs1_gmn.config import reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test from default settings and leave root logging untouched."""
    for key in ('GMN_LOG_LEVEL', 'GMN_LOG_FILE', 'GMN_BATCH_ENCODING',
                'GMN_SKIP_BLANK_LINES', 'GMN_JSON_INDENT'):
        monkeypatch.delenv(key, raising=False)
    reset_config()

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    reset_config()
