"""Shared pytest fixtures for uuid_bitmop tests."""

from __future__ import annotations

import logging

import pytest

from uuid_bitmop.log_config import setup as log_setup


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    root = logging.getLogger(log_setup.ROOT_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.propagate = True
    root.setLevel(logging.NOTSET)
    log_setup._logging_configured.clear()
