"""Shared pytest fixtures and configuration for the lein-phonics test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Tests must not depend on OS state or locale.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from lein_phonics import LeinEncoder


@pytest.fixture
def encoder() -> LeinEncoder:
    """A fresh encoder with default settings."""
    return LeinEncoder()


@pytest.fixture
def restore_package_logger() -> Iterator[logging.Logger]:
    """Undo handler and level changes made to the package logger."""
    logger = logging.getLogger("lein_phonics")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
