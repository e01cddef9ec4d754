"""Pytest configuration and shared fixtures for subgrad tests.

This module provides:
- A deterministic numpy RNG fixture for random starting points
- Logging and debug-mode isolation between tests
"""

import logging
import os

import numpy as np
import pytest

from subgrad.diagnostics import is_debug_enabled, set_debug_enabled
from subgrad.logging import configure_logging


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_global_state():
    """Reset debug mode and logging configuration after every test."""
    debug = is_debug_enabled()
    yield
    set_debug_enabled(debug)
    configure_logging(level=logging.WARNING)
