"""Tests for logging utilities."""

import logging
from io import StringIO

from subgrad.diagnostics import debug_context
from subgrad.logging import configure_logging, get_logger
from subgrad.optimize import QUADRATIC, run


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger in the subgrad namespace."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "subgrad.test_module"


def test_get_logger_keeps_package_prefix():
    """Test that module names already under subgrad are not prefixed twice."""
    assert get_logger("subgrad.optimize.subgradient").name == "subgrad.optimize.subgradient"
    assert get_logger().name == "subgrad"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_configure_logging_accepts_level_names():
    """Test that configure_logging accepts level names and applies them to new loggers."""
    logger = get_logger("test_module")

    configure_logging(level="debug", stream=StringIO())
    assert logger.level == logging.DEBUG
    assert get_logger("level_name_module").level == logging.DEBUG

    configure_logging(level="ERROR", stream=StringIO())
    assert logger.level == logging.ERROR


def test_configure_logging_custom_format():
    """Test configure_logging with a custom format string."""
    stream = StringIO()
    configure_logging(level=logging.DEBUG, format_string="%(levelname)s|%(message)s", stream=stream)

    get_logger("test_module").debug("Debug message")

    assert "DEBUG|Debug message" in stream.getvalue()


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to the root logger."""
    assert get_logger("test_module").propagate is False


def test_run_logs_stop_reason():
    """Test that a run reports its stop reason at INFO level."""
    stream = StringIO()
    configure_logging(level=logging.INFO, stream=stream)

    run(QUADRATIC.config(start=[1.0, 1.0]))

    output = stream.getvalue()
    assert "OPTIMAL" in output
    assert "subgrad.optimize.subgradient" in output


def test_run_logs_iterations_in_debug_mode():
    """Test that debug mode narrates every accepted iteration."""
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)

    config = QUADRATIC.config(start=[2.0, 2.0], initial_step=0.1, max_iterations=3)
    with debug_context(True):
        run(config)
    output = stream.getvalue()
    assert "Iteration 0:" in output
    assert "Iteration 2:" in output

    stream.truncate(0)
    stream.seek(0)
    with debug_context(False):
        run(config)
    assert "Iteration 0:" not in stream.getvalue()
