"""Tests for logging utilities."""

import logging
from io import StringIO

from qsparse import SparseSimulator
from qsparse.logging import (
    LOG_LEVEL_ENV_VAR,
    configure_logging,
    get_logger,
    level_from_env,
    set_log_level,
)


def test_get_logger_namespacing():
    """Loggers live under the qsparse namespace."""
    assert get_logger("test_module").name == "qsparse.test_module"
    assert get_logger("qsparse.simulator").name == "qsparse.simulator"
    assert get_logger().name == "qsparse"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG

        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    assert get_logger("test_module").propagate is False


def test_simulator_logs_allocation_and_measurement():
    """The simulator reports allocations and outcomes at DEBUG level."""
    stream = StringIO()
    get_logger("qsparse.simulator")
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        sim = SparseSimulator(seed=3)
        q = sim.allocate()
        sim.x(q)
        assert sim.measure(q) is True
        sim.release(q)

        output = stream.getvalue()
        assert "Allocated qubit 0 at location 0" in output
        assert "Measured qubit 0 -> 1" in output
        assert "Released qubit 0" in output
        assert "[DEBUG] qsparse.simulator:" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_level_from_env(monkeypatch):
    """The starting level can be chosen through the environment."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    assert level_from_env() == logging.WARNING
    assert level_from_env(default=logging.ERROR) == logging.ERROR

    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, " debug ")
    assert level_from_env() == logging.DEBUG

    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "not-a-level")
    assert level_from_env() == logging.WARNING


def test_configure_logging_custom_format():
    """A custom format applies to every cached logger."""
    stream = StringIO()
    logger = get_logger("qsparse.simulator")
    try:
        configure_logging(level="INFO", format_string="%(name)s|%(message)s", stream=stream)
        logger.info("hello")
        logger.debug("hidden")
        assert stream.getvalue() == "qsparse.simulator|hello\n"
    finally:
        configure_logging(level=logging.WARNING)
