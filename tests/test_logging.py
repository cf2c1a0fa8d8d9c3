"""Tests for logging utilities."""

import logging
from io import StringIO

import pytest

from graphalgo import Graph, dijkstra, kruskal_mst
from graphalgo.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


@pytest.fixture(autouse=True)
def restore_logging():
    """Put every graphalgo logger back to WARNING on stderr after each test."""
    yield
    configure_logging(level=logging.WARNING)


def test_get_logger_returns_logger():
    """Test that get_logger returns a namespaced logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "graphalgo.test_module"


def test_get_logger_keeps_package_names():
    """Test that module names inside the package are not prefixed twice."""
    assert get_logger("graphalgo.algorithms.mst").name == "graphalgo.algorithms.mst"
    assert get_logger().name == "graphalgo"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to the root logger."""
    assert get_logger("test_module").propagate is False


def test_set_log_level():
    """Test that set_log_level updates logger and handler levels."""
    logger = get_logger("test_module")

    set_log_level(logging.INFO)
    assert logger.level == logging.INFO
    assert all(h.level == logging.INFO for h in logger.handlers)


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("error")
    assert logger.level == logging.ERROR

    set_log_level("NOT_A_LEVEL")
    assert logger.level == logging.WARNING


def test_configure_logging():
    """Test configure_logging redirects output to the given stream."""
    logger = get_logger("test_module")
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)

    logger.debug("Debug message")

    output = stream.getvalue()
    assert "Debug message" in output
    assert "[DEBUG] graphalgo.test_module" in output


def test_configure_logging_custom_format():
    """Test a custom format string is applied."""
    logger = get_logger("test_module")
    stream = StringIO()
    configure_logging(level=logging.INFO, format_string="%(message)s!", stream=stream)

    logger.info("hello")
    assert stream.getvalue() == "hello!\n"


def test_algorithms_log_at_debug():
    """Test algorithm runs report their counts at DEBUG level."""
    G = Graph()
    G.add_edge(0, 1, 1)
    G.add_edge(1, 2, 1)
    G.add_edge(0, 2, 5)

    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    dijkstra(G, 0)
    kruskal_mst(G)

    output = stream.getvalue()
    assert "Dijkstra from 0: 3 vertices reached" in output
    assert "KruskalMST: 2 edges accepted, 1 rejected, 1 components" in output


def test_algorithms_silent_by_default():
    """Test nothing is emitted at the default WARNING level."""
    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)
    G = Graph()
    G.add_edge(0, 1, 1)
    dijkstra(G, 0)
    assert stream.getvalue() == ""
