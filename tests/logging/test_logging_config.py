"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from pathnav.graph.nav_graph import build_graph
from pathnav.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("pathnav.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.info("info-1")
        assert "info-1" in capture.getvalue()

        logger.debug("debug-1")
        assert "debug-1" not in capture.getvalue()

        enable_debug_logging()
        logger.debug("debug-2")
        assert "debug-2" in capture.getvalue()

        disable_debug_logging()
        logger.debug("debug-3")
        assert "debug-3" not in capture.getvalue()
    finally:
        logger.removeHandler(handler)


def test_global_level_reaches_module_loggers():
    engine_logger = get_logger("pathnav.engine")
    graph_logger = get_logger("pathnav.graph.nav_graph")
    assert engine_logger.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert engine_logger.getEffectiveLevel() == logging.WARNING
    assert graph_logger.getEffectiveLevel() == logging.WARNING
    assert get_logger("pathnav.io").getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent():
    capture = StringIO()
    setup_root_logger(level=logging.INFO, handler=logging.StreamHandler(capture))

    root_logger = logging.getLogger("pathnav")
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO


def test_rebuild_messages_use_root_handler():
    capture = StringIO()
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=logging.StreamHandler(capture))

    build_graph(
        [
            {"type": "LineString", "coordinates": [[0, 0], [1, 0]]},
            {"type": "LineString", "coordinates": [[5, 5]]},
        ]
    )
    out = capture.getvalue()
    assert "LEVEL:INFO|NAME:pathnav.graph.nav_graph|MSG:Graph built: 2 nodes, 2 links" in out
    assert "LEVEL:WARNING|NAME:pathnav.geometry|MSG:Skipping malformed line geometry" in out
