import logging

from walkgraph.config import LoggingSettings
from walkgraph.log import configure_logging


def _configure_and_read(settings: LoggingSettings, verbose: bool = False) -> int:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        configure_logging(settings, verbose=verbose)
        return root.level
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


def test_level_comes_from_settings():
    assert _configure_and_read(LoggingSettings(level="ERROR")) == logging.ERROR


def test_verbose_forces_debug():
    assert _configure_and_read(LoggingSettings(level="ERROR"), verbose=True) == logging.DEBUG


def test_traversal_logs_at_debug(caplog, chain_graph):
    with caplog.at_level(logging.DEBUG, logger="walkgraph"):
        chain_graph.breadth_first("A")
    assert "BFS from 'A' reached 5 of 5 vertices" in caplog.text
