"""Tests for configuration and logging setup."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from labeled_graph import ConfigurationError, LabeledGraph, configure_logging
from labeled_graph.config import GraphConfig, ObservabilityConfig, get_config, reset_config
from labeled_graph.logging_config import PACKAGE_LOGGER


def test_defaults():
    config = get_config()

    assert config.graph.neighbor_order == "insertion"
    assert config.observability.level == "WARNING"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_environment_override(monkeypatch):
    monkeypatch.setenv("LG_GRAPH_NEIGHBOR_ORDER", "sorted")
    monkeypatch.setenv("LG_LOG_LEVEL", "DEBUG")
    reset_config()

    config = get_config()

    assert config.graph.neighbor_order == "sorted"
    assert config.observability.level == "DEBUG"


def test_invalid_neighbor_order_rejected():
    with pytest.raises(ValidationError):
        GraphConfig(neighbor_order="random")


def test_graph_uses_global_config_by_default(monkeypatch):
    monkeypatch.setenv("LG_GRAPH_NEIGHBOR_ORDER", "sorted")
    reset_config()

    assert LabeledGraph().config.neighbor_order == "sorted"


def test_explicit_config_wins(monkeypatch):
    monkeypatch.setenv("LG_GRAPH_NEIGHBOR_ORDER", "sorted")
    reset_config()

    graph: LabeledGraph[int] = LabeledGraph(config=GraphConfig(neighbor_order="insertion"))

    assert graph.config.neighbor_order == "insertion"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger(PACKAGE_LOGGER)
        handlers, level = list(logger.handlers), logger.level
        yield
        logger.handlers[:] = handlers
        logger.setLevel(level)

    def test_sets_level_and_single_handler(self):
        config = ObservabilityConfig(level="debug")

        logger = configure_logging(config)
        configure_logging(config)

        named = [h for h in logger.handlers if h.get_name() == "labeled_graph.stream"]
        assert len(named) == 1
        assert logger.level == logging.DEBUG

    def test_uses_configured_format(self):
        logger = configure_logging(ObservabilityConfig(format="%(levelname)s|%(message)s"))

        handler = next(h for h in logger.handlers if h.get_name() == "labeled_graph.stream")
        record = logging.LogRecord(PACKAGE_LOGGER, logging.INFO, __file__, 1, "hi", None, None)
        assert handler.format(record) == "INFO|hi"

    def test_root_logger_untouched(self):
        root = logging.getLogger()
        before = list(root.handlers)

        configure_logging(ObservabilityConfig(level="INFO"))

        assert root.handlers == before

    def test_unknown_level_rejected(self):
        with pytest.raises(ConfigurationError) as excinfo:
            configure_logging(ObservabilityConfig(level="LOUD"))

        assert excinfo.value.setting_name == "level"

    def test_graph_operations_emit_debug_records(self, caplog):
        graph: LabeledGraph[int] = LabeledGraph()

        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            graph.add_vertex("A", 1)
            graph.add_vertex("B", 2)
            graph.add_directed_edge("A", "B", 1)
            graph.add_directed_edge("A", "B", 2)
            graph.shortest_path("B", "A")

        messages = [record.getMessage() for record in caplog.records]
        assert "Vertex added" in messages
        assert "Edge weight overwritten" in messages
        assert "No path found" in messages
        overwritten = next(r for r in caplog.records if r.getMessage() == "Edge weight overwritten")
        assert overwritten.old == 1
        assert overwritten.new == 2
