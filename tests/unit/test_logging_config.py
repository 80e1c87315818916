"""Unit tests for randgraph logging configuration."""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler

import randgraph
from randgraph.logging_config import LOGGER_NAME, JsonFormatter, _get_level, _get_logger


def _real_handlers():
    return [h for h in _get_logger().handlers if not isinstance(h, logging.NullHandler)]


class TestSilentByDefault:
    def test_import_produces_no_log_output(self, capfd):
        import importlib

        importlib.reload(randgraph)
        randgraph.WeightedSampler(seed=1).gaussian(0, 1)

        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_logger_has_null_handler(self):
        logger = logging.getLogger(LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


class TestEnableLogging:
    def test_console_logging(self):
        handler = randgraph.enable_console_logging(level="DEBUG")

        assert handler in _real_handlers()
        assert _get_logger().level == logging.DEBUG

    def test_console_logging_emits_chart_messages(self, caplog):
        randgraph.enable_console_logging(level="INFO")
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            chart = randgraph.BarChart(randgraph.Viewport(100, 100))
            chart.set_weights([1, 2])

        assert "number of weights has changed" in caplog.text

    def test_file_logging_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "rg.log"
        handler = randgraph.enable_file_logging(path, level="INFO")

        logging.getLogger("randgraph.test").info("hello file")
        handler.flush()

        assert isinstance(handler, RotatingFileHandler)
        assert "hello file" in path.read_text()

    def test_json_logging(self):
        handler = randgraph.enable_json_logging(level="WARNING")
        assert isinstance(handler.formatter, JsonFormatter)
        assert _get_logger().level == logging.WARNING


class TestJsonFormatter:
    def test_formats_record_as_json(self):
        record = logging.LogRecord("randgraph.chart", logging.INFO, __file__, 1, "bars=%d", (5,), None)
        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "randgraph.chart"
        assert data["message"] == "bars=5"
        assert "timestamp" in data

    def test_includes_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys

            record = logging.LogRecord("randgraph", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        data = json.loads(JsonFormatter().format(record))
        assert "RuntimeError: boom" in data["exception"]


class TestConfigureFromEnv:
    def test_no_variables_does_nothing(self, monkeypatch):
        monkeypatch.delenv("RG_LOGGING", raising=False)
        monkeypatch.delenv("RG_LOG_FILE", raising=False)

        randgraph.configure_from_env()

        assert _real_handlers() == []

    def test_level_enables_console(self, monkeypatch):
        monkeypatch.setenv("RG_LOGGING", "debug")
        monkeypatch.delenv("RG_LOG_FILE", raising=False)
        monkeypatch.delenv("RG_LOG_JSON", raising=False)

        randgraph.configure_from_env()

        assert len(_real_handlers()) == 1
        assert _get_logger().level == logging.DEBUG

    def test_json_file(self, monkeypatch, tmp_path):
        path = tmp_path / "rg.json"
        monkeypatch.delenv("RG_LOGGING", raising=False)
        monkeypatch.setenv("RG_LOG_FILE", str(path))
        monkeypatch.setenv("RG_LOG_JSON", "1")

        randgraph.configure_from_env()
        logging.getLogger("randgraph.env").info("structured")
        for handler in _real_handlers():
            handler.flush()

        assert json.loads(path.read_text().splitlines()[0])["message"] == "structured"


class TestLevels:
    def test_get_level(self):
        assert _get_level("warning") == logging.WARNING
        assert _get_level(15) == 15
        assert _get_level("nonsense") == logging.INFO

    def test_set_level(self):
        randgraph.set_level("ERROR")
        assert _get_logger().level == logging.ERROR

    def test_set_module_level(self):
        randgraph.set_module_level("chart", "DEBUG")
        assert logging.getLogger("randgraph.chart").level == logging.DEBUG
        logging.getLogger("randgraph.chart").setLevel(logging.NOTSET)

    def test_disable_logging(self):
        randgraph.enable_console_logging()
        randgraph.disable_logging()

        assert _real_handlers() == []
        assert _get_logger().level > logging.CRITICAL
