"""Unit tests for tandemsim logging configuration."""

from __future__ import annotations

import json
import logging
import os
from unittest import mock

import tandemsim
from tandemsim.logging_config import (
    LOGGER_NAME,
    JsonFormatter,
    _get_level,
    _get_logger,
)


class TestSilentByDefault:
    def test_import_produces_no_log_output(self, capfd):
        import importlib

        importlib.reload(tandemsim)

        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_logger_has_null_handler(self):
        logger = logging.getLogger(LOGGER_NAME)
        null_handlers = [h for h in logger.handlers if isinstance(h, logging.NullHandler)]
        assert len(null_handlers) >= 1


class TestEnableConsoleLogging:
    def test_sets_level(self):
        tandemsim.enable_console_logging(level="DEBUG")

        assert _get_logger().level == logging.DEBUG

    def test_outputs_to_stderr(self, capfd):
        tandemsim.enable_console_logging(level="INFO", format="[CUSTOM] %(message)s")

        logging.getLogger(f"{LOGGER_NAME}.test").info("hello")

        assert "[CUSTOM] hello" in capfd.readouterr().err


class TestFileLogging:
    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "logs" / "nested" / "run.log"
        handler = tandemsim.enable_file_logging(path)

        logging.getLogger(f"{LOGGER_NAME}.test").info("to file")
        handler.flush()

        assert "to file" in path.read_text()

    def test_json_file(self, tmp_path):
        path = tmp_path / "run.json"
        handler = tandemsim.enable_json_file_logging(path)

        logging.getLogger(f"{LOGGER_NAME}.test").warning("structured")
        handler.flush()

        data = json.loads(path.read_text().strip())
        assert data["message"] == "structured"
        assert data["level"] == "WARNING"


class TestJsonFormatter:
    def test_formats_record(self):
        record = logging.LogRecord(
            name="tandemsim.core.simulation",
            level=logging.INFO,
            pathname="simulation.py",
            lineno=1,
            msg="halted at t=%.4f",
            args=(6.5,),
            exc_info=None,
        )

        data = json.loads(JsonFormatter().format(record))
        assert data["logger"] == "tandemsim.core.simulation"
        assert data["message"] == "halted at t=6.5000"
        assert "timestamp" in data


class TestConfigureFromEnv:
    def test_no_env_does_nothing(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            tandemsim.configure_from_env()

        handlers = [h for h in _get_logger().handlers if not isinstance(h, logging.NullHandler)]
        assert handlers == []

    def test_level_enables_console(self):
        with mock.patch.dict(os.environ, {"TS_LOGGING": "debug"}, clear=True):
            tandemsim.configure_from_env()

        assert _get_logger().level == logging.DEBUG
        assert any(type(h) is logging.StreamHandler for h in _get_logger().handlers)

    def test_json_to_file(self, tmp_path):
        path = tmp_path / "env.log"
        env = {"TS_LOG_FILE": str(path), "TS_LOG_JSON": "1"}
        with mock.patch.dict(os.environ, env, clear=True):
            tandemsim.configure_from_env()

        file_handlers = [h for h in _get_logger().handlers if isinstance(h.formatter, JsonFormatter)]
        assert len(file_handlers) == 1


class TestLevels:
    def test_get_level(self):
        assert _get_level("warning") == logging.WARNING
        assert _get_level(15) == 15
        assert _get_level("nonsense") == logging.INFO

    def test_disable_logging(self, capfd):
        tandemsim.enable_console_logging()
        tandemsim.disable_logging()

        logging.getLogger(f"{LOGGER_NAME}.test").critical("hidden")

        assert "hidden" not in capfd.readouterr().err
        assert _get_logger().level == logging.CRITICAL + 1
