"""
Tests for logging setup.
"""

import logging

from countnoun.logging_config import FlushingHandler, level_from_env, setup_logging


class TestSetupLogging:
    def test_creates_daily_log_file(self, tmp_path, clean_countnoun_logger):
        logger = setup_logging(log_dir=tmp_path / "logs", level=logging.DEBUG)

        assert logger.name == "countnoun"
        assert logger.level == logging.DEBUG
        log_files = list((tmp_path / "logs").glob("countnoun-*.log"))
        assert len(log_files) == 1

        logging.getLogger("countnoun.engine").debug("hello from the engine")
        assert "hello from the engine" in log_files[0].read_text(encoding="utf-8")

    def test_repeated_calls_do_not_duplicate_handlers(self, tmp_path, clean_countnoun_logger):
        setup_logging(log_dir=tmp_path)
        setup_logging(log_dir=tmp_path)

        file_handlers = [
            h for h in clean_countnoun_logger.handlers if isinstance(h, FlushingHandler)
        ]
        assert len(file_handlers) == 1

    def test_console_handler_added_once(self, tmp_path, clean_countnoun_logger):
        setup_logging(log_dir=tmp_path, console=True)
        setup_logging(log_dir=tmp_path, console=True)

        console_handlers = [
            h for h in clean_countnoun_logger.handlers if type(h) is logging.StreamHandler
        ]
        assert len(console_handlers) == 1


class TestLevelFromEnv:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("COUNTNOUN_LOG_LEVEL", raising=False)
        assert level_from_env() == logging.INFO

    def test_named_level(self, monkeypatch):
        monkeypatch.setenv("COUNTNOUN_LOG_LEVEL", "debug")
        assert level_from_env() == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("COUNTNOUN_LOG_LEVEL", "chatty")
        assert level_from_env(default=logging.WARNING) == logging.WARNING
