# test_logger.py

import logging

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tintme.logger import Logger


class TestLogger:
    def setup_method(self):
        self.names = []

    def teardown_method(self):
        for name in self.names:
            underlying = logging.getLogger(name)
            for handler in list(underlying.handlers):
                handler.close()
                underlying.removeHandler(handler)

    def make(self, name, **kwargs):
        self.names.append(name)
        return Logger(name, **kwargs)

    def test_disabled_logger_is_silent(self):
        logger = self.make("tintme.test.disabled")
        assert any(isinstance(h, logging.NullHandler) for h in logging.getLogger(logger.name).handlers)
        logger.debug("nothing to see")

    def test_enabled_logger_writes_file(self, tmp_path):
        log_file = tmp_path / "debug.log"
        logger = self.make("tintme.test.enabled", logging_enabled=True, log_file=str(log_file))
        logger.info("styled output ready")
        content = log_file.read_text()
        assert "INFO - styled output ready" in content

    def test_enabling_twice_does_not_duplicate_lines(self, tmp_path):
        log_file = tmp_path / "twice.log"
        self.make("tintme.test.twice", logging_enabled=True, log_file=str(log_file))
        logger = self.make("tintme.test.twice", logging_enabled=True, log_file=str(log_file))
        logger.info("once")
        assert log_file.read_text().count("once") == 1
        assert len(logging.getLogger("tintme.test.twice").handlers) == 1

    def test_enabling_after_silent_default(self, tmp_path):
        log_file = tmp_path / "late.log"
        self.make("tintme.test.late")
        logger = self.make("tintme.test.late", logging_enabled=True, log_file=str(log_file))
        logger.debug("now visible")
        assert "DEBUG - now visible" in log_file.read_text()
