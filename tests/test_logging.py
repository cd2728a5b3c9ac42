"""
Component logger setup.
"""

import logging

from flickfinder.utils import ROOT_LOGGER, setup_logger


class TestSetupLogger:
    """Module loggers hang off one configured parent."""

    def test_module_logger_is_child_of_parent(self, tmp_path):
        logger = setup_logger("flickfinder.filters", tmp_path)

        assert logger.name == "flickfinder.filters"
        assert logger.parent is logging.getLogger(ROOT_LOGGER)

    def test_bare_name_is_namespaced(self, tmp_path):
        assert setup_logger("seeder", tmp_path).name == "flickfinder.seeder"

    def test_log_file_follows_log_dir(self, tmp_path):
        logger = setup_logger("flickfinder.database", tmp_path / "first")
        setup_logger("flickfinder.database", tmp_path / "second")
        logger.warning("moved")

        file_handlers = [
            h for h in logging.getLogger(ROOT_LOGGER).handlers
            if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1
        for handler in file_handlers:
            handler.flush()
        written = list((tmp_path / "second").glob("flickfinder_*.log"))
        assert len(written) == 1
        assert "moved" in written[0].read_text()

    def test_level_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        logger = setup_logger("flickfinder.filters", tmp_path)

        assert logger.isEnabledFor(logging.DEBUG)

    def test_unknown_level_name_defaults_to_info(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        setup_logger("flickfinder.filters", tmp_path)

        assert logging.getLogger(ROOT_LOGGER).level == logging.INFO
