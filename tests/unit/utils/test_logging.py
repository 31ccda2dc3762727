"""Tests for logging utility."""

import logging
from io import StringIO


class TestLoggerConfiguration:
    """Test that logger configures correctly from settings."""

    def test_configure_logging_creates_logger(self):
        """configure_logging should return the package logger."""
        from ravyz_match.utils.logging import configure_logging

        logger = configure_logging()
        assert isinstance(logger, logging.Logger)
        assert logger.name == "ravyz_match"

    def test_configure_logging_respects_level(self):
        """Logger should respect the configured log level."""
        from ravyz_match.utils.logging import configure_logging

        logger = configure_logging(level="DEBUG")
        assert logger.level == logging.DEBUG

        logger = configure_logging(level="WARNING")
        assert logger.level == logging.WARNING
        assert logger.handlers[0].level == logging.WARNING

    def test_configure_logging_default_level_is_info(self):
        """Default log level should be INFO."""
        from ravyz_match.utils.logging import configure_logging

        logger = configure_logging()
        assert logger.level == logging.INFO

    def test_configure_logging_installs_single_handler(self):
        """Reconfiguring should not stack handlers."""
        from ravyz_match.utils.logging import configure_logging

        configure_logging()
        logger = configure_logging(level="ERROR")

        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_reset_logging_clears_handlers(self):
        """reset_logging restores the unconfigured state."""
        from ravyz_match.utils.logging import configure_logging, reset_logging

        logger = configure_logging()
        reset_logging()

        assert logger.handlers == []
        assert logger.propagate is True


class TestLogOutput:
    """Test that log output format is correct."""

    def test_module_records_reach_package_handler(self):
        """Records from library modules use the package format."""
        from ravyz_match.utils.logging import configure_logging

        logger = configure_logging(level="INFO")

        buffer = StringIO()
        handler = logging.StreamHandler(buffer)
        handler.setFormatter(logger.handlers[0].formatter)
        logger.addHandler(handler)

        logging.getLogger("ravyz_match.results.repository").info("Saved match")

        output = buffer.getvalue()
        assert "INFO" in output
        assert "ravyz_match.results.repository" in output
        assert "Saved match" in output


class TestLogFile:
    """Test the optional file handler."""

    def test_log_file_receives_records(self, tmp_path):
        """Records are written to the configured file as well."""
        from ravyz_match.utils.logging import configure_logging, reset_logging

        log_file = tmp_path / "logs" / "ravyz.log"
        configure_logging(level="INFO", log_file=log_file)

        logging.getLogger("ravyz_match.matching.service").info("Scored 3 pairs")
        reset_logging()

        assert "Scored 3 pairs" in log_file.read_text(encoding="utf-8")

    def test_no_log_file_means_stderr_only(self):
        """Without a file only the stderr handler is installed."""
        from ravyz_match.utils.logging import configure_logging

        logger = configure_logging()

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], logging.FileHandler)


class TestQuietLoggers:
    """Test that chatty dependency loggers are held back."""

    def test_aiosqlite_stays_at_warning_in_debug_mode(self):
        """DEBUG for the package does not turn on aiosqlite statement logs."""
        from ravyz_match.utils.logging import configure_logging, reset_logging

        configure_logging(level="DEBUG")
        assert logging.getLogger("aiosqlite").level == logging.WARNING

        reset_logging()
        assert logging.getLogger("aiosqlite").level == logging.NOTSET
