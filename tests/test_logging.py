"""
Tests for logging utilities and configuration.
"""

import json
import logging
import logging.handlers
import sys

import pytest

from fancywalks.core.logging_config import (
    ColoredFormatter,
    JSONFormatter,
    get_log_level,
    setup_logging,
)
from fancywalks.utils.logging import PhaseTimer, timed_phase


def make_record(msg="test message", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="test",
        level=level,
        pathname="walks.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_get_log_level(self):
        """Test log level name conversion."""
        assert get_log_level("DEBUG") == logging.DEBUG
        assert get_log_level("INFO") == logging.INFO
        assert get_log_level("WARNING") == logging.WARNING
        assert get_log_level("ERROR") == logging.ERROR
        assert get_log_level("CRITICAL") == logging.CRITICAL
        assert get_log_level("invalid") == logging.INFO  # Default

    def test_get_log_level_case_insensitive(self):
        """Test log level is case insensitive."""
        assert get_log_level("debug") == logging.DEBUG
        assert get_log_level("DeBuG") == logging.DEBUG

    def test_setup_logging_console_only(self):
        """Test logging setup with console handler only."""
        setup_logging(log_level="DEBUG", enable_console=True)

        logger = logging.getLogger()
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_default_level_by_environment(self):
        """Test DEBUG in development and INFO in production."""
        setup_logging(environment="development")
        assert logging.getLogger().level == logging.DEBUG

        setup_logging(environment="production")
        assert logging.getLogger().level == logging.INFO

    def test_console_uses_stderr(self, capsys):
        """Test console logs stay off stdout."""
        setup_logging(log_level="INFO", environment="production")
        logging.getLogger("fancywalks.test").info("to stderr")

        captured = capsys.readouterr()
        assert "to stderr" not in captured.out
        assert "to stderr" in captured.err

    def test_file_logging_json(self, tmp_path):
        """Test JSON file handler writes parseable records."""
        log_file = tmp_path / "logs" / "fancywalks.log"
        setup_logging(log_level="INFO", log_file=log_file, json_logs=True, enable_console=False)

        logging.getLogger("fancywalks.test").info("exported", extra={"rows": 4})
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        data = json.loads(lines[-1])
        assert data["message"] == "exported"
        assert data["rows"] == 4
        assert isinstance(
            logging.getLogger().handlers[0], logging.handlers.RotatingFileHandler
        )


class TestFormatters:
    """Tests for custom formatters."""

    def test_json_formatter(self):
        """Test JSON output includes standard and extra fields."""
        output = JSONFormatter().format(make_record(duration_ms=12.5))
        data = json.loads(output)

        assert data["level"] == "INFO"
        assert data["message"] == "test message"
        assert data["line"] == 42
        assert data["duration_ms"] == 12.5
        assert "msg" not in data

    def test_json_formatter_exception(self):
        """Test exception info is included."""
        try:
            raise ValueError("bad length")
        except ValueError:
            record = make_record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: bad length" in data["exception"]

    def test_colored_formatter(self):
        """Test level names are colored and restored."""
        record = make_record(level=logging.WARNING)
        output = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[33m" in output
        assert record.levelname == "WARNING"


class TestPhaseTiming:
    """Tests for pipeline phase timing."""

    def test_phase_timer(self, caplog):
        """Test the timer records and logs a duration."""
        with caplog.at_level(logging.INFO, logger="fancywalks.utils.logging"):
            with PhaseTimer("load_kmz") as timer:
                pass

        assert timer.duration_ms is not None
        assert timer.duration_ms >= 0
        assert "load_kmz finished in" in caplog.text
        assert caplog.records[-1].phase == "load_kmz"

    def test_phase_timer_level(self, caplog):
        """Test the log level can be lowered."""
        with caplog.at_level(logging.INFO, logger="fancywalks.utils.logging"):
            with PhaseTimer("extract_walks", level=logging.DEBUG):
                pass

        assert "extract_walks" not in caplog.text

    def test_phase_timer_failure(self, caplog):
        """Test a failing phase is logged as failed and the error propagates."""
        with caplog.at_level(logging.INFO, logger="fancywalks.utils.logging"):
            with pytest.raises(RuntimeError, match="boom"):
                with PhaseTimer("export_csv"):
                    raise RuntimeError("boom")

        assert "export_csv failed in" in caplog.text

    def test_timed_phase_decorator(self, caplog):
        """Test the decorator keeps the result and logs the phase."""

        @timed_phase("add")
        def add(a, b):
            return a + b

        with caplog.at_level(logging.INFO, logger="fancywalks.utils.logging"):
            assert add(2, 3) == 5

        assert "add finished in" in caplog.text
        assert add.__name__ == "add"
