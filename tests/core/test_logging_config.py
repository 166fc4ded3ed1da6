import logging
import logging.handlers
import sys

import pytest

from video_catalog_system.core.logging_config import (
    ColoredFormatter,
    ErrorTracker,
    install_exception_hook,
    setup_logging,
)


@pytest.fixture
def preserve_root_logging(monkeypatch):
    """setup_logging replaces root handlers and the excepthook; put them back"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_installs_console_and_rotating_file(tmp_path, preserve_root_logging):
    log_file = tmp_path / "logs" / "service.log"

    setup_logging(log_level="DEBUG", log_file=str(log_file))

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
    assert log_file.exists()
    assert logging.getLogger("uvicorn").level == logging.INFO
    assert logging.getLogger("video_catalog_system.auth").level == logging.DEBUG


def test_component_levels_quiet_at_info(tmp_path, preserve_root_logging):
    setup_logging(log_level="INFO", log_file=None)

    assert logging.getLogger("uvicorn").level == logging.WARNING
    assert logging.getLogger("fastapi").level == logging.WARNING


def test_colored_formatter_leaves_record_untouched():
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)

    output = ColoredFormatter("%(levelname)s %(message)s").format(record)

    assert "\033[33m" in output
    assert record.levelname == "WARNING"


def test_error_tracker_counts_errors_by_type(caplog):
    tracker = ErrorTracker("unit")

    with caplog.at_level(logging.WARNING):
        tracker.log_error(ValueError("boom"), "parsing")
        tracker.log_error(ValueError("again"))
        tracker.log_error(KeyError("title"), "lookup")
        tracker.log_warning("odd input", "parsing")

    stats = tracker.get_error_stats()
    assert stats["component"] == "unit"
    assert stats["error_count"] == 3
    assert stats["errors_by_type"] == {"ValueError": 2, "KeyError": 1}
    assert stats["last_error_time"] is not None
    assert "Error in unit (parsing): boom" in caplog.text
    assert "Error in unit: again" in caplog.text
    assert "Warning in unit (parsing): odd input" in caplog.text


def test_error_tracker_starts_empty():
    stats = ErrorTracker("idle").get_error_stats()

    assert stats == {"component": "idle", "error_count": 0, "errors_by_type": {}, "last_error_time": None}


def test_exception_hook_logs_uncaught_errors(monkeypatch, caplog):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    install_exception_hook()

    with caplog.at_level(logging.CRITICAL, logger="uncaught_exception"):
        sys.excepthook(RuntimeError, RuntimeError("crash"), None)

    assert "Uncaught exception" in caplog.text
