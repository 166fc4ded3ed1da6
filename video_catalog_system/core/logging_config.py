"""
Logging configuration for the Video Catalog System.

Console output is colored by level; the optional log file rotates and
receives everything down to DEBUG.
"""

import logging
import logging.handlers
import os
import sys
import threading
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Optional

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# logger name -> (level normally, level when running at DEBUG)
COMPONENT_LEVELS = {
    "video_catalog_system.auth": (logging.INFO, logging.DEBUG),
    "video_catalog_system.video": (logging.INFO, logging.DEBUG),
    "video_catalog_system.api": (logging.INFO, logging.DEBUG),
    "uvicorn": (logging.WARNING, logging.INFO),
    "fastapi": (logging.WARNING, logging.WARNING),
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name with ANSI codes"""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        # Color a copy so file handlers sharing the record stay plain
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None, enable_console: bool = True) -> logging.Logger:
    """Configure the root logger for the whole application and return it"""
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    if log_file:
        try:
            root_logger.addHandler(_rotating_file_handler(log_file))
        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}")

    debug = level <= logging.DEBUG
    for name, (normal_level, debug_level) in COMPONENT_LEVELS.items():
        logging.getLogger(name).setLevel(debug_level if debug else normal_level)

    install_exception_hook()

    logging.getLogger(__name__).info(f"Logging initialized - Level: {logging.getLevelName(level)}, File: {log_file}")
    return root_logger


def _rotating_file_handler(log_file: str) -> logging.Handler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def install_exception_hook() -> None:
    """Send uncaught exceptions (other than Ctrl+C) to the log"""

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logging.getLogger("uncaught_exception").critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception


class ErrorTracker:
    """Thread-safe tally of the errors one component has logged"""

    def __init__(self, component_name: str):
        self.component_name = component_name
        self.logger = logging.getLogger(f"errors.{component_name}")
        self._lock = threading.Lock()
        self._counts: Counter = Counter()
        self._last_error_time: Optional[datetime] = None

    def log_error(self, error: BaseException, context: str = "") -> None:
        with self._lock:
            self._counts[type(error).__name__] += 1
            self._last_error_time = datetime.now()

        where = f" ({context})" if context else ""
        self.logger.error(f"Error in {self.component_name}{where}: {error}", exc_info=error)

    def log_warning(self, message: str, context: str = "") -> None:
        where = f" ({context})" if context else ""
        self.logger.warning(f"Warning in {self.component_name}{where}: {message}")

    def get_error_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "component": self.component_name,
                "error_count": sum(self._counts.values()),
                "errors_by_type": dict(self._counts),
                "last_error_time": self._last_error_time.isoformat() if self._last_error_time else None,
            }
