# hilite/utils/logger.py
"""
Logging utilities for hilite.

Diagnostics always go to stderr: stdout carries the colorized data stream
and must never receive log records. File logging is opt-in and only
touches the filesystem once a log file has been configured.
"""

import logging
import os
import sys
import threading
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from pathlib import Path

# Lazy-loaded module references
_logging_handlers = None


def _get_logging_handlers():
    """Lazy import of logging.handlers."""
    global _logging_handlers
    if _logging_handlers is None:
        import logging.handlers as lh

        _logging_handlers = lh
    return _logging_handlers


class LogLevel:
    """Log levels for the application (lightweight enum alternative)."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


LEVEL_NAMES: Dict[str, int] = {
    "DEBUG": LogLevel.DEBUG,
    "INFO": LogLevel.INFO,
    "WARNING": LogLevel.WARNING,
    "ERROR": LogLevel.ERROR,
    "CRITICAL": LogLevel.CRITICAL,
}


class LoggerConfig:
    """Configuration for the logging system."""

    def __init__(self):
        self.log_file: Optional["Path"] = None
        self.max_file_size = 10 * 1024 * 1024  # 10MB
        self.backup_count = 5
        self.console_level = LogLevel.WARNING
        self.file_level = LogLevel.DEBUG
        self.use_color = sys.stderr.isatty() if sys.stderr else False

    @property
    def log_to_file(self) -> bool:
        return self.log_file is not None


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output that preserves alignment."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def __init__(self, fmt=None, datefmt=None, use_color: bool = True):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record):
        """
        Applies color to the level name before formatting, then restores
        the record so other handlers see the plain level name.
        """
        original_levelname = record.levelname

        if self.use_color and original_levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[original_levelname]}{original_levelname}"
                f"{self.COLORS['RESET']}"
            )

        formatted_message = super().format(record)
        record.levelname = original_levelname
        return formatted_message


class StderrHandler(logging.StreamHandler):
    """
    Console handler bound to whatever sys.stderr is when a record is
    emitted, not when the handler was built.
    """

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


class ThreadSafeLogger:
    """Thread-safe logger implementation."""

    def __init__(self, name: str, config: LoggerConfig):
        self.name = name
        self.config = config
        self._logger = logging.getLogger(name)
        self._lock = threading.Lock()
        self._setup_logger()

    def _setup_logger(self):
        """Set up the logger with handlers and formatters based on current config."""
        with self._lock:
            for handler in list(self._logger.handlers):
                self._logger.removeHandler(handler)
                handler.close()

            self._logger.propagate = False
            self._logger.setLevel(logging.DEBUG)

            console_handler = StderrHandler()
            console_handler.setLevel(self.config.console_level)
            console_handler.setFormatter(
                ColoredFormatter(
                    fmt="hilite: %(levelname)s: %(message)s",
                    use_color=self.config.use_color,
                )
            )
            self._logger.addHandler(console_handler)

            if self.config.log_to_file:
                handlers_module = _get_logging_handlers()
                file_formatter = logging.Formatter(
                    fmt="%(asctime)s | %(name)s | %(levelname)-8s | %(funcName)s:%(lineno)d | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
                file_handler = handlers_module.RotatingFileHandler(
                    self.config.log_file,
                    maxBytes=self.config.max_file_size,
                    backupCount=self.config.backup_count,
                    encoding="utf-8",
                )
                file_handler.setLevel(self.config.file_level)
                file_handler.setFormatter(file_formatter)
                self._logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        self._logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self._logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._logger.warning(message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs):
        self._logger.error(message, exc_info=exc_info, **kwargs)


class LoggerManager:
    """Centralized logger manager."""

    _instance: Optional["LoggerManager"] = None
    _lock = threading.RLock()

    def __new__(cls) -> "LoggerManager":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        self.config = LoggerConfig()
        self._loggers: Dict[str, ThreadSafeLogger] = {}

    def get_logger(self, name: str) -> ThreadSafeLogger:
        if name not in self._loggers:
            with self._lock:
                if name not in self._loggers:
                    self._loggers[name] = ThreadSafeLogger(name, self.config)
        return self._loggers[name]

    def reconfigure_all_loggers(self):
        """Re-applies configuration to all existing logger instances."""
        with self._lock:
            for logger in self._loggers.values():
                logger._setup_logger()

    def set_console_level(self, level: int):
        with self._lock:
            self.config.console_level = level
            self.reconfigure_all_loggers()

    def set_log_file(self, path: Optional["Path"]):
        with self._lock:
            if self.config.log_file != path:
                if path is not None:
                    path.parent.mkdir(parents=True, exist_ok=True)
                self.config.log_file = path
                try:
                    self.reconfigure_all_loggers()
                except OSError:
                    self.config.log_file = None
                    self.reconfigure_all_loggers()
                    raise

    def enable_debug_mode(self):
        self.set_console_level(LogLevel.DEBUG)
        os.environ["HILITE_DEBUG"] = "1"


_logger_manager = LoggerManager()


def get_logger(name: str) -> ThreadSafeLogger:
    """Get a logger instance."""
    return _logger_manager.get_logger(name)


def set_console_log_level(level_str: str):
    """
    Set console logging level globally from a string.

    Raises:
        KeyError: If the level name is unknown.
    """
    _logger_manager.set_console_level(LEVEL_NAMES[level_str.upper()])


def set_log_file(path: Optional["Path"]):
    """Enable file logging to ``path``, or disable it with None."""
    _logger_manager.set_log_file(path)


def enable_debug_mode():
    """Enable debug mode for all loggers."""
    _logger_manager.enable_debug_mode()

