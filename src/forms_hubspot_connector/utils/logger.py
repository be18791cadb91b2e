#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Logging Configuration Module

Provides a configurable logging setup for the HubSpot connector.
Supports console and file handlers, log levels, and plain or JSON formatting.
"""

import os
import sys
import json
import logging
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from typing import Optional, Dict, Any, Union

# Default log levels
DEFAULT_CONSOLE_LEVEL = logging.INFO
DEFAULT_FILE_LEVEL = logging.DEBUG

# Environment variable names
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_LOG_FILE_PATH = "LOG_FILE_PATH"
ENV_LOG_JSON = "LOG_JSON"

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Global logger registry to avoid duplicate handlers
_loggers: Dict[str, logging.Logger] = {}


def _resolve_level(level: Optional[Union[int, str]], default: int) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    if level.upper() in LOG_LEVELS:
        return LOG_LEVELS[level.upper()]
    try:
        return int(level)
    except ValueError:
        return default


class LoggerConfig:
    """Configuration class for logger settings."""

    def __init__(
        self,
        name: str = "forms_hubspot_connector",
        console_level: Optional[Union[int, str]] = None,
        file_level: Optional[Union[int, str]] = None,
        log_file: Optional[str] = None,
        rotating: bool = True,
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        daily_rotation: bool = False,
        format_string: Optional[str] = None,
        json_logs: Optional[bool] = None,
        propagate: bool = False,
    ):
        """
        Initialize logger configuration.

        Args:
            name: Logger name
            console_level: Console logging level (int or string)
            file_level: File logging level (int or string)
            log_file: Path to log file (None falls back to LOG_FILE_PATH, unset means no file)
            rotating: Whether to use rotating file handler
            max_bytes: Maximum file size for rotating handler
            backup_count: Number of backup files to keep
            daily_rotation: Whether to rotate logs daily instead of by size
            format_string: Custom log format string
            json_logs: Whether to format logs as JSON (None falls back to LOG_JSON)
            propagate: Whether to propagate to parent loggers
        """
        self.name = name

        env_level = os.environ.get(ENV_LOG_LEVEL)
        env_default = _resolve_level(env_level, DEFAULT_CONSOLE_LEVEL) if env_level else None

        if console_level is not None:
            self.console_level = _resolve_level(console_level, DEFAULT_CONSOLE_LEVEL)
        elif env_default is not None:
            self.console_level = env_default
        else:
            self.console_level = DEFAULT_CONSOLE_LEVEL

        if file_level is not None:
            self.file_level = _resolve_level(file_level, DEFAULT_FILE_LEVEL)
        elif env_default is not None:
            self.file_level = env_default
        else:
            self.file_level = DEFAULT_FILE_LEVEL

        self.log_file = log_file or os.environ.get(ENV_LOG_FILE_PATH) or None

        self.rotating = rotating
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.daily_rotation = daily_rotation

        if format_string:
            self.format_string = format_string
        else:
            self.format_string = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

        if json_logs is None:
            json_logs = os.environ.get(ENV_LOG_JSON, "false").lower() == "true"
        self.json_logs = json_logs
        self.propagate = propagate


class JsonFormatter(logging.Formatter):
    """
    Formatter that outputs one JSON object per log record.

    Structured context attached by the result reporter (``extra={"context": ...}``)
    is emitted under the ``context`` key.
    """

    def __init__(
        self,
        fmt_dict: Optional[Dict[str, Any]] = None,
        time_format: str = "%Y-%m-%d %H:%M:%S",
    ):
        """
        Initialize JSON formatter.

        Args:
            fmt_dict: Mapping of output key to LogRecord attribute
            time_format: Format string for timestamps
        """
        super().__init__()
        self.fmt_dict = fmt_dict or {
            "timestamp": "asctime",
            "level": "levelname",
            "name": "name",
            "module": "module",
            "function": "funcName",
            "line": "lineno",
            "message": "message",
        }
        self.time_format = time_format

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        record.asctime = self.formatTime(record, self.time_format)

        log_record = {}
        for key, value in self.fmt_dict.items():
            if hasattr(record, value):
                log_record[key] = getattr(record, value)

        context = getattr(record, "context", None)
        if context:
            log_record["context"] = context

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record, default=str)


def configure_logger(config: Optional[LoggerConfig] = None) -> logging.Logger:
    """
    Configure a logger with the specified settings.

    Args:
        config: Logger configuration (or None for default)

    Returns:
        Configured logger
    """
    if config is None:
        config = LoggerConfig()

    if config.name in _loggers:
        return _loggers[config.name]

    logger = logging.getLogger(config.name)
    logger.setLevel(min(config.console_level, config.file_level))
    logger.propagate = config.propagate

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if config.json_logs:
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(config.format_string)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(config.console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.log_file:
        os.makedirs(os.path.dirname(os.path.abspath(config.log_file)), exist_ok=True)

        if config.daily_rotation:
            file_handler: logging.Handler = TimedRotatingFileHandler(
                config.log_file,
                when="midnight",
                backupCount=config.backup_count,
                encoding="utf-8"
            )
        elif config.rotating:
            file_handler = RotatingFileHandler(
                config.log_file,
                maxBytes=config.max_bytes,
                backupCount=config.backup_count,
                encoding="utf-8"
            )
        else:
            file_handler = logging.FileHandler(config.log_file, encoding="utf-8")

        file_handler.setLevel(config.file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _loggers[config.name] = logger

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger by name, creating it if it doesn't exist.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if name in _loggers:
        return _loggers[name]

    return configure_logger(LoggerConfig(name=name))


def reset_loggers() -> None:
    """Forget configured loggers so the next lookup rebuilds their handlers."""
    for logger in _loggers.values():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
    _loggers.clear()
