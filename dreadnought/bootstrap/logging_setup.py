"""
bootstrap/logging_setup.py - Logging configuration

Console output goes to stderr so that reports written to stdout stay clean.
"""

from __future__ import annotations
import json
import logging
import sys

from dreadnought.bootstrap.config import DEFAULT_LOG_FORMAT

# Marks handlers installed here so a second call replaces rather than stacks them
_HANDLER_TAG = "_dreadnought_handler"


class JSONFormatter(logging.Formatter):
    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: str = "WARNING",
    log_file: str = None,
    json_format: bool = False,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(fmt)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    setattr(console_handler, _HANDLER_TAG, True)

    # Root logger
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)
