#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
Logging setup for zpatchgen.

Standard output carries the rendered patch tables, so every log handler
writes to standard error.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

ROOT_LOGGER_NAME = "zpatchgen"
LOG_JSON_ENV = "ZPATCHGEN_LOG_JSON"

# =====================================================================================================
# Formatters
# =====================================================================================================

class FastFormatter(logging.Formatter):
    """Level-keyed console formatter with optional colours."""

    def __init__(self, enable_colors: bool = False):
        super().__init__()
        self.enable_colors = enable_colors

        self._formats = {
            logging.ERROR: "[{asctime}] ERROR   [{name}] {message}",
            logging.WARNING: "[{asctime}] WARNING [{name}] {message}",
            logging.INFO: "[{asctime}] INFO    {message}",
            logging.DEBUG: "[{asctime}] DEBUG   {name}:{lineno} - {message}"
        }
        self._formatters = {
            level: logging.Formatter(fmt, style='{', datefmt='%H:%M:%S')
            for level, fmt in self._formats.items()
        }

        self.colors = {
            'ERROR': '\033[91m',     # Red
            'WARNING': '\033[93m',   # Yellow
            'INFO': '\033[92m',      # Green
            'DEBUG': '\033[94m',     # Blue
            'RESET': '\033[0m'
        } if enable_colors else {}

    def format(self, record):
        formatter = self._formatters.get(record.levelno, self._formatters[logging.INFO])
        text = formatter.format(record)
        color = self.colors.get(record.levelname)
        if color:
            return f"{color}{text}{self.colors['RESET']}"
        return text


class JsonFormatter(logging.Formatter):
    """Structured JSON formatter (optional)."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
            "thread": record.threadName,
            "process": record.process,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)

# =====================================================================================================
# Setup
# =====================================================================================================

def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def setup_logging(
    log_level: str = "WARNING",
    structured_json: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach a single console handler to the project logger.

    Args:
        log_level: Level name, e.g. "DEBUG"
        structured_json: Emit JSON lines; defaults to the ZPATCHGEN_LOG_JSON variable
        stream: Target stream (default: sys.stderr)

    Returns:
        The configured project logger
    """
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)
    target = stream if stream is not None else sys.stderr
    use_json = structured_json if structured_json is not None else _env_bool(LOG_JSON_ENV)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    enable_colors = (hasattr(target, 'isatty') and
                     target.isatty() and
                     os.environ.get('TERM') != 'dumb')

    handler = logging.StreamHandler(target)
    handler.setLevel(numeric_level)
    handler.setFormatter(JsonFormatter() if use_json else FastFormatter(enable_colors=enable_colors))
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the project logger."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
