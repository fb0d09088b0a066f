"""
Log formatters for structured and console output.

- StructuredFormatter: JSON lines for file logs
- ConsoleFormatter: human-readable lines for the terminal
"""

import json
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Optional


# Process-wide context values shared by all records
_context: Dict[str, Any] = {}
_context_lock = threading.RLock()

# Context keys shown inline on console output
CONSOLE_CONTEXT_KEYS = ('phase', 'session', 'source', 'run_id')


def get_context_value(key: str) -> Optional[Any]:
    """Get a context value by key, or None if not set."""
    with _context_lock:
        return _context.get(key)


def set_context_value(key: str, value: Any) -> None:
    with _context_lock:
        _context[key] = value


def clear_context_value(key: str) -> None:
    with _context_lock:
        _context.pop(key, None)


def _get_all_context() -> Dict[str, Any]:
    with _context_lock:
        return dict(_context)


class StructuredFormatter(logging.Formatter):
    """
    JSON structured formatter for file logging.

    Each record becomes one JSON object with timestamp, level, logger,
    message, the current context, extra fields from log_with_context and
    exception details when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = _get_all_context()
        if context:
            log_data["context"] = context

        extra_fields = getattr(record, 'extra_fields', None)
        if extra_fields:
            log_data["extra"] = extra_fields

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
            }

        if record.levelno <= logging.DEBUG:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """
    Human-readable formatter for console output.

    Format:
        YYYY-MM-DD HH:MM:SS | LEVEL    | logger | message [context] (code=...)
    """

    COLORS = {
        'DEBUG': '\033[2m',
        'INFO': '',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[1;31m',
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)
        logger_name = record.name.split('.')[-1]
        message = record.getMessage()

        context = _get_all_context()
        context_parts = [
            f"{key}={context[key]}" for key in CONSOLE_CONTEXT_KEYS if context.get(key)
        ]
        context_str = f" [{', '.join(context_parts)}]" if context_parts else ""

        extra_fields = getattr(record, 'extra_fields', None)
        extra_str = ""
        if extra_fields and 'error_code' in extra_fields:
            extra_str = f" (code={extra_fields['error_code']})"

        formatted = f"{timestamp} | {level} | {logger_name} | {message}{context_str}{extra_str}"

        color = self.COLORS.get(record.levelname) if self.use_colors else None
        if color:
            formatted = f"{color}{formatted}{self.RESET}"

        if record.exc_info:
            formatted = f"{formatted}\n{self.formatException(record.exc_info)}"

        return formatted


__all__ = [
    "StructuredFormatter",
    "ConsoleFormatter",
    "get_context_value",
    "set_context_value",
    "clear_context_value",
]
