"""
Core logging configuration.

Installs console and file handlers on the ``leaderboard`` logger
namespace.
"""

import atexit
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from .formatters import (
    StructuredFormatter,
    ConsoleFormatter,
    set_context_value,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ROOT_LOGGER_NAME = 'leaderboard'

_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Handlers installed by configure_logging, closed on shutdown
_active_handlers: List[logging.Handler] = []
_shutdown_registered = False


def _validate_log_level(level: str) -> str:
    """
    Validate and normalize a log level string.

    Raises:
        ValueError: If level is not a valid log level.
    """
    normalized = level.upper()
    if normalized not in _VALID_LOG_LEVELS:
        valid_levels = ", ".join(sorted(_VALID_LOG_LEVELS))
        raise ValueError(
            f"Invalid log level '{level}'. Must be one of: {valid_levels}"
        )
    return normalized


def _get_logging_level(level: LogLevel) -> int:
    """Convert a log level string to its logging constant."""
    return getattr(logging, _validate_log_level(level))


def shutdown_logging() -> None:
    """Flush and close every handler installed by configure_logging."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in _active_handlers[:]:
        handler.flush()
        handler.close()
        root_logger.removeHandler(handler)

    _active_handlers.clear()


def _register_shutdown() -> None:
    global _shutdown_registered
    if not _shutdown_registered:
        atexit.register(shutdown_logging)
        _shutdown_registered = True


def configure_logging(
    level: LogLevel = "INFO",
    log_dir: Optional[Path] = None,
    console: bool = True,
    file: bool = True,
    structured: bool = True,
    run_id: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_dir: Directory for log files (default: PROJECT_ROOT/logs).
        console: Enable console output.
        file: Enable rotating file output.
        structured: Use JSON lines for the file handler.
        run_id: Optional run identifier added to the logging context.

    Returns:
        The ``leaderboard`` namespace logger.

    Raises:
        ValueError: If level is not a valid log level.
    """
    log_level_int = _get_logging_level(level)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(log_level_int)

    shutdown_logging()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level_int)
        console_handler.setFormatter(ConsoleFormatter())
        root_logger.addHandler(console_handler)
        _active_handlers.append(console_handler)

    if file:
        if log_dir is None:
            from ..paths import get_logs_dir
            log_dir = get_logs_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f"leaderboard_{datetime.now(timezone.utc).strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setFormatter(StructuredFormatter() if structured else ConsoleFormatter(use_colors=False))
        file_handler.setLevel(log_level_int)
        root_logger.addHandler(file_handler)
        _active_handlers.append(file_handler)

    _register_shutdown()

    if run_id:
        set_context_value('run_id', run_id)

    return root_logger


def configure_from_settings(
    settings: Dict[str, Any],
    level: Optional[str] = None,
    console: bool = True,
) -> logging.Logger:
    """
    Configure logging from the ``logging`` section of settings.yaml.

    Args:
        settings: Settings as returned by load_settings()
        level: Overrides ``logging.level`` when given
        console: Enable console output
    """
    from ..paths import resolve_project_path

    section = settings.get("logging", {})
    log_dir = section.get("dir")
    return configure_logging(
        level=(level or section.get("level", "INFO")).upper(),
        log_dir=resolve_project_path(log_dir) if log_dir else None,
        console=console,
        file=bool(section.get("file", False)),
        structured=bool(section.get("structured", True)),
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``leaderboard`` namespace.

    Args:
        name: Logger name (e.g., 'data', 'report').
    """
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')


__all__ = [
    "configure_logging",
    "configure_from_settings",
    "shutdown_logging",
    "get_logger",
    "LogLevel",
]
