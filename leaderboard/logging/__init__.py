"""
Centralized logging package for the poker leaderboard.

Structured logging with consistent formatting across all modules:
human-readable console output and JSON file output.

Usage:
    from leaderboard.logging import configure_logging, get_logger, LogContext

    configure_logging(level="INFO", console=True, file=False)

    logger = get_logger('data')
    with LogContext(phase="load", source="2025-08-13.csv"):
        logger.info("Loading session")
"""

from .config import (
    configure_logging,
    configure_from_settings,
    shutdown_logging,
    get_logger,
    LogLevel,
)

from .context import (
    LogContext,
    reset_context,
)

from .formatters import (
    StructuredFormatter,
    ConsoleFormatter,
    get_context_value,
    set_context_value,
    clear_context_value,
)

from .error_codes import (
    ErrorCode,
    ErrorCodeInfo,
)

from .utils import (
    log_with_context,
    log_exception,
    log_validation_result,
)


__all__ = [
    # Core configuration
    "configure_logging",
    "configure_from_settings",
    "shutdown_logging",
    "get_logger",
    "LogLevel",
    # Context management
    "LogContext",
    "reset_context",
    "get_context_value",
    "set_context_value",
    "clear_context_value",
    # Formatters
    "StructuredFormatter",
    "ConsoleFormatter",
    # Error codes
    "ErrorCode",
    "ErrorCodeInfo",
    # Logging utilities
    "log_with_context",
    "log_exception",
    "log_validation_result",
]
