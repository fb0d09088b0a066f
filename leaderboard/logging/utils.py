"""
Structured logging helpers.

Every helper builds a record carrying an ``extra_fields`` dict, which
StructuredFormatter writes under "extra" and ConsoleFormatter uses for
the error code suffix.
"""

import logging
import sys
import traceback
from typing import Any, Dict, Optional, Union

from .config import LogLevel, _get_logging_level
from .error_codes import ErrorCode

# Failed validation checks with a more specific code than VALIDATION_ERROR
CHECK_ERROR_CODES = {
    'zero_sum': ErrorCode.VALIDATION_ZERO_SUM,
}


def _emit(
    logger: logging.Logger,
    level: int,
    message: str,
    extra_fields: Dict[str, Any],
    error_code: Optional[ErrorCode] = None,
    exc_info: Any = None,
) -> None:
    if error_code is not None:
        extra_fields['error_code'] = error_code.code
        extra_fields['error_category'] = error_code.category

    record = logger.makeRecord(logger.name, level, '', 0, message, (), exc_info)
    record.extra_fields = extra_fields
    logger.handle(record)


def log_with_context(
    logger: logging.Logger,
    level: Union[int, LogLevel],
    message: str,
    error_code: Optional[ErrorCode] = None,
    **kwargs: Any,
) -> None:
    """
    Log a message with additional structured fields.

    Args:
        logger: Logger instance.
        level: Logging level (e.g., logging.INFO or "INFO").
        message: Log message.
        error_code: Optional error code for structured error tracking.
        **kwargs: Additional fields to include.
    """
    if isinstance(level, str):
        level = _get_logging_level(level)
    if logger.isEnabledFor(level):
        _emit(logger, level, message, dict(kwargs), error_code)


def log_exception(
    logger: logging.Logger,
    message: str,
    exc: Optional[BaseException] = None,
    error_code: Optional[ErrorCode] = None,
    include_traceback: bool = True,
    level: int = logging.ERROR,
    **kwargs: Any,
) -> None:
    """
    Log an exception with its type, message and (optionally) traceback.

    Usage:
        try:
            session = load_session(content, name)
        except MalformedInputError as e:
            log_exception(
                logger,
                f"Skipping {filename}",
                exc=e,
                error_code=ErrorCode.DATA_PARSE_ERROR,
                include_traceback=False,
                source=filename,
            )

    Args:
        logger: Logger instance.
        message: What was being attempted.
        exc: Exception instance (uses sys.exc_info() if None).
        error_code: Optional error code for structured error tracking.
        include_traceback: Attach the traceback to the record.
        level: Logging level for the record (default ERROR). Skipping a
            bad source is usually WARNING.
        **kwargs: Additional fields to include.
    """
    exc_info = sys.exc_info() if exc is None else (type(exc), exc, exc.__traceback__)
    exc = exc_info[1]

    extra_fields: Dict[str, Any] = dict(kwargs)
    if exc is not None:
        extra_fields['exception_type'] = type(exc).__name__
        extra_fields['exception_message'] = str(exc)
        if include_traceback and exc_info[2] is not None:
            extra_fields['traceback'] = ''.join(traceback.format_exception(*exc_info))

    _emit(logger, level, message, extra_fields, error_code, exc_info if include_traceback else None)


def log_validation_result(
    logger: logging.Logger,
    result: Any,
    include_details: bool = True,
) -> None:
    """
    Log a ValidationResult from leaderboard.validation.

    One summary record (INFO on a clean pass, WARNING when only warnings
    were raised, ERROR on failure), then one ERROR record per error
    message when ``include_details`` is set. Zero-sum failures carry
    ErrorCode.VALIDATION_ZERO_SUM.
    """
    errors, warnings = result.errors, result.warnings

    if not result.passed:
        level = logging.ERROR
        summary = f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)"
    elif warnings:
        level = logging.WARNING
        summary = f"Validation passed with {len(warnings)} warning(s)"
    else:
        level = logging.INFO
        summary = "Validation passed successfully"

    fields: Dict[str, Any] = {
        'is_valid': result.passed,
        'error_count': len(errors),
        'warning_count': len(warnings),
    }
    if include_details:
        fields.update({key: list(map(str, messages[:10]))
                       for key, messages in (('errors', errors), ('warnings', warnings)) if messages})
    log_with_context(logger, level, summary, **fields)

    if not include_details:
        return
    for message in errors[:5]:
        check_name = str(message).split(':', 1)[0]
        code = CHECK_ERROR_CODES.get(check_name, ErrorCode.VALIDATION_ERROR)
        log_with_context(logger, logging.ERROR, str(message), error_code=code)


__all__ = [
    "log_with_context",
    "log_exception",
    "log_validation_result",
]
