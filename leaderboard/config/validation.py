"""
Settings validation.

Checks a loaded settings dictionary and reports every problem found
instead of stopping at the first one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..logging import ErrorCode, log_with_context
from ..windows import TIME_WINDOWS

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


def validate_settings(settings: Dict[str, Any]) -> List[str]:
    """
    Validate a settings dictionary.

    Args:
        settings: Settings as returned by load_settings()

    Returns:
        List of error messages; empty when the settings are valid
    """
    errors: List[str] = []

    data = settings.get('data', {})
    sources = data.get('sources', [])
    if not isinstance(sources, list):
        errors.append("data.sources must be a list of file names")
    elif any(not isinstance(source, str) or not source.strip() for source in sources):
        errors.append("data.sources entries must be non-empty strings")

    if not data.get('sessions_dir'):
        errors.append("data.sessions_dir is required")

    display = settings.get('display', {})
    window = display.get('default_window', 'all')
    if window not in TIME_WINDOWS:
        errors.append(
            f"display.default_window '{window}' is invalid. Must be one of: {list(TIME_WINDOWS)}"
        )

    palette = display.get('palette')
    if not isinstance(palette, list) or not palette:
        errors.append("display.palette must be a non-empty list of colours")

    level = str(settings.get('logging', {}).get('level', 'INFO')).upper()
    if level not in VALID_LOG_LEVELS:
        errors.append(f"logging.level '{level}' is invalid")

    tolerance = settings.get('validation', {}).get('zero_sum_tolerance', 0)
    if not isinstance(tolerance, (int, float)) or tolerance < 0:
        errors.append("validation.zero_sum_tolerance must be a non-negative number")

    for error in errors:
        log_with_context(logger, logging.WARNING, f"Invalid setting: {error}", error_code=ErrorCode.CONFIG_INVALID)

    return errors
