"""
Configuration loading and management for the poker leaderboard.

Public API:
    - load_settings: Load settings from config/settings.yaml (cached)
    - clear_config_cache: Clear the configuration cache
    - get_session_sources: Ordered list of session source files
    - get_sessions_dir: Directory holding session files
    - get_display_settings: Currency, date format, window and palette
    - get_zero_sum_tolerance: Tolerance for the zero-sum check
    - validate_settings: Validate a settings dictionary
"""

from __future__ import annotations

from .core import (
    DEFAULT_SETTINGS,
    DEFAULT_PALETTE,
    load_settings,
    clear_config_cache,
)

from .sources import (
    get_session_sources,
    get_sessions_dir,
    get_display_settings,
    get_zero_sum_tolerance,
)

from .validation import (
    validate_settings,
)


__all__ = [
    # Core
    'DEFAULT_SETTINGS',
    'DEFAULT_PALETTE',
    'load_settings',
    'clear_config_cache',
    # Sources
    'get_session_sources',
    'get_sessions_dir',
    'get_display_settings',
    'get_zero_sum_tolerance',
    # Validation
    'validate_settings',
]
