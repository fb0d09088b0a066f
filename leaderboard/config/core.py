"""
Core configuration loading and cache management.

Settings live in config/settings.yaml. Missing keys fall back to
DEFAULT_SETTINGS so a partial file is enough.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..logging import ErrorCode, log_exception
from ..paths import get_config_dir
from ..utils import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_PALETTE = [
    "#3b82f6",  # Blue
    "#ef4444",  # Red
    "#10b981",  # Green
    "#f59e0b",  # Amber
    "#8b5cf6",  # Purple
    "#06b6d4",  # Cyan
    "#f97316",  # Orange
    "#84cc16",  # Lime
    "#ec4899",  # Pink
    "#6b7280",  # Gray
]

DEFAULT_SETTINGS: Dict[str, Any] = {
    'data': {
        'sessions_dir': 'data/sessions',
        'sources': [],
    },
    'display': {
        'currency_symbol': '€',
        'date_format': '%d.%m.%Y',
        'default_window': 'all',
        'palette': DEFAULT_PALETTE,
    },
    'logging': {
        'level': 'INFO',
        'file': False,
    },
    'validation': {
        'zero_sum_tolerance': 0.01,
    },
}

_config_cache: Dict[str, Any] = {}


def _get_config_path(filename: str) -> Path:
    """Get path to config file."""
    return get_config_dir() / filename


def _merge(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config/settings.yaml merged over the defaults.

    Args:
        path: Optional explicit settings file (bypasses the cache key of
            the default file)

    Returns:
        dict: Settings dictionary

    Raises:
        FileNotFoundError: If an explicit ``path`` doesn't exist
        yaml.YAMLError: If the settings file is not valid YAML
    """
    settings_path = path or _get_config_path('settings.yaml')
    cache_key = str(settings_path)
    if cache_key in _config_cache:
        logger.debug("Returning cached settings")
        return _config_cache[cache_key]

    if path is None and not settings_path.exists():
        logger.warning(f"Settings file not found at {settings_path}, using defaults")
        overrides: Dict[str, Any] = {}
    else:
        logger.debug(f"Loading settings from {settings_path}")
        try:
            overrides = load_yaml(settings_path)
        except (OSError, yaml.YAMLError) as e:
            log_exception(
                logger,
                f"Could not load settings from {settings_path}",
                exc=e,
                error_code=ErrorCode.CONFIG_LOAD_ERROR,
                include_traceback=False,
                path=str(settings_path),
            )
            raise

    settings = _merge(DEFAULT_SETTINGS, overrides)
    _config_cache[cache_key] = settings
    return settings


def clear_config_cache() -> None:
    """Clear the configuration cache. Useful for testing or reloading configs."""
    cache_size = len(_config_cache)
    _config_cache.clear()
    logger.debug(f"Cleared config cache ({cache_size} entries)")
