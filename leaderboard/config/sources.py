"""
Accessors for data source and display settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from ..paths import resolve_project_path
from .core import load_settings


def get_session_sources(settings: Optional[Dict[str, Any]] = None) -> List[str]:
    """
    Ordered list of session source files from ``data.sources``.

    An empty list means "discover every CSV in the sessions directory".
    """
    settings = settings or load_settings()
    return list(settings['data'].get('sources') or [])


def get_sessions_dir(settings: Optional[Dict[str, Any]] = None) -> Path:
    """Directory holding session CSV files, resolved against the project root."""
    settings = settings or load_settings()
    return resolve_project_path(settings['data']['sessions_dir'])


def get_display_settings(settings: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    settings = settings or load_settings()
    return dict(settings['display'])


def get_zero_sum_tolerance(settings: Optional[Dict[str, Any]] = None) -> float:
    settings = settings or load_settings()
    return float(settings['validation']['zero_sum_tolerance'])
