"""
Centralized path resolution for the poker leaderboard.

Finds the project root through marker files, with caching, so scripts,
tests and library calls resolve config and data directories the same
way regardless of the working directory.
"""

import os
from functools import lru_cache
from pathlib import Path


class ProjectRootNotFoundError(Exception):
    """Raised when project root cannot be determined."""
    pass


# Project marker files in priority order
PROJECT_MARKERS = [
    'config/settings.yaml',
    'pyproject.toml',
    '.git',
]


@lru_cache(maxsize=1)
def get_project_root() -> Path:
    """
    Find the project root directory using marker-based discovery.

    Searches upward from this file's location for the markers in
    PROJECT_MARKERS. Set the PROJECT_ROOT environment variable to
    override detection.

    Raises:
        ProjectRootNotFoundError: If no project markers are found
    """
    env_root = os.environ.get('PROJECT_ROOT')
    if env_root:
        env_path = Path(env_root)
        if env_path.exists():
            return env_path.resolve()

    current = Path(__file__).resolve().parent
    searched_paths = []

    while current != current.parent:
        searched_paths.append(current)
        for marker in PROJECT_MARKERS:
            if (current / marker).exists():
                return current
        current = current.parent

    raise ProjectRootNotFoundError(
        f"Could not find project root. Searched for markers {PROJECT_MARKERS} "
        f"in directories: {searched_paths[:5]}... "
        f"Set PROJECT_ROOT environment variable to override."
    )


def get_config_dir() -> Path:
    """Get the config directory path."""
    return get_project_root() / 'config'


def get_logs_dir() -> Path:
    """Get the logs directory path."""
    return get_project_root() / 'logs'


def get_reports_dir() -> Path:
    """Get the reports directory path."""
    return get_project_root() / 'reports'


def resolve_project_path(path: str) -> Path:
    """Resolve a path from settings; relative paths are taken from the project root."""
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return get_project_root() / candidate


def clear_cache() -> None:
    """Clear the cached project root. Useful for testing."""
    get_project_root.cache_clear()
