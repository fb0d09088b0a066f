"""
Pytest configuration and fixtures for the poker leaderboard tests.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from leaderboard.config import clear_config_cache
from leaderboard.logging import reset_context, shutdown_logging
from leaderboard.records import Session


@pytest.fixture
def project_root_path():
    """Return the project root path."""
    return project_root


@pytest.fixture(autouse=True)
def isolate_state():
    """Reset cached settings, logging context and handlers around each test."""
    clear_config_cache()
    reset_context()
    yield
    shutdown_logging()
    reset_context()
    clear_config_cache()


@pytest.fixture
def make_session():
    """Factory building a Session from a name and a player -> deltas mapping."""
    def _make(name, results, players=None):
        return Session(
            name=name,
            players=players if players is not None else list(results),
            results=results,
        )
    return _make


@pytest.fixture
def two_sessions(make_session):
    """Alice and Bob over two days, Alice ahead by 10."""
    return [
        make_session('2025-01-01', {'Alice': [10, -5], 'Bob': [-10, 5]}),
        make_session('2025-01-02', {'Alice': [5], 'Bob': [-5]}),
    ]


@pytest.fixture
def rotating_sessions(make_session):
    """Three sessions where the table changes every time."""
    return [
        make_session('2025-07-09', {'Alice': [10, -20], 'Bob': [-5, 15], 'Carol': [-5, 5]}),
        make_session('2025-07-16', {'Alice': [-10, 5, -3], 'Bob': [20, -10, -3], 'Dave': [-10, 5, 6]}),
        make_session('2025-08-13', {'Bob': [12], 'Carol': [-4], 'Dave': [-4], 'Erin': [-4]}),
    ]


@pytest.fixture
def session_csv_texts():
    """Raw CSV text for three session files, one of them out of date order."""
    return {
        '2025-01-02.csv': "Alice,Bob\n5,-5\n",
        '2025-01-01.csv': "Alice,Bob,Carol\n10,-4,-6\n\n-5,5,0\n",
        '2025-01-03.csv': "Bob,Carol\n-2.5,2.5\n",
    }


@pytest.fixture
def sessions_dir(tmp_path, session_csv_texts):
    """Temporary directory holding the sample session files."""
    directory = tmp_path / 'sessions'
    directory.mkdir()
    for filename, text in session_csv_texts.items():
        (directory / filename).write_text(text, encoding='utf-8')
    return directory
