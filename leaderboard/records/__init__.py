"""
Session record parsing and normalization.

Turns raw CSV text into typed tables and player-major sessions.
"""

from .errors import MalformedInputError
from .models import (
    RawTable,
    Session,
    PlayerTotal,
    ChartPoint,
    SessionSummary,
    player_order,
)
from .parser import parse_csv_content
from .normalizer import normalize, load_session, session_name_from_filename

__all__ = [
    # Errors
    'MalformedInputError',
    # Types
    'RawTable',
    'Session',
    'PlayerTotal',
    'ChartPoint',
    'SessionSummary',
    'player_order',
    # Parsing
    'parse_csv_content',
    'normalize',
    'load_session',
    'session_name_from_filename',
]
