"""
Session normalization.

Reshapes a round-major RawTable into a player-major Session.
"""

from pathlib import PurePath

from .models import RawTable, Session
from .parser import parse_csv_content


def session_name_from_filename(filename: str) -> str:
    """
    Derive a session identifier from a source file name.

    Example:
        >>> session_name_from_filename('data/sessions/2025-08-13.csv')
        '2025-08-13'
    """
    name = PurePath(filename).name
    if name.lower().endswith('.csv'):
        name = name[:-len('.csv')]
    return name


def normalize(table: RawTable, session_id: str) -> Session:
    """
    Transpose a parsed table into a Session.

    The player at column ``i`` receives ``row[i]`` of every row, in row
    order.

    Args:
        table: Parsed table (rectangular by construction)
        session_id: Session identifier, usually a ``YYYY-MM-DD`` date

    Returns:
        Session for this table
    """
    results = {
        player: tuple(row[index] for row in table.rows)
        for index, player in enumerate(table.columns)
    }
    return Session(name=session_id, players=table.columns, results=results)


def load_session(content: str, session_id: str) -> Session:
    """Parse raw text and normalize it in one step."""
    return normalize(parse_csv_content(content), session_id)
