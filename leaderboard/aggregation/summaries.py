"""Per-session standings for the session history."""

from typing import List, Sequence

from ..records.models import Session, SessionSummary


def summarize_session(session: Session) -> SessionSummary:
    """Rank the players of one session by their session total."""
    standings = [
        (player, session.session_total(player))
        for player in session.results
    ]
    standings.sort(key=lambda item: item[1], reverse=True)
    return SessionSummary(name=session.label, date=session.date, standings=tuple(standings))


def summarize_sessions(sessions: Sequence[Session]) -> List[SessionSummary]:
    return [summarize_session(session) for session in sessions]
