"""
Value types shared by the parser, normalizer and aggregation engine.

Contains:
- RawTable: parsed, round-major numeric table
- Session: one normalized, player-major game session
- PlayerTotal: leaderboard row derived from many sessions
- ChartPoint: one snapshot of every player's running total
- SessionSummary: per-session standings for the session history
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .errors import MalformedInputError


@dataclass(frozen=True)
class RawTable:
    """
    Parsed CSV payload.

    Attributes:
        columns: Player names from the header line, in column order
        rows: One tuple of deltas per round, each as long as ``columns``
    """
    columns: Tuple[str, ...]
    rows: Tuple[Tuple[float, ...], ...]

    def __post_init__(self):
        object.__setattr__(self, 'columns', tuple(self.columns))
        object.__setattr__(self, 'rows', tuple(tuple(row) for row in self.rows))

    @property
    def round_count(self) -> int:
        return len(self.rows)

    def to_csv(self) -> str:
        """Serialize back to the comma-separated text the parser accepts."""
        lines = [','.join(self.columns)]
        lines.extend(','.join(repr(value) for value in row) for row in self.rows)
        return '\n'.join(lines) + '\n'


@dataclass(frozen=True)
class Session:
    """
    One recorded game session in player-major form.

    ``results`` maps each player to their balance change per round, in
    chronological order. Every player in a session must have the same
    number of rounds.
    Hashing uses name, players and label; ``results`` takes part in
    equality only.

    Attributes:
        name: Session identifier, normally the ``YYYY-MM-DD`` date
        players: Player names in header order
        results: Player name -> per-round balance deltas
        label: Display label (defaults to ``name``)
    """
    name: str
    players: Tuple[str, ...]
    results: Mapping[str, Tuple[float, ...]] = field(hash=False)
    label: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'players', tuple(self.players))
        object.__setattr__(
            self,
            'results',
            {player: tuple(deltas) for player, deltas in self.results.items()},
        )
        if self.label is None:
            object.__setattr__(self, 'label', self.name)

        lengths = {player: len(deltas) for player, deltas in self.results.items()}
        if len(set(lengths.values())) > 1:
            raise MalformedInputError(
                f"Session {self.name} has players with different round counts: {lengths}"
            )

    @property
    def date(self) -> str:
        """Sort key and chart date; the identifier itself."""
        return self.name

    @property
    def round_count(self) -> int:
        for deltas in self.results.values():
            return len(deltas)
        return 0

    def session_total(self, player: str) -> float:
        """Sum of a player's deltas in this session."""
        return sum(self.results[player])


@dataclass(frozen=True)
class PlayerTotal:
    """
    Leaderboard entry for one player across all sessions.

    Attributes:
        name: Player name
        total: Sum of every session total the player took part in
        sessions: Number of sessions the player appears in
        last_session: Greatest session identifier the player appears in
    """
    name: str
    total: float
    sessions: int
    last_session: str

    @property
    def average_per_session(self) -> float:
        if self.sessions == 0:
            return 0.0
        return self.total / self.sessions


@dataclass(frozen=True)
class ChartPoint:
    """
    Snapshot of every player's running total after one round.

    Round 0 is the synthetic start-of-history point where all balances
    are zero.
    ``balances`` is left out of the hash.
    """
    date: str
    session_name: str
    round: int
    balances: Dict[str, float] = field(default_factory=dict, hash=False)

    def to_dict(self) -> Dict[str, object]:
        """JSON-ready record; balances stay nested under ``balances``."""
        return {
            'date': self.date,
            'session_name': self.session_name,
            'round': self.round,
            'balances': dict(self.balances),
        }


@dataclass(frozen=True)
class SessionSummary:
    """Per-player totals of one session, best result first."""
    name: str
    date: str
    standings: Tuple[Tuple[str, float], ...]

    @property
    def top_player(self) -> Optional[Tuple[str, float]]:
        return self.standings[0] if self.standings else None

    @property
    def bottom_player(self) -> Optional[Tuple[str, float]]:
        return self.standings[-1] if self.standings else None


def player_order(sessions: Sequence[Session]) -> List[str]:
    """Distinct player names across sessions, in order of first appearance."""
    seen: Dict[str, None] = {}
    for session in sessions:
        for player in session.results:
            seen.setdefault(player, None)
    return list(seen)
