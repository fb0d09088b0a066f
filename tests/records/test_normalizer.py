"""
Tests for session normalization and the Session value type.
"""

# Standard library imports
import sys
from pathlib import Path

# Third-party imports
import pytest

# Local imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from leaderboard.records import (
    MalformedInputError,
    RawTable,
    Session,
    load_session,
    normalize,
    session_name_from_filename,
)
from leaderboard.records.models import ChartPoint, PlayerTotal, player_order


class TestNormalize:
    """Tests for normalize() and load_session()."""

    @pytest.mark.unit
    def test_transposes_rows_to_players(self):
        table = RawTable(columns=('Alice', 'Bob'), rows=((10.0, -10.0), (-5.0, 5.0)))
        session = normalize(table, '2025-01-01')

        assert session.name == '2025-01-01'
        assert session.players == ('Alice', 'Bob')
        assert session.results == {'Alice': (10.0, -5.0), 'Bob': (-10.0, 5.0)}
        assert session.round_count == 2

    @pytest.mark.unit
    def test_label_defaults_to_name(self):
        session = load_session("Alice,Bob\n1,-1\n", '2025-03-04')
        assert session.label == '2025-03-04'
        assert session.date == '2025-03-04'

    @pytest.mark.unit
    def test_load_session_propagates_parse_errors(self):
        with pytest.raises(MalformedInputError):
            load_session("Alice,Bob\n1\n", '2025-03-04')

    @pytest.mark.unit
    def test_duplicate_header_collapses_results(self):
        session = load_session("Alice,Alice\n1,-1\n", '2025-03-04')
        assert session.players == ('Alice', 'Alice')
        assert list(session.results) == ['Alice']


class TestSessionNameFromFilename:
    """Tests for session_name_from_filename()."""

    @pytest.mark.unit
    @pytest.mark.parametrize('filename,expected', [
        ('2025-08-13.csv', '2025-08-13'),
        ('data/sessions/2025-08-13.csv', '2025-08-13'),
        ('2025-08-13.CSV', '2025-08-13'),
        ('notes.txt', 'notes.txt'),
    ])
    def test_names(self, filename, expected):
        assert session_name_from_filename(filename) == expected


class TestSessionModel:
    """Tests for the Session and PlayerTotal value types."""

    @pytest.mark.unit
    def test_ragged_results_rejected(self):
        with pytest.raises(MalformedInputError, match='different round counts'):
            Session(name='2025-01-01', players=['A', 'B'], results={'A': [1, 2], 'B': [-1]})

    @pytest.mark.unit
    def test_zero_round_session(self):
        session = Session(name='2025-01-01', players=['A', 'B'], results={'A': [], 'B': []})
        assert session.round_count == 0
        assert session.session_total('A') == 0

    @pytest.mark.unit
    def test_results_are_frozen_tuples(self):
        deltas = [1, -1]
        session = Session(name='2025-01-01', players=['A'], results={'A': deltas})
        deltas.append(5)
        assert session.results['A'] == (1, -1)

    @pytest.mark.unit
    def test_session_total(self):
        session = Session(name='2025-01-01', players=['A', 'B'], results={'A': [10, -5], 'B': [-10, 5]})
        assert session.session_total('A') == 5
        assert session.session_total('B') == -5

    @pytest.mark.unit
    def test_average_per_session(self):
        assert PlayerTotal('Alice', 10.0, 4, '2025-01-04').average_per_session == 2.5
        assert PlayerTotal('Alice', 0.0, 0, '').average_per_session == 0.0

    @pytest.mark.unit
    def test_chart_point_to_dict(self):
        point = ChartPoint(date='2025-01-01', session_name='2025-01-01', round=2, balances={'A': 1.0})
        assert point.to_dict() == {
            'date': '2025-01-01', 'session_name': '2025-01-01', 'round': 2, 'balances': {'A': 1.0},
        }

    @pytest.mark.unit
    def test_chart_point_to_dict_player_named_like_a_field(self):
        point = ChartPoint(date='2025-01-01', session_name='2025-01-01', round=1, balances={'round': 10.0})
        record = point.to_dict()
        assert record['round'] == 1
        assert record['balances'] == {'round': 10.0}

    @pytest.mark.unit
    def test_session_and_point_are_hashable(self):
        session = Session(name='2025-01-01', players=['A', 'B'], results={'A': [1], 'B': [-1]})
        same = Session(name='2025-01-01', players=['A', 'B'], results={'A': [1], 'B': [-1]})
        point = ChartPoint(date='2025-01-01', session_name='2025-01-01', round=0, balances={'A': 0.0})

        assert hash(session) == hash(same)
        assert len({session, same}) == 1
        assert point in {point}

    @pytest.mark.unit
    def test_player_order_first_appearance(self, rotating_sessions):
        assert player_order(rotating_sessions) == ['Alice', 'Bob', 'Carol', 'Dave', 'Erin']
