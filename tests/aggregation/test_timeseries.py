"""
Tests for the cumulative balance series.

Tests for:
- generate_chart_data() start point and ordering
- carry-forward of absent players
- consistency with calculate_player_totals()
"""

# Standard library imports
import random
import sys
from pathlib import Path

# Third-party imports
import pytest

# Local imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from leaderboard.aggregation import calculate_player_totals, generate_chart_data
from leaderboard.records import ChartPoint, Session


def _random_zero_sum_sessions(seed, count=5):
    """Sessions of integer deltas where every round sums to zero."""
    rng = random.Random(seed)
    pool = ['Alice', 'Bob', 'Carol', 'Dave', 'Erin', 'Frank']
    sessions = []
    for day in range(1, count + 1):
        players = rng.sample(pool, rng.randint(2, len(pool)))
        rounds = rng.randint(0, 6)
        results = {player: [] for player in players}
        for _ in range(rounds):
            deltas = [rng.randint(-50, 50) for _ in players[:-1]]
            deltas.append(-sum(deltas))
            for player, delta in zip(players, deltas):
                results[player].append(delta)
        sessions.append(Session(name=f'2025-03-{day:02d}', players=players, results=results))
    return sessions


class TestGenerateChartData:
    """Tests for generate_chart_data()."""

    @pytest.mark.unit
    def test_empty(self):
        assert generate_chart_data([]) == []

    @pytest.mark.unit
    def test_single_session(self, make_session):
        sessions = [make_session('2025-01-01', {'Alice': [10, -5], 'Bob': [-10, 5]})]

        assert generate_chart_data(sessions) == [
            ChartPoint('2025-01-01', '2025-01-01 - Start', 0, {'Alice': 0.0, 'Bob': 0.0}),
            ChartPoint('2025-01-01', '2025-01-01', 1, {'Alice': 10.0, 'Bob': -10.0}),
            ChartPoint('2025-01-01', '2025-01-01', 2, {'Alice': 5.0, 'Bob': -5.0}),
        ]

    @pytest.mark.unit
    def test_start_point_includes_every_player(self, rotating_sessions):
        start = generate_chart_data(rotating_sessions)[0]

        assert start.round == 0
        assert start.date == '2025-07-09'
        assert start.session_name == '2025-07-09 - Start'
        assert start.balances == {name: 0.0 for name in ['Alice', 'Bob', 'Carol', 'Dave', 'Erin']}

    @pytest.mark.unit
    def test_point_count_and_round_numbers(self, rotating_sessions):
        points = generate_chart_data(rotating_sessions)

        assert len(points) == 1 + 2 + 3 + 1
        assert [p.round for p in points] == [0, 1, 2, 1, 2, 3, 1]
        assert [p.session_name for p in points[1:]] == (
            ['2025-07-09'] * 2 + ['2025-07-16'] * 3 + ['2025-08-13']
        )

    @pytest.mark.unit
    def test_absent_players_carry_forward(self, rotating_sessions):
        points = generate_chart_data(rotating_sessions)

        # Carol sits out 2025-07-16 and keeps her 2025-07-09 balance
        carol_after_first = points[2].balances['Carol']
        for point in points[3:6]:
            assert point.balances['Carol'] == carol_after_first
        # Dave has not played yet during 2025-07-09
        assert points[1].balances['Dave'] == 0.0
        assert points[2].balances['Dave'] == 0.0

    @pytest.mark.unit
    def test_zero_round_session_adds_no_points(self, make_session):
        sessions = [
            make_session('2025-01-01', {'A': [1, -1], 'B': [-1, 1]}),
            make_session('2025-01-02', {'A': [], 'B': []}),
            make_session('2025-01-03', {'A': [2], 'B': [-2]}),
        ]
        points = generate_chart_data(sessions)

        assert len(points) == 4
        assert '2025-01-02' not in {p.date for p in points}

    @pytest.mark.unit
    def test_all_empty_sessions_yield_only_start(self, make_session):
        points = generate_chart_data([make_session('2025-01-02', {'A': [], 'B': []})])
        assert len(points) == 1
        assert points[0].balances == {'A': 0.0, 'B': 0.0}

    @pytest.mark.unit
    def test_custom_label(self):
        session = Session(name='2025-01-01', players=['A', 'B'], results={'A': [1], 'B': [-1]}, label='Friday game')
        points = generate_chart_data([session])
        assert points[0].session_name == 'Friday game - Start'
        assert points[1].session_name == 'Friday game'
        assert points[1].date == '2025-01-01'

    @pytest.mark.unit
    def test_points_do_not_share_balances(self, two_sessions):
        points = generate_chart_data(two_sessions)
        points[0].balances['Alice'] = 999.0
        assert points[1].balances['Alice'] == 10.0

    @pytest.mark.unit
    def test_deterministic(self, rotating_sessions):
        assert generate_chart_data(rotating_sessions) == generate_chart_data(rotating_sessions)


class TestChartTotalsConsistency:
    """The last chart point agrees with the leaderboard totals."""

    @pytest.mark.unit
    def test_last_point_matches_totals(self, rotating_sessions):
        last = generate_chart_data(rotating_sessions)[-1]
        for total in calculate_player_totals(rotating_sessions):
            assert last.balances[total.name] == pytest.approx(total.total)

    @pytest.mark.unit
    @pytest.mark.parametrize('seed', range(10))
    def test_random_zero_sum_sessions(self, seed):
        sessions = _random_zero_sum_sessions(seed)
        points = generate_chart_data(sessions)
        totals = calculate_player_totals(sessions)

        assert len(points) == 1 + sum(s.round_count for s in sessions)
        for point in points:
            assert sum(point.balances.values()) == 0
        for total in totals:
            assert points[-1].balances[total.name] == total.total
        assert sum(t.total for t in totals) == 0
