"""
Tests for session validation.

Tests for:
- ValidationResult bookkeeping
- SessionValidator checks
- validate_sessions() collection checks
"""

# Standard library imports
import sys
from pathlib import Path

# Third-party imports
import pytest

# Local imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from leaderboard.config import DEFAULT_SETTINGS
from leaderboard.records import load_session
from leaderboard.validation import (
    SessionValidator,
    ValidationConfig,
    ValidationResult,
    ValidationSeverity,
    validate_sessions,
)


class TestValidationResult:
    """Tests for ValidationResult."""

    @pytest.mark.unit
    def test_error_check_fails_result(self):
        result = ValidationResult()
        result.add_check('zero_sum', False, 'unbalanced')

        assert not result
        assert result.errors == ['zero_sum: unbalanced']
        assert result.get_check('zero_sum').is_error

    @pytest.mark.unit
    def test_warning_check_keeps_result_passing(self):
        result = ValidationResult()
        result.add_check('has_rounds', False, 'empty', severity=ValidationSeverity.WARNING)

        assert result.passed
        assert result.warnings == ['has_rounds: empty']

    @pytest.mark.unit
    def test_merge(self):
        first = ValidationResult().add_check('a', True)
        second = ValidationResult().add_error('broken')

        first.merge(second)

        assert not first.passed
        assert first.errors == ['broken']
        assert len(first.checks) == 1

    @pytest.mark.unit
    def test_summary_and_dict(self):
        result = ValidationResult().add_check('a', True).add_check('b', False, 'bad')

        assert 'Validation FAILED: 1/2 checks passed' in result.summary()
        data = result.to_dict()
        assert data['passed'] is False
        assert [c['name'] for c in data['checks']] == ['a', 'b']
        assert data['checks'][1]['severity'] == 'error'


class TestValidationConfig:
    """Tests for ValidationConfig."""

    @pytest.mark.unit
    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValueError, match='non-negative'):
            ValidationConfig(zero_sum_tolerance=-1)

    @pytest.mark.unit
    def test_from_settings(self):
        settings = {**DEFAULT_SETTINGS, 'validation': {'zero_sum_tolerance': 0.5}}
        config = ValidationConfig.from_settings(settings, strict_mode=True)

        assert config.zero_sum_tolerance == 0.5
        assert config.strict_mode

    @pytest.mark.unit
    def test_strict(self):
        assert ValidationConfig.strict().strict_mode


class TestSessionValidator:
    """Tests for SessionValidator."""

    @pytest.mark.unit
    def test_balanced_session_passes(self, rotating_sessions):
        for session in rotating_sessions:
            result = SessionValidator().validate(session)
            assert result.passed, result.summary()
            assert result.metadata['session'] == session.name

    @pytest.mark.unit
    def test_unbalanced_rounds_reported(self):
        session = load_session("Alice,Bob\n10,-10\n5,-4\n1,-1\n3,0\n", '2025-01-01')

        result = SessionValidator().validate(session)
        check = result.get_check('zero_sum')

        assert not result.passed
        assert check.details['rounds'] == [2, 4]
        assert check.details['sums'] == [1.0, 3.0]

    @pytest.mark.unit
    def test_tolerance(self):
        session = load_session("Alice,Bob\n10.005,-10\n", '2025-01-01')

        assert SessionValidator(ValidationConfig(zero_sum_tolerance=0.01)).validate(session).passed
        assert not SessionValidator(ValidationConfig(zero_sum_tolerance=0.001)).validate(session).passed

    @pytest.mark.unit
    def test_zero_sum_check_disabled(self):
        session = load_session("Alice,Bob\n10,0\n", '2025-01-01')
        config = ValidationConfig(check_zero_sum=False)

        result = SessionValidator(config).validate(session)

        assert result.passed
        assert result.get_check('zero_sum') is None

    @pytest.mark.unit
    def test_duplicate_players(self):
        session = load_session("Alice,Alice,Bob\n1,1,-2\n", '2025-01-01')

        result = SessionValidator().validate(session)

        assert not result.passed
        assert result.get_check('unique_players').details['duplicates'] == ['Alice']

    @pytest.mark.unit
    def test_empty_session_is_warning(self, make_session):
        session = make_session('2025-01-01', {'A': [], 'B': []})

        result = SessionValidator().validate(session)

        assert result.passed
        assert len(result.warnings) == 1
        assert result.get_check('zero_sum').passed

    @pytest.mark.unit
    def test_empty_session_fails_in_strict_mode(self, make_session):
        session = make_session('2025-01-01', {'A': [], 'B': []})

        result = SessionValidator(ValidationConfig.strict()).validate(session)

        assert not result.passed
        assert result.get_check('has_rounds').severity == ValidationSeverity.ERROR


class TestValidateSessions:
    """Tests for validate_sessions()."""

    @pytest.mark.unit
    def test_sorted_collection_passes(self, rotating_sessions):
        result = validate_sessions(rotating_sessions)

        assert result.passed
        assert result.metadata['session_count'] == 3
        assert result.get_check('sorted_sessions').passed

    @pytest.mark.unit
    def test_unsorted_collection_fails(self, rotating_sessions):
        result = validate_sessions(list(reversed(rotating_sessions)))

        assert not result.passed
        assert not result.get_check('sorted_sessions').passed

    @pytest.mark.unit
    def test_duplicate_identifiers_warn(self, make_session):
        sessions = [
            make_session('2025-01-01', {'A': [1], 'B': [-1]}),
            make_session('2025-01-01', {'A': [2], 'B': [-2]}),
        ]
        result = validate_sessions(sessions)

        assert result.passed
        assert not result.get_check('unique_sessions').passed
        assert any('Duplicate session identifiers' in w for w in result.warnings)

    @pytest.mark.unit
    def test_empty_collection(self):
        result = validate_sessions([])
        assert result.passed
        assert result.metadata['session_count'] == 0
