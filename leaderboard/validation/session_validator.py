"""
Session validator.

Checks the properties the aggregation engine assumes but does not
enforce: every round is zero-sum, player names are distinct, and the
session collection is sorted by identifier.
"""

import logging
from collections import Counter
from typing import Optional, Sequence

import numpy as np

from ..records.models import Session
from .base import BaseValidator
from .config import ValidationConfig
from .core import ValidationResult, ValidationSeverity

logger = logging.getLogger(__name__)


class SessionValidator(BaseValidator):
    """
    Validates a single normalized session.

    Usage:
        >>> validator = SessionValidator(ValidationConfig(zero_sum_tolerance=0.01))
        >>> result = validator.validate(session)
        >>> if not result:
        ...     print(result.summary())
    """

    def _register_checks(self) -> None:
        self._check_registry = []
        if self.config.check_rounds:
            self._check_registry.append(self._check_has_rounds)
        if self.config.check_unique_players:
            self._check_registry.append(self._check_unique_players)
        if self.config.check_zero_sum:
            self._check_registry.append(self._check_zero_sum)

    def validate(self, session: Session) -> ValidationResult:
        result = self._create_result()
        result.add_metadata('session', session.name)

        for check in self._check_registry:
            result = self._run_check(result, check, session)

        logger.debug(f"Validated session {session.name}: {result!r}")
        return result

    def _check_has_rounds(self, result: ValidationResult, session: Session) -> ValidationResult:
        passed = session.round_count > 0
        return result.add_check(
            'has_rounds',
            passed,
            "" if passed else f"Session {session.name} has no rounds",
            details={'rounds': session.round_count},
            severity=self._warning_severity(),
        )

    def _check_unique_players(self, result: ValidationResult, session: Session) -> ValidationResult:
        duplicates = sorted(name for name, count in Counter(session.players).items() if count > 1)
        return result.add_check(
            'unique_players',
            not duplicates,
            f"Session {session.name} lists players more than once: {duplicates}" if duplicates else "",
            details={'duplicates': duplicates},
        )

    def _check_zero_sum(self, result: ValidationResult, session: Session) -> ValidationResult:
        if session.round_count == 0 or not session.results:
            return result.add_check('zero_sum', True, "No rounds to check")

        # rows = rounds, columns = players
        matrix = np.array(list(session.results.values()), dtype=float).T
        round_sums = matrix.sum(axis=1)
        unbalanced = np.flatnonzero(
            ~np.isclose(round_sums, 0.0, rtol=0.0, atol=self.config.zero_sum_tolerance)
        )

        if len(unbalanced) == 0:
            return result.add_check('zero_sum', True, "All rounds sum to zero")

        rounds = [int(i) + 1 for i in unbalanced]
        return result.add_check(
            'zero_sum',
            False,
            f"Session {session.name} has {len(rounds)} round(s) not summing to zero: {rounds[:10]}",
            details={
                'rounds': rounds,
                'sums': [float(round_sums[i]) for i in unbalanced],
            },
            severity=ValidationSeverity.ERROR,
        )


def validate_sessions(
    sessions: Sequence[Session],
    config: Optional[ValidationConfig] = None,
) -> ValidationResult:
    """
    Validate every session and the order of the collection.

    Args:
        sessions: Sessions as handed to the aggregation engine
        config: Validation configuration (defaults if None)

    Returns:
        Merged ValidationResult
    """
    validator = SessionValidator(config)
    result = validator._create_result()
    result.add_metadata('session_count', len(sessions))

    if validator.config.check_order:
        names = [session.name for session in sessions]
        in_order = all(a <= b for a, b in zip(names, names[1:]))
        result.add_check(
            'sorted_sessions',
            in_order,
            "" if in_order else "Sessions are not sorted ascending by identifier",
        )

        duplicates = sorted(name for name, count in Counter(names).items() if count > 1)
        result.add_check(
            'unique_sessions',
            not duplicates,
            f"Duplicate session identifiers: {duplicates}" if duplicates else "",
            severity=validator._warning_severity(),
        )

    for session in sessions:
        result.merge(validator.validate(session))

    return result
