"""
Validation configuration.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

DEFAULT_ZERO_SUM_TOLERANCE: float = 0.01


@dataclass
class ValidationConfig:
    """
    Configuration container for session validation.

    Attributes:
        check_zero_sum: Whether every round must sum to zero
        zero_sum_tolerance: Absolute tolerance for the zero-sum check
        check_unique_players: Whether header names must be distinct
        check_rounds: Whether an empty session is reported
        check_order: Whether sessions must be sorted by identifier
        strict_mode: If True, warnings become errors
    """
    check_zero_sum: bool = True
    zero_sum_tolerance: float = DEFAULT_ZERO_SUM_TOLERANCE
    check_unique_players: bool = True
    check_rounds: bool = True
    check_order: bool = True
    strict_mode: bool = False

    def __post_init__(self):
        if self.zero_sum_tolerance < 0:
            raise ValueError(
                f"zero_sum_tolerance must be non-negative, got {self.zero_sum_tolerance}"
            )

    @classmethod
    def from_settings(cls, settings: Optional[Dict[str, Any]] = None, **overrides: Any) -> 'ValidationConfig':
        """Build a config from the ``validation`` section of settings."""
        from ..config import get_zero_sum_tolerance

        tolerance = get_zero_sum_tolerance(settings)
        params: Dict[str, Any] = {'zero_sum_tolerance': tolerance}
        params.update(overrides)
        return cls(**params)

    @classmethod
    def strict(cls, **overrides: Any) -> 'ValidationConfig':
        """Config treating warnings as errors."""
        return cls(strict_mode=True, **overrides)
