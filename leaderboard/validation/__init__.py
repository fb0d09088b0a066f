"""
Session validation.

Checks loaded sessions for the properties the aggregation engine relies
on without enforcing: zero-sum rounds, distinct players, sorted input.
"""

from .core import ValidationSeverity, ValidationCheck, ValidationResult
from .config import ValidationConfig, DEFAULT_ZERO_SUM_TOLERANCE
from .base import BaseValidator
from .session_validator import SessionValidator, validate_sessions

__all__ = [
    'ValidationSeverity',
    'ValidationCheck',
    'ValidationResult',
    'ValidationConfig',
    'DEFAULT_ZERO_SUM_TOLERANCE',
    'BaseValidator',
    'SessionValidator',
    'validate_sessions',
]
