"""
Core types for session validation.

A ValidationResult is a list of ValidationChecks plus free-form messages.
Failed checks are filed under errors, warnings or info by severity; the
result passes while no error has been recorded.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ValidationSeverity(str, Enum):
    """How much a failed check matters."""
    ERROR = 'error'
    WARNING = 'warning'
    INFO = 'info'

    def __str__(self) -> str:
        return self.value


@dataclass
class ValidationCheck:
    """Outcome of one named check."""
    name: str
    passed: bool
    severity: ValidationSeverity = ValidationSeverity.ERROR
    message: str = ""
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return not self.passed and self.severity == ValidationSeverity.ERROR

    @property
    def is_warning(self) -> bool:
        return not self.passed and self.severity == ValidationSeverity.WARNING

    def describe(self) -> str:
        """``name: message`` as shown in error and warning lists."""
        return f"{self.name}: {self.message}" if self.message else self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'passed': self.passed,
            'severity': str(self.severity),
            'message': self.message,
            'details': self.details,
        }


@dataclass
class ValidationResult:
    """
    Checks run against one session or a whole collection.

    Example:
        >>> result = ValidationResult()
        >>> result.add_check('zero_sum', False, 'round 2 sums to 1.0')
        >>> result.passed
        False
        >>> result.errors
        ['zero_sum: round 2 sums to 1.0']
    """
    checks: List[ValidationCheck] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    info: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return not self.errors

    def _messages(self, severity: ValidationSeverity) -> List[str]:
        return {
            ValidationSeverity.ERROR: self.errors,
            ValidationSeverity.WARNING: self.warnings,
            ValidationSeverity.INFO: self.info,
        }[severity]

    def add_check(
        self,
        name: str,
        passed: bool,
        message: str = "",
        details: Optional[Dict[str, Any]] = None,
        severity: ValidationSeverity = ValidationSeverity.ERROR,
    ) -> 'ValidationResult':
        """Record a check; a failure is also filed under its severity."""
        check = ValidationCheck(name, passed, severity, message, details or {})
        self.checks.append(check)
        if not passed:
            self._messages(severity).append(check.describe())
        return self

    def add_warning(self, message: str) -> 'ValidationResult':
        self.warnings.append(message)
        return self

    def add_error(self, message: str) -> 'ValidationResult':
        """Record an error that is not tied to a check; the result fails."""
        self.errors.append(message)
        return self

    def add_metadata(self, key: str, value: Any) -> 'ValidationResult':
        self.metadata[key] = value
        return self

    def merge(self, other: 'ValidationResult') -> 'ValidationResult':
        """Fold another result into this one. Metadata keys from ``other`` win."""
        self.checks += other.checks
        self.errors += other.errors
        self.warnings += other.warnings
        self.info += other.info
        self.metadata.update(other.metadata)
        return self

    def get_check(self, name: str) -> Optional[ValidationCheck]:
        """First check recorded under ``name``, or None."""
        return next((check for check in self.checks if check.name == name), None)

    @property
    def failed_checks(self) -> List[ValidationCheck]:
        return [check for check in self.checks if not check.passed]

    def summary(self, max_errors: int = 5) -> str:
        """
        Printable report of the outcome.

        Args:
            max_errors: How many error and warning messages to list
        """
        passed_count = len(self.checks) - len(self.failed_checks)
        lines = [
            f"Validation {'PASSED' if self.passed else 'FAILED'}: "
            f"{passed_count}/{len(self.checks)} checks passed",
            f"  Errors: {len(self.errors)}",
            f"  Warnings: {len(self.warnings)}",
        ]
        for title, messages in (("Error details:", self.errors), ("Warning details:", self.warnings)):
            if messages:
                lines.append(f"  {title}")
                lines.extend(f"    - {message}" for message in messages[:max_errors])
                hidden = len(messages) - max_errors
                if hidden > 0:
                    lines.append(f"    ... and {hidden} more")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form, stamped with the time of the call."""
        return {
            'passed': self.passed,
            'checks': [check.to_dict() for check in self.checks],
            'errors': list(self.errors),
            'warnings': list(self.warnings),
            'info': list(self.info),
            'metadata': dict(self.metadata),
            'validated_at': datetime.now(timezone.utc).isoformat(),
        }

    def __bool__(self) -> bool:
        return self.passed

    def __repr__(self) -> str:
        return (
            f"ValidationResult({'PASSED' if self.passed else 'FAILED'}, "
            f"checks={len(self.checks)}, errors={len(self.errors)})"
        )
