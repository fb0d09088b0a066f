"""
Base validator abstract class.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .config import ValidationConfig
from .core import ValidationResult, ValidationSeverity

logger = logging.getLogger(__name__)


class BaseValidator(ABC):
    """
    Abstract base class for validators.

    Subclasses register check methods in ``_register_checks`` and run
    them from ``validate``. Each check receives the result and returns it.

    Attributes:
        config: ValidationConfig for this validator
    """

    def __init__(self, config: Optional[ValidationConfig] = None):
        self.config = config or ValidationConfig()
        self._check_registry: List[Callable[..., ValidationResult]] = []
        self._register_checks()

    @abstractmethod
    def _register_checks(self) -> None:
        """Register validation checks. Must be overridden in subclasses."""

    @abstractmethod
    def validate(self, *args, **kwargs) -> ValidationResult:
        """Perform validation. Must be overridden in subclasses."""

    def _create_result(self) -> ValidationResult:
        result = ValidationResult()
        result.add_metadata('validator', self.__class__.__name__)
        result.add_metadata('strict_mode', self.config.strict_mode)
        return result

    def _warning_severity(self) -> ValidationSeverity:
        """Severity used for soft problems; strict mode turns them into errors."""
        return ValidationSeverity.ERROR if self.config.strict_mode else ValidationSeverity.WARNING

    def _run_check(
        self,
        result: ValidationResult,
        check_func: Callable[..., ValidationResult],
        *args,
        **kwargs
    ) -> ValidationResult:
        """
        Run a single check with error handling.

        An exception inside a check is recorded as a warning instead of
        aborting the remaining checks.
        """
        try:
            return check_func(result, *args, **kwargs)
        except Exception as e:
            check_name = check_func.__name__.replace('_check_', '')
            result.add_warning(f"Check '{check_name}' failed with error: {e}")
            logger.warning(f"Validation check {check_name} raised exception: {e}", exc_info=True)
            return result
