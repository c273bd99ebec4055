"""
Validation primitives shared by the octet and coordinate validators.

A validator never raises on bad input; it collects ValidationError
entries in a ValidationResult. Models decide what a failure means: the
IP address turns the first error into an InvalidArgumentError, the
geographic location only logs range errors and clamps.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from common_extensions.core.exceptions import InvalidArgumentError
from common_extensions.validation.enums import ValidationErrorType


class ValidationError(Exception):
    """One failed check on a single value"""

    def __init__(
        self,
        error_type: ValidationErrorType,
        message: str,
        parameter_name: Optional[str] = None,
        value: Any = None
    ):
        """
        Args:
            error_type: Category of the failure
            message: Text shown to callers and written to logs
            parameter_name: Property or argument the value was meant for
            value: The rejected value
        """
        self.error_type = error_type
        self.parameter_name = parameter_name
        self.value = value
        super().__init__(message)


class ValidationResult:
    """Outcome of one validate() call; valid until an error is added"""

    def __init__(self, errors: Optional[List[ValidationError]] = None):
        self._errors = list(errors or [])

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> List[ValidationError]:
        return self._errors

    def add_error(self, error: ValidationError) -> None:
        self._errors.append(error)

    def has_error(self, error_type: ValidationErrorType) -> bool:
        """Check whether any collected error is of the given type"""
        return any(error.error_type == error_type for error in self._errors)

    def raise_if_invalid(self) -> None:
        """
        Raise the first collected error as an InvalidArgumentError

        Raises:
            InvalidArgumentError: If any error was collected
        """
        if self.is_valid:
            return

        first = self._errors[0]
        raise InvalidArgumentError(first.parameter_name or "value", str(first), first.value)


class BaseValidator(ABC):
    """Checks one value against the rules of a single property"""

    @abstractmethod
    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate a value

        Args:
            value: Value to check
            context: Extra information some validators need (unused by the
                built-in ones)

        Returns:
            ValidationResult listing every failed check
        """
