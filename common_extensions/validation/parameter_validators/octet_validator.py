"""Validator for IPv4 octets (SRP: validates only single address parts)"""
from typing import Any, Dict, Optional

from common_extensions.core.constants import NETWORK_CONSTANTS
from common_extensions.validation.base import BaseValidator, ValidationResult, ValidationError
from common_extensions.validation.enums import ValidationErrorType


class OctetValidator(BaseValidator):
    """Validates that a value fits in a single unsigned byte"""

    def __init__(self, parameter_name: str, allow_none: bool = True):
        """
        Initialize octet validator.

        Args:
            parameter_name: Name of the parameter being validated
            allow_none: Whether a missing part is accepted (default: True)
        """
        self._parameter_name = parameter_name
        self._allow_none = allow_none

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate octet value.

        Args:
            value: Value to validate
            context: Optional context (unused for octets)

        Returns:
            ValidationResult with validation status
        """
        result = ValidationResult()

        if value is None:
            if not self._allow_none:
                result.add_error(ValidationError(
                    error_type=ValidationErrorType.MISSING_PARAMETER,
                    message=f"{self._parameter_name} is required",
                    parameter_name=self._parameter_name,
                    value=value
                ))
            return result

        # bool is an int subclass but never a meaningful octet
        if isinstance(value, bool) or not isinstance(value, int):
            result.add_error(ValidationError(
                error_type=ValidationErrorType.INVALID_TYPE,
                message=f"{self._parameter_name} must be an integer, got {type(value).__name__}",
                parameter_name=self._parameter_name,
                value=value
            ))
            return result

        if not (NETWORK_CONSTANTS.OCTET_MIN <= value <= NETWORK_CONSTANTS.OCTET_MAX):
            result.add_error(ValidationError(
                error_type=ValidationErrorType.INVALID_RANGE,
                message=(
                    f"{self._parameter_name} must be between {NETWORK_CONSTANTS.OCTET_MIN} "
                    f"and {NETWORK_CONSTANTS.OCTET_MAX}, got {value}"
                ),
                parameter_name=self._parameter_name,
                value=value
            ))

        return result
