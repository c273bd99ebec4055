"""Validator for decimal coordinates (SRP: validates only coordinate values)"""
from numbers import Real
from typing import Any, Dict, Optional

from common_extensions.core.constants import GEO_CONSTANTS
from common_extensions.core.enums import CoordinateUnit
from common_extensions.validation.base import BaseValidator, ValidationResult, ValidationError
from common_extensions.validation.enums import ValidationErrorType


class CoordinateValidator(BaseValidator):
    """Validates signed decimal coordinates against the range of their axis"""

    def __init__(self, unit: CoordinateUnit, parameter_name: str = "coordinate"):
        """
        Initialize coordinate validator.

        Args:
            unit: Axis that determines the valid range
            parameter_name: Name of the parameter being validated
        """
        self._unit = unit
        self._parameter_name = parameter_name
        self._min_value, self._max_value = GEO_CONSTANTS.get_range(unit)

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate coordinate value.

        A missing coordinate is valid and means "unset".

        Args:
            value: Value to validate
            context: Optional context (unused for coordinates)

        Returns:
            ValidationResult with validation status
        """
        result = ValidationResult()

        if value is None:
            return result

        if isinstance(value, bool) or not isinstance(value, Real):
            result.add_error(ValidationError(
                error_type=ValidationErrorType.INVALID_TYPE,
                message=f"{self._parameter_name} must be a number, got {type(value).__name__}",
                parameter_name=self._parameter_name,
                value=value
            ))
            return result

        if not (self._min_value <= value <= self._max_value):
            result.add_error(ValidationError(
                error_type=ValidationErrorType.INVALID_RANGE,
                message=(
                    f"{self._parameter_name} must be between {self._min_value} and "
                    f"{self._max_value} degrees for {self._unit.name.lower()}, got {value}"
                ),
                parameter_name=self._parameter_name,
                value=value
            ))

        return result
