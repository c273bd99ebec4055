"""Validation module for value object parameters"""
from common_extensions.validation.base import BaseValidator, ValidationResult, ValidationError
from common_extensions.validation.enums import ValidationErrorType
from common_extensions.validation.parameter_validators import OctetValidator, CoordinateValidator

__all__ = [
    "BaseValidator",
    "ValidationResult",
    "ValidationError",
    "ValidationErrorType",
    "OctetValidator",
    "CoordinateValidator",
]
