"""Validation enums for type-safe validation"""
from enum import Enum


class ValidationErrorType(Enum):
    """Types of validation errors"""
    MISSING_PARAMETER = "missing_parameter"
    INVALID_TYPE = "invalid_type"
    INVALID_RANGE = "invalid_range"
    INVALID_FORMAT = "invalid_format"
