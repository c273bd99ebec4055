"""
Custom exceptions for the common extensions library.

This module defines the exception classes raised when input to a parsing
or lookup operation is malformed. Lookups that accept a fallback value
never raise for a missing match.
"""

from typing import Any, Optional


class CommonExtensionsException(Exception):
    """Base exception class for all common extensions errors"""
    pass


class InvalidArgumentError(CommonExtensionsException, ValueError):
    """
    Exception raised when an argument cannot be parsed or is out of range.

    Subclasses ValueError so callers written against the builtin parsing
    functions keep working.
    """

    def __init__(self, argument_name: str, details: Optional[str] = None, value: Any = None):
        """
        Initialize InvalidArgumentError.

        Args:
            argument_name: Name of the offending argument
            details: Additional details about the failure
            value: The rejected value (optional)
        """
        self.argument_name = argument_name
        self.details = details
        self.value = value

        message = f"Invalid argument '{argument_name}'"
        if details:
            message += f": {details}"

        super().__init__(message)


class EnumTypeError(InvalidArgumentError):
    """Exception raised when a type passed as an enumeration is not an Enum"""

    def __init__(self, enum_type: Any):
        """
        Initialize EnumTypeError.

        Args:
            enum_type: The object that was expected to be an Enum class
        """
        self.enum_type = enum_type
        type_name = getattr(enum_type, "__name__", type(enum_type).__name__)
        super().__init__(
            "enum_type",
            f"{type_name} is not an enumeration type",
            enum_type
        )
