"""Per-member helpers for enumerations"""
from enum import Enum
from numbers import Integral
from typing import Optional, Type

from common_extensions.core.exceptions import EnumTypeError, InvalidArgumentError


def is_enum_type(enum_type) -> bool:
    """Check whether an object is an Enum class"""
    return isinstance(enum_type, type) and issubclass(enum_type, Enum)


def require_enum_type(enum_type) -> Type[Enum]:
    """
    Ensure an object is an Enum class.

    Raises:
        EnumTypeError: If it is not
    """
    if not is_enum_type(enum_type):
        raise EnumTypeError(enum_type)
    return enum_type


def has_description_tag(member: Enum) -> bool:
    """Check whether a member carries a non-empty description tag"""
    description = getattr(member, "description", None)
    return isinstance(description, str) and description != ""


def get_description(member: Optional[Enum]) -> str:
    """
    Get the description of an enum member.

    Args:
        member: The member to examine

    Returns:
        The description tag if present, otherwise the member name.
        An empty string for None.
    """
    if member is None:
        return ""

    if has_description_tag(member):
        return member.description

    return member.name


def to_int(member: Enum) -> int:
    """
    Get the integer value of an enum member.

    Raises:
        InvalidArgumentError: If the member's value is not integral
    """
    value = member.value
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentError(
            "member",
            f"{type(member).__name__}.{member.name} has non-integer value {value!r}",
            member
        )
    return int(value)


def name(member: Enum) -> str:
    """Shortcut to the programmatic name of an enum member"""
    return member.name


def get_count(enum_type: Type[Enum]) -> int:
    """Number of declared members, aliases excluded"""
    return len(require_enum_type(enum_type))
