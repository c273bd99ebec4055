"""General-purpose enumeration helpers and small geographic/network value objects"""
from common_extensions.core import (
    DescribedIntEnum,
    CoordinateUnit,
    Direction,
    PropertyName,
    CommonExtensionsException,
    InvalidArgumentError,
    EnumTypeError,
)
from common_extensions.components import (
    EnumCodec,
    get_description,
    to_int,
    name,
    get_count,
    parse_to_enum,
)
from common_extensions.models import GeoLocation, IpAddress

__version__ = "1.0.0"

__all__ = [
    "DescribedIntEnum",
    "CoordinateUnit",
    "Direction",
    "PropertyName",
    "CommonExtensionsException",
    "InvalidArgumentError",
    "EnumTypeError",
    "EnumCodec",
    "get_description",
    "to_int",
    "name",
    "get_count",
    "parse_to_enum",
    "GeoLocation",
    "IpAddress",
]
