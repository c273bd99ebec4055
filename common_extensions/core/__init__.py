from common_extensions.core.enums import (
    DescribedIntEnum,
    CoordinateUnit,
    Direction,
    PropertyName,
    COORDINATE_COMPONENTS,
    IP_ADDRESS_PARTS,
)
from common_extensions.core.constants import (
    GeoConstants,
    EnumConstants,
    NetworkConstants,
    GEO_CONSTANTS,
    ENUM_CONSTANTS,
    NETWORK_CONSTANTS,
)
from common_extensions.core.exceptions import (
    CommonExtensionsException,
    InvalidArgumentError,
    EnumTypeError,
)

__all__ = [
    "DescribedIntEnum",
    "CoordinateUnit",
    "Direction",
    "PropertyName",
    "COORDINATE_COMPONENTS",
    "IP_ADDRESS_PARTS",
    "GeoConstants",
    "EnumConstants",
    "NetworkConstants",
    "GEO_CONSTANTS",
    "ENUM_CONSTANTS",
    "NETWORK_CONSTANTS",
    "CommonExtensionsException",
    "InvalidArgumentError",
    "EnumTypeError",
]
