"""
Library Constants

Centralized location for the magic numbers used by the coordinate and
enumeration helpers.
"""
from dataclasses import dataclass
from typing import Tuple

from common_extensions.core.enums import CoordinateUnit


@dataclass(frozen=True)
class GeoConstants:
    """
    Immutable constants for geographic coordinates (Immutable Object Pattern)

    Angles are in decimal degrees unless the name says otherwise.
    """

    LATITUDE_LIMIT: float = 90.0
    LONGITUDE_LIMIT: float = 180.0

    # Sexagesimal subdivisions
    MINUTES_PER_DEGREE: int = 60
    SECONDS_PER_MINUTE: int = 60
    SECONDS_PER_DEGREE: int = 3600

    # One arc-second, the precision kept by the component representation
    ARC_SECOND: float = 1 / 3600

    # Rendering
    DEGREES_DISPLAY_PRECISION: int = 2
    DEGREE_SYMBOL: str = "°"

    @classmethod
    def get_limit(cls, unit: CoordinateUnit) -> float:
        """
        Get the absolute coordinate limit for an axis

        Args:
            unit: Latitude or longitude

        Returns:
            90 for latitude, 180 for longitude
        """
        if unit == CoordinateUnit.LONGITUDE:
            return cls.LONGITUDE_LIMIT
        return cls.LATITUDE_LIMIT

    @classmethod
    def get_range(cls, unit: CoordinateUnit) -> Tuple[float, float]:
        """
        Get the (min, max) coordinate range for an axis

        Args:
            unit: Latitude or longitude

        Returns:
            (-limit, limit) tuple
        """
        limit = cls.get_limit(unit)
        return (-limit, limit)


@dataclass(frozen=True)
class EnumConstants:
    """Immutable constants for enumeration parsing"""

    # Separators accepted between tokens of a multi-value string
    LIST_SEPARATORS: str = ";,"


@dataclass(frozen=True)
class NetworkConstants:
    """Immutable constants for IPv4 address handling"""

    OCTET_MIN: int = 0
    OCTET_MAX: int = 255
    OCTET_COUNT: int = 4
    OCTET_WIDTH: int = 3
    OCTET_SEPARATOR: str = "."


# Singleton instances for easy access
GEO_CONSTANTS = GeoConstants()
ENUM_CONSTANTS = EnumConstants()
NETWORK_CONSTANTS = NetworkConstants()
