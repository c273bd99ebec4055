from enum import Enum, IntEnum
from typing import Optional


class DescribedIntEnum(IntEnum):
    """
    Integer enumeration with an optional human readable description per member

    Members are declared either as ``NAME = value`` or as
    ``NAME = value, "description"``. Members declared without a description
    resolve to their name wherever a description is needed.
    """

    def __new__(cls, value: int, description: Optional[str] = None):
        member = int.__new__(cls, value)
        member._value_ = value
        member.description = description
        return member


class CoordinateUnit(DescribedIntEnum):
    """Geographic axis a coordinate belongs to"""
    LATITUDE = 0
    LONGITUDE = 1


class Direction(DescribedIntEnum):
    """Compass direction of a coordinate, described by its single letter code"""
    NORTH = 0, "N"
    SOUTH = 1, "S"
    EAST = 2, "E"
    WEST = 3, "W"

    @property
    def axis(self) -> CoordinateUnit:
        """Axis this direction lies on"""
        if self in (Direction.EAST, Direction.WEST):
            return CoordinateUnit.LONGITUDE
        return CoordinateUnit.LATITUDE

    @property
    def sign(self) -> int:
        """Sign applied to a magnitude measured in this direction"""
        return -1 if self in (Direction.SOUTH, Direction.WEST) else 1

    @classmethod
    def for_coordinate(cls, coordinate: float, unit: CoordinateUnit) -> "Direction":
        """
        Infer the direction of a signed coordinate on the given axis

        Positive coordinates point north or east, everything else south or west.

        Args:
            coordinate: Signed decimal coordinate
            unit: Axis the coordinate belongs to

        Returns:
            Direction matching the sign of the coordinate
        """
        if coordinate > 0:
            return cls.NORTH if unit == CoordinateUnit.LATITUDE else cls.EAST
        return cls.SOUTH if unit == CoordinateUnit.LATITUDE else cls.WEST


class PropertyName(str, Enum):
    """Observable property names raised through change notifications"""
    # Geographic location
    DEGREES = "degrees"
    MINUTES = "minutes"
    SECONDS = "seconds"
    DIRECTION = "direction"
    COORDINATE = "coordinate"

    # IP address
    PART_A = "part_a"
    PART_B = "part_b"
    PART_C = "part_c"
    PART_D = "part_d"
    IP_FULL_STRING = "ip_full_string"


# Properties derived from the sexagesimal components of a location
COORDINATE_COMPONENTS = [
    PropertyName.DEGREES,
    PropertyName.MINUTES,
    PropertyName.SECONDS,
]

IP_ADDRESS_PARTS = [
    PropertyName.PART_A,
    PropertyName.PART_B,
    PropertyName.PART_C,
    PropertyName.PART_D,
]
