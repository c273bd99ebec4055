"""
Geographic Location Model

A single geographic axis value held in two synchronized representations:
a signed decimal coordinate, and degrees/minutes/seconds with a compass
direction. Whichever representation was assigned last is authoritative and
the other is recomputed from it.
"""
import logging
import math
import re
from numbers import Real
from typing import Any, Dict, Optional

import numpy as np
from pydantic import ValidationError as SchemaValidationError

from common_extensions.components.enum_codec import EnumCodec
from common_extensions.components.enum_extensions import get_description
from common_extensions.core.constants import GEO_CONSTANTS
from common_extensions.core.enums import COORDINATE_COMPONENTS, CoordinateUnit, Direction, PropertyName
from common_extensions.core.exceptions import InvalidArgumentError
from common_extensions.models.observable import PropertyChangedNotifier
from common_extensions.models.schemas import GeoLocationSchema
from common_extensions.validation import CoordinateValidator, ValidationErrorType

logger = logging.getLogger(__name__)

_DIRECTIONS = EnumCodec(Direction)

_COORDINATE_RE = re.compile(
    r"""^\s*
    (?P<prefix>[NSEW])?\s*
    (?P<sign>-)?(?P<degrees>\d+(?:\.\d+)?)\s*(?:°|deg)?\s*
    (?:
        (?P<minutes>\d+(?:\.\d+)?)\s*(?:'|′)?\s*
        (?:(?P<seconds>\d+(?:\.\d+)?)\s*(?:''|"|″)?\s*)?
    )?
    (?P<suffix>[NSEW])?\s*$""",
    re.IGNORECASE | re.VERBOSE
)


class GeoLocation(PropertyChangedNotifier):
    """
    Latitude or longitude value with sexagesimal and decimal views.

    Setting degrees, minutes, seconds or direction recomputes the
    coordinate. Setting the coordinate recomputes the components but
    leaves the direction alone, so the sign of an assigned coordinate only
    selects the direction when an axis hint is given at construction.

    The coordinate is clamped to [-90, 90] for north/south and
    [-180, 180] for east/west. When all components are zero the
    coordinate is None, meaning "unset".

    Example:
        >>> location = GeoLocation(-45.5, CoordinateUnit.LATITUDE)
        >>> str(location)
        "45° 30' 0'' S"
    """

    def __init__(self, coordinate: Optional[float] = None, coordinate_unit: Optional[CoordinateUnit] = None):
        """
        Initialize location from a signed decimal coordinate

        Args:
            coordinate: Signed decimal degrees, or None for an unset location
            coordinate_unit: Axis hint used to infer the direction from the
                coordinate's sign. Without it the direction stays NORTH.
        """
        super().__init__()
        self._degrees = 0.0
        self._minutes = 0.0
        self._seconds = 0.0
        self._direction = Direction.NORTH
        self._coordinate: Optional[float] = None

        if coordinate is not None and coordinate_unit is not None:
            self._direction = Direction.for_coordinate(self._coerce_coordinate(coordinate), coordinate_unit)

        self.coordinate = coordinate

    @classmethod
    def from_components(
        cls,
        degrees: float = 0.0,
        minutes: float = 0.0,
        seconds: float = 0.0,
        direction: Direction = Direction.NORTH
    ) -> "GeoLocation":
        """
        Create a location from its sexagesimal components

        Args:
            degrees: Degrees (negative values are clamped to 0)
            minutes: Arc minutes (negative values are clamped to 0)
            seconds: Arc seconds (negative values are clamped to 0)
            direction: Compass direction carrying the sign

        Returns:
            GeoLocation with the coordinate computed from the components
        """
        location = cls()
        location.direction = direction
        location.degrees = degrees
        location.minutes = minutes
        location.seconds = seconds
        return location

    @classmethod
    def parse(cls, text: str, coordinate_unit: Optional[CoordinateUnit] = None) -> "GeoLocation":
        """
        Parse decimal or degrees/minutes/seconds text

        Accepts forms such as "-45.5", "45 30 0 S", "45° 30' 0'' S",
        "45°30'S" and "N 45 30". A compass letter selects the direction;
        otherwise the leading minus sign and the axis hint do.

        Args:
            text: Text to parse
            coordinate_unit: Axis used when the text has no compass letter
                (default: latitude)

        Returns:
            Parsed GeoLocation

        Raises:
            InvalidArgumentError: If the text is empty, is not degrees with
                optional minutes, seconds and a single compass letter, or
                has a compass letter on both sides
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidArgumentError("text", "coordinate text is required", text)

        match = _COORDINATE_RE.match(text)
        if match is None or (match.group("prefix") and match.group("suffix")):
            raise InvalidArgumentError(
                "text",
                f"{text!r} is not degrees with optional minutes, seconds and compass letter",
                text
            )

        negative = match.group("sign") is not None
        degrees, minutes, seconds = (
            float(match.group(part) or 0) for part in ("degrees", "minutes", "seconds")
        )

        cardinal = match.group("prefix") or match.group("suffix")
        if cardinal:
            direction = _DIRECTIONS.from_description(cardinal.upper())
            if negative:
                direction = Direction.for_coordinate(-1, direction.axis)
        else:
            unit = coordinate_unit if coordinate_unit is not None else CoordinateUnit.LATITUDE
            direction = Direction.for_coordinate(-1 if negative else 1, unit)

        return cls.from_components(degrees, minutes, seconds, direction)

    # ------------------------------------------------------------------
    # Component representation
    # ------------------------------------------------------------------

    @property
    def degrees(self) -> float:
        return self._degrees

    @degrees.setter
    def degrees(self, value: float) -> None:
        self._degrees = self._coerce_component(PropertyName.DEGREES, value)
        self._on_property_changed(PropertyName.DEGREES)
        self._update_coordinate()

    @property
    def minutes(self) -> float:
        return self._minutes

    @minutes.setter
    def minutes(self, value: float) -> None:
        self._minutes = self._coerce_component(PropertyName.MINUTES, value)
        self._on_property_changed(PropertyName.MINUTES)
        self._update_coordinate()

    @property
    def seconds(self) -> float:
        return self._seconds

    @seconds.setter
    def seconds(self, value: float) -> None:
        self._seconds = self._coerce_component(PropertyName.SECONDS, value)
        self._on_property_changed(PropertyName.SECONDS)
        self._update_coordinate()

    @property
    def direction(self) -> Direction:
        return self._direction

    @direction.setter
    def direction(self, value: Direction) -> None:
        if not isinstance(value, Direction):
            raise InvalidArgumentError(
                PropertyName.DIRECTION.value,
                f"expected a Direction, got {type(value).__name__}",
                value
            )
        self._direction = value
        self._on_property_changed(PropertyName.DIRECTION)
        self._update_coordinate()

    @property
    def axis(self) -> CoordinateUnit:
        """Axis implied by the current direction"""
        return self._direction.axis

    # ------------------------------------------------------------------
    # Decimal representation
    # ------------------------------------------------------------------

    @property
    def coordinate(self) -> Optional[float]:
        """Signed decimal degrees, or None when unset"""
        return self._coordinate

    @coordinate.setter
    def coordinate(self, value: Optional[float]) -> None:
        if value is None:
            self._coordinate = None
        else:
            value = self._coerce_coordinate(value)
            result = CoordinateValidator(self.axis).validate(value)
            if result.has_error(ValidationErrorType.INVALID_RANGE):
                logger.warning(f"Clamping coordinate: {result.errors[0]}")
            self._coordinate = self._clamp(value)

        self.recompute_components_from_coordinate()
        # Zero components mean unset
        if self._degrees + self._minutes + self._seconds == 0:
            self._coordinate = None
        self._on_property_changed(PropertyName.COORDINATE)
        self._on_property_changed(*COORDINATE_COMPONENTS)

    def recompute_coordinate_from_components(self) -> None:
        """
        Derive the coordinate from degrees, minutes, seconds and direction

        The result is None when all components are zero, otherwise the
        signed decimal value clamped to the range of the direction's axis.
        """
        if self._degrees + self._minutes + self._seconds == 0:
            self._coordinate = None
            return

        magnitude = (
            self._degrees
            + self._minutes / GEO_CONSTANTS.MINUTES_PER_DEGREE
            + self._seconds / GEO_CONSTANTS.SECONDS_PER_DEGREE
        )
        coordinate = magnitude * self._direction.sign
        clamped = self._clamp(coordinate)
        if clamped != coordinate:
            logger.debug(f"Clamped {coordinate} to {clamped} for {self.axis.name.lower()}")
        self._coordinate = clamped

    def recompute_components_from_coordinate(self) -> None:
        """
        Decompose the coordinate into whole degrees, minutes and seconds

        The coordinate is rounded to the nearest arc-second. The sign is
        dropped; the direction is not touched.
        """
        if self._coordinate is None:
            self._degrees = 0.0
            self._minutes = 0.0
            self._seconds = 0.0
            return

        total_seconds = abs(round(self._coordinate * GEO_CONSTANTS.SECONDS_PER_DEGREE))
        degrees, remainder = divmod(total_seconds, GEO_CONSTANTS.SECONDS_PER_DEGREE)
        minutes, seconds = divmod(remainder, GEO_CONSTANTS.SECONDS_PER_MINUTE)

        self._degrees = float(degrees)
        self._minutes = float(minutes)
        self._seconds = float(seconds)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary format

        Returns:
            Dictionary with components, direction letter and coordinate
        """
        return GeoLocationSchema(
            degrees=self._degrees,
            minutes=self._minutes,
            seconds=self._seconds,
            direction=get_description(self._direction),
            coordinate=self._coordinate,
        ).model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeoLocation":
        """
        Parse dictionary into GeoLocation

        Args:
            data: Dictionary as produced by to_dict

        The components and direction are applied first. A stored coordinate
        that differs from the one they produce (for example a negative
        coordinate kept under a NORTH direction) is then assigned as is.

        Returns:
            GeoLocation instance

        Raises:
            InvalidArgumentError: If the dictionary does not match the schema
        """
        try:
            schema = GeoLocationSchema.model_validate(data)
        except SchemaValidationError as e:
            raise InvalidArgumentError("data", str(e), data) from e

        direction = _DIRECTIONS.from_description(schema.direction)
        location = cls.from_components(schema.degrees, schema.minutes, schema.seconds, direction)
        if schema.coordinate is not None and location.coordinate != schema.coordinate:
            location.coordinate = schema.coordinate
        return location

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _update_coordinate(self) -> None:
        self.recompute_coordinate_from_components()
        self._on_property_changed(PropertyName.COORDINATE)

    def _clamp(self, coordinate: float) -> float:
        min_value, max_value = GEO_CONSTANTS.get_range(self.axis)
        return float(np.clip(coordinate, min_value, max_value))

    @staticmethod
    def _coerce_number(property_name: PropertyName, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidArgumentError(
                property_name.value,
                f"must be a number, got {type(value).__name__}",
                value
            )
        number = float(value)
        if not math.isfinite(number):
            raise InvalidArgumentError(property_name.value, f"must be finite, got {number}", value)
        return number

    @classmethod
    def _coerce_component(cls, property_name: PropertyName, value: Any) -> float:
        return max(0.0, cls._coerce_number(property_name, value))

    @classmethod
    def _coerce_coordinate(cls, value: Any) -> float:
        return cls._coerce_number(PropertyName.COORDINATE, value)

    def __str__(self) -> str:
        degrees = round(self._degrees, GEO_CONSTANTS.DEGREES_DISPLAY_PRECISION)
        return (
            f"{degrees:g}{GEO_CONSTANTS.DEGREE_SYMBOL} {self._minutes:g}' "
            f"{self._seconds:g}'' {get_description(self._direction)}"
        )

    def __repr__(self) -> str:
        return f"GeoLocation(coordinate={self._coordinate!r}, direction={self._direction.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoLocation):
            return NotImplemented
        return (
            self._degrees == other._degrees
            and self._minutes == other._minutes
            and self._seconds == other._seconds
            and self._direction == other._direction
            and self._coordinate == other._coordinate
        )

    __hash__ = None
