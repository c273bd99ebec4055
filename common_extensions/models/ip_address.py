"""
IP Address Model

Mutable IPv4 address edited one octet at a time. Octets may be missing
while an address is being entered; the zero-padded display string and the
validity flags reflect whatever is currently set.
"""
import ipaddress
from typing import Any, Dict, Optional

from pydantic import ValidationError as SchemaValidationError

from common_extensions.core.constants import NETWORK_CONSTANTS
from common_extensions.core.enums import PropertyName
from common_extensions.core.exceptions import InvalidArgumentError
from common_extensions.models.observable import PropertyChangedNotifier
from common_extensions.models.schemas import IpAddressSchema
from common_extensions.validation import OctetValidator


class IpAddress(PropertyChangedNotifier):
    """IPv4 address made of four optional octets"""

    def __init__(
        self,
        part_a: Optional[int] = None,
        part_b: Optional[int] = None,
        part_c: Optional[int] = None,
        part_d: Optional[int] = None
    ):
        """
        Initialize address from its octets

        Args:
            part_a: First octet
            part_b: Second octet
            part_c: Third octet
            part_d: Fourth octet

        Raises:
            InvalidArgumentError: If any octet is outside [0, 255]
        """
        super().__init__()
        self._part_a: Optional[int] = None
        self._part_b: Optional[int] = None
        self._part_c: Optional[int] = None
        self._part_d: Optional[int] = None

        self.part_a = part_a
        self.part_b = part_b
        self.part_c = part_c
        self.part_d = part_d

    @classmethod
    def parse(cls, text: str) -> "IpAddress":
        """
        Parse a dotted-quad string

        Zero-padded octets such as "192.168.001.010" are accepted so the
        display string can be parsed back.

        Raises:
            InvalidArgumentError: If the text is not four dot-separated octets
        """
        if not isinstance(text, str):
            raise InvalidArgumentError("text", f"expected a string, got {type(text).__name__}", text)

        parts = text.strip().split(NETWORK_CONSTANTS.OCTET_SEPARATOR)
        if len(parts) != NETWORK_CONSTANTS.OCTET_COUNT:
            raise InvalidArgumentError("text", f"{text!r} is not a dotted-quad IPv4 address", text)

        octets = []
        for part in parts:
            if not part.isdecimal() or len(part) > NETWORK_CONSTANTS.OCTET_WIDTH:
                raise InvalidArgumentError("text", f"{part!r} is not a valid octet in {text!r}", text)
            octets.append(int(part))

        return cls(*octets)

    @property
    def part_a(self) -> Optional[int]:
        return self._part_a

    @part_a.setter
    def part_a(self, value: Optional[int]) -> None:
        self._part_a = self._validate_part(PropertyName.PART_A, value)
        self._on_property_changed(PropertyName.PART_A, PropertyName.IP_FULL_STRING)

    @property
    def part_b(self) -> Optional[int]:
        return self._part_b

    @part_b.setter
    def part_b(self, value: Optional[int]) -> None:
        self._part_b = self._validate_part(PropertyName.PART_B, value)
        self._on_property_changed(PropertyName.PART_B, PropertyName.IP_FULL_STRING)

    @property
    def part_c(self) -> Optional[int]:
        return self._part_c

    @part_c.setter
    def part_c(self, value: Optional[int]) -> None:
        self._part_c = self._validate_part(PropertyName.PART_C, value)
        self._on_property_changed(PropertyName.PART_C, PropertyName.IP_FULL_STRING)

    @property
    def part_d(self) -> Optional[int]:
        return self._part_d

    @part_d.setter
    def part_d(self, value: Optional[int]) -> None:
        self._part_d = self._validate_part(PropertyName.PART_D, value)
        self._on_property_changed(PropertyName.PART_D, PropertyName.IP_FULL_STRING)

    @property
    def ip_full_string(self) -> str:
        """Octets zero-padded to three digits; missing octets render empty"""
        return NETWORK_CONSTANTS.OCTET_SEPARATOR.join(
            self._complete_part(part)
            for part in (self._part_a, self._part_b, self._part_c, self._part_d)
        )

    # First octet excludes 0 and 255
    @property
    def part_a_is_valid(self) -> bool:
        return self._part_a is not None and 0 < self._part_a < NETWORK_CONSTANTS.OCTET_MAX

    @property
    def part_b_is_valid(self) -> bool:
        return self._part_b is not None

    @property
    def part_c_is_valid(self) -> bool:
        return self._part_c is not None

    @property
    def part_d_is_valid(self) -> bool:
        return self._part_d is not None

    @property
    def is_valid(self) -> bool:
        return self.part_a_is_valid and self.part_b_is_valid and self.part_c_is_valid and self.part_d_is_valid

    def to_system_ip_address(self) -> Optional[ipaddress.IPv4Address]:
        """
        Convert to the standard library address type

        Returns:
            IPv4Address, or None while any octet is missing
        """
        parts = (self._part_a, self._part_b, self._part_c, self._part_d)
        if any(part is None for part in parts):
            return None
        return ipaddress.IPv4Address(bytes(parts))

    def clone(self) -> "IpAddress":
        """Copy the octets into a new address without its subscribers"""
        return IpAddress(self._part_a, self._part_b, self._part_c, self._part_d)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format, one key per octet"""
        return IpAddressSchema(
            part_a=self._part_a,
            part_b=self._part_b,
            part_c=self._part_c,
            part_d=self._part_d,
        ).model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IpAddress":
        """
        Parse dictionary into IpAddress

        Raises:
            InvalidArgumentError: If the dictionary does not match the schema
        """
        try:
            schema = IpAddressSchema.model_validate(data)
        except SchemaValidationError as e:
            raise InvalidArgumentError("data", str(e), data) from e

        return cls(schema.part_a, schema.part_b, schema.part_c, schema.part_d)

    @staticmethod
    def _validate_part(property_name: PropertyName, value: Optional[int]) -> Optional[int]:
        OctetValidator(property_name.value).validate(value).raise_if_invalid()
        return value

    @staticmethod
    def _complete_part(part: Optional[int]) -> str:
        if part is None:
            return ""
        return str(part).zfill(NETWORK_CONSTANTS.OCTET_WIDTH)

    def __str__(self) -> str:
        return self.ip_full_string

    def __repr__(self) -> str:
        return f"IpAddress({self._part_a!r}, {self._part_b!r}, {self._part_c!r}, {self._part_d!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IpAddress):
            return NotImplemented
        return (
            (self._part_a, self._part_b, self._part_c, self._part_d)
            == (other._part_a, other._part_b, other._part_c, other._part_d)
        )

    __hash__ = None
