"""Serialization models using Pydantic for type safety and validation"""
from typing import Optional

from pydantic import BaseModel, Field

from common_extensions.core.constants import GEO_CONSTANTS, NETWORK_CONSTANTS


class GeoLocationSchema(BaseModel):
    """
    Serialized form of a GeoLocation.

    The sexagesimal components and direction are authoritative; the
    coordinate is only used when all components are zero.
    """
    degrees: float = Field(default=0.0, ge=0, description="Whole or fractional degrees")
    minutes: float = Field(default=0.0, ge=0, description="Arc minutes")
    seconds: float = Field(default=0.0, ge=0, description="Arc seconds")
    direction: str = Field(default="N", pattern="^[NSEW]$", description="Compass letter N, S, E or W")
    coordinate: Optional[float] = Field(
        default=None,
        ge=-GEO_CONSTANTS.LONGITUDE_LIMIT,
        le=GEO_CONSTANTS.LONGITUDE_LIMIT,
        description="Signed decimal coordinate, null when unset"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "degrees": 45,
                "minutes": 30,
                "seconds": 0,
                "direction": "S",
                "coordinate": -45.5
            }
        }


class IpAddressSchema(BaseModel):
    """Serialized form of an IpAddress, one optional field per octet"""
    part_a: Optional[int] = Field(default=None, ge=NETWORK_CONSTANTS.OCTET_MIN, le=NETWORK_CONSTANTS.OCTET_MAX)
    part_b: Optional[int] = Field(default=None, ge=NETWORK_CONSTANTS.OCTET_MIN, le=NETWORK_CONSTANTS.OCTET_MAX)
    part_c: Optional[int] = Field(default=None, ge=NETWORK_CONSTANTS.OCTET_MIN, le=NETWORK_CONSTANTS.OCTET_MAX)
    part_d: Optional[int] = Field(default=None, ge=NETWORK_CONSTANTS.OCTET_MIN, le=NETWORK_CONSTANTS.OCTET_MAX)

    class Config:
        json_schema_extra = {
            "example": {
                "part_a": 192,
                "part_b": 168,
                "part_c": 1,
                "part_d": 10
            }
        }
