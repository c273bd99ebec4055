"""Parameter validators for individual parameter types"""
from common_extensions.validation.parameter_validators.octet_validator import OctetValidator
from common_extensions.validation.parameter_validators.coordinate_validator import CoordinateValidator

__all__ = [
    "OctetValidator",
    "CoordinateValidator",
]
