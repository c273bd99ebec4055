from common_extensions.models.observable import PropertyChangedNotifier, PropertyChangedCallback
from common_extensions.models.schemas import GeoLocationSchema, IpAddressSchema
from common_extensions.models.geo_location import GeoLocation
from common_extensions.models.ip_address import IpAddress

__all__ = [
    "PropertyChangedNotifier",
    "PropertyChangedCallback",
    "GeoLocationSchema",
    "IpAddressSchema",
    "GeoLocation",
    "IpAddress",
]
