from common_extensions.components.enum_extensions import (
    get_description,
    to_int,
    name,
    get_count,
    is_enum_type,
)
from common_extensions.components.enum_codec import EnumCodec, EnumEntry, parse_to_enum

__all__ = [
    "get_description",
    "to_int",
    "name",
    "get_count",
    "is_enum_type",
    "EnumCodec",
    "EnumEntry",
    "parse_to_enum",
]
