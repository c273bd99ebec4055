"""Unit tests for enum member helpers"""

import pytest
from enum import Enum, IntEnum

from common_extensions.components.enum_extensions import (
    get_description,
    to_int,
    name,
    get_count,
    is_enum_type,
)
from common_extensions.core.enums import DescribedIntEnum, Direction, CoordinateUnit
from common_extensions.core.exceptions import InvalidArgumentError, EnumTypeError


class DurationUnit(DescribedIntEnum):
    DAYS = 0
    WEEKS = 1
    MONTHS = 2


class Plain(IntEnum):
    A = 1
    B = 2


class Labelled(Enum):
    ON = "on"


class TestGetDescription:
    """Tests for get_description"""

    def test_member_without_description(self):
        """Test the name is returned without a tag"""
        assert get_description(DurationUnit.DAYS) == name(DurationUnit.DAYS)

    def test_member_with_description(self):
        """Test the tag is returned when present"""
        assert get_description(Direction.NORTH) == "N"
        assert get_description(Direction.NORTH) != name(Direction.NORTH)

    def test_plain_enum(self):
        """Test enums without description support resolve to names"""
        assert get_description(Plain.A) == "A"

    def test_none(self):
        """Test None yields an empty string"""
        assert get_description(None) == ""


class TestToInt:
    """Tests for to_int"""

    def test_described_member(self):
        """Test integer value of a described member"""
        assert to_int(Direction.WEST) == 3

    def test_int_enum(self):
        """Test integer value of a plain IntEnum member"""
        assert to_int(Plain.B) == 2

    def test_string_value_raises(self):
        """Test non-integer values are rejected"""
        with pytest.raises(InvalidArgumentError):
            to_int(Labelled.ON)


class TestName:
    """Tests for name"""

    def test_name(self):
        """Test the programmatic name is returned"""
        assert name(CoordinateUnit.LONGITUDE) == "LONGITUDE"


class TestGetCount:
    """Tests for get_count and is_enum_type"""

    def test_count(self):
        """Test the number of members"""
        assert get_count(DurationUnit) == 3
        assert get_count(Direction) == 4

    def test_count_rejects_non_enum(self):
        """Test a non-enum type is rejected"""
        with pytest.raises(EnumTypeError):
            get_count(str)

    def test_is_enum_type(self):
        """Test enum class detection"""
        assert is_enum_type(Direction) is True
        assert is_enum_type(Direction.NORTH) is False
        assert is_enum_type(dict) is False
