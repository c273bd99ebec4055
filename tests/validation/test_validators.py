"""Unit tests for parameter validators"""

import pytest

from common_extensions.core.enums import CoordinateUnit
from common_extensions.core.exceptions import InvalidArgumentError
from common_extensions.validation import (
    CoordinateValidator,
    OctetValidator,
    ValidationError,
    ValidationErrorType,
    ValidationResult,
)


class TestValidationResult:
    """Tests for ValidationResult"""

    def test_valid_by_default(self):
        """Test a new result is valid and has no errors"""
        result = ValidationResult()
        assert result.is_valid is True
        assert result.errors == []
        result.raise_if_invalid()

    def test_add_error_invalidates(self):
        """Test adding an error marks the result invalid"""
        result = ValidationResult()
        result.add_error(ValidationError(ValidationErrorType.INVALID_RANGE, "too big", "part_a"))
        assert result.is_valid is False
        assert result.has_error(ValidationErrorType.INVALID_RANGE)
        assert not result.has_error(ValidationErrorType.INVALID_TYPE)

    def test_raise_if_invalid(self):
        """Test the first error becomes an InvalidArgumentError"""
        result = ValidationResult()
        result.add_error(ValidationError(ValidationErrorType.INVALID_TYPE, "not a number", "degrees"))
        with pytest.raises(InvalidArgumentError) as exc_info:
            result.raise_if_invalid()
        assert exc_info.value.argument_name == "degrees"
        assert "not a number" in str(exc_info.value)

    def test_raise_if_invalid_carries_value(self):
        """Test the rejected value reaches the raised error"""
        result = OctetValidator("part_b").validate(300)
        with pytest.raises(InvalidArgumentError) as exc_info:
            result.raise_if_invalid()
        assert exc_info.value.argument_name == "part_b"
        assert exc_info.value.value == 300


class TestOctetValidator:
    """Tests for OctetValidator"""

    @pytest.mark.parametrize("value", [0, 1, 128, 255, None])
    def test_valid_values(self, value):
        """Test byte values and missing parts pass"""
        assert OctetValidator("part_a").validate(value).is_valid

    @pytest.mark.parametrize("value", [-1, 256])
    def test_out_of_range(self, value):
        """Test values outside a byte fail with a range error"""
        result = OctetValidator("part_a").validate(value)
        assert result.has_error(ValidationErrorType.INVALID_RANGE)

    @pytest.mark.parametrize("value", ["1", 1.5, True])
    def test_wrong_type(self, value):
        """Test non-integer values fail with a type error"""
        result = OctetValidator("part_a").validate(value)
        assert result.has_error(ValidationErrorType.INVALID_TYPE)

    def test_missing_when_required(self):
        """Test None fails when parts are required"""
        result = OctetValidator("part_a", allow_none=False).validate(None)
        assert result.has_error(ValidationErrorType.MISSING_PARAMETER)


class TestCoordinateValidator:
    """Tests for CoordinateValidator"""

    def test_latitude_range(self):
        """Test latitude accepts up to 90 degrees"""
        validator = CoordinateValidator(CoordinateUnit.LATITUDE)
        assert validator.validate(90).is_valid
        assert validator.validate(-90.0).is_valid
        assert validator.validate(90.5).has_error(ValidationErrorType.INVALID_RANGE)

    def test_longitude_range(self):
        """Test longitude accepts up to 180 degrees"""
        validator = CoordinateValidator(CoordinateUnit.LONGITUDE)
        assert validator.validate(179.9).is_valid
        assert validator.validate(-181).has_error(ValidationErrorType.INVALID_RANGE)

    def test_none_is_unset(self):
        """Test a missing coordinate is valid"""
        assert CoordinateValidator(CoordinateUnit.LATITUDE).validate(None).is_valid

    def test_wrong_type(self):
        """Test a string fails with a type error"""
        result = CoordinateValidator(CoordinateUnit.LATITUDE).validate("12")
        assert result.has_error(ValidationErrorType.INVALID_TYPE)
        assert result.errors[0].parameter_name == "coordinate"
