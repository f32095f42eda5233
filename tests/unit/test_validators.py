from __future__ import annotations

import math
from fractions import Fraction

import pytest

from passfields.core.errors import (
    FailureKind,
    InvalidTypeError,
    MissingRequiredError,
    OutOfRangeError,
)
from passfields.core.validators import (
    MISSING,
    BoundedFloat,
    OptionalFloat,
    OptionalString,
    RequiredFloat,
    ValueKind,
)

LAT_LOW = -90
LAT_HIGH = 90


def test_missing_sentinel_is_singleton_and_falsy() -> None:
    assert repr(MISSING) == "MISSING"
    assert not MISSING
    assert type(MISSING)() is MISSING


class TestOptionalString:
    def test_absent_and_none_yield_none(self) -> None:
        validator = OptionalString()
        assert validator.validate("seat_type", MISSING) is None
        assert validator.validate("seat_type", None) is None

    @pytest.mark.parametrize("value", ["Reserved seating", "", "  inner  "])
    def test_any_string_is_accepted_unchanged(self, value: str) -> None:
        assert OptionalString().validate("seat_type", value) == value

    @pytest.mark.parametrize("value", [123, 1.5, True, ["x"], {"a": 1}])
    def test_non_string_is_invalid_type(self, value: object) -> None:
        with pytest.raises(InvalidTypeError, match="^seat_type must be a string if provided$") as info:
            OptionalString().validate("seat_type", value)
        assert info.value.kind is FailureKind.INVALID_TYPE
        assert info.value.field == "seat_type"

    def test_metadata(self) -> None:
        assert OptionalString.value_kind is ValueKind.STRING
        assert OptionalString.required is False


class TestOptionalFloat:
    def test_absent_yields_none(self) -> None:
        assert OptionalFloat().validate("altitude", MISSING) is None

    def test_int_is_widened_to_float(self) -> None:
        value = OptionalFloat().validate("altitude", 100)
        assert value == 100.0
        assert isinstance(value, float)

    def test_other_real_numbers_are_accepted(self) -> None:
        assert OptionalFloat().validate("altitude", Fraction(1, 4)) == 0.25

    @pytest.mark.parametrize("value", ["100.5", True, False, [1.0]])
    def test_non_numeric_is_invalid_type(self, value: object) -> None:
        with pytest.raises(InvalidTypeError, match="^altitude must be a float$"):
            OptionalFloat().validate("altitude", value)

    def test_int_too_large_for_float_is_invalid_type(self) -> None:
        with pytest.raises(InvalidTypeError):
            OptionalFloat().validate("altitude", 10**400)


class TestRequiredFloat:
    def test_absent_is_missing_required(self) -> None:
        with pytest.raises(MissingRequiredError, match="^longitude is required$") as info:
            RequiredFloat().validate("longitude", MISSING)
        assert info.value.kind is FailureKind.MISSING_REQUIRED

    def test_none_is_missing_required(self) -> None:
        with pytest.raises(MissingRequiredError):
            RequiredFloat().validate("longitude", None)

    def test_string_is_invalid_type(self) -> None:
        with pytest.raises(InvalidTypeError, match="^latitude must be a float$"):
            RequiredFloat().validate("latitude", "invalid")

    def test_number_is_accepted(self) -> None:
        assert RequiredFloat().validate("latitude", -50.75) == -50.75
        assert RequiredFloat.required is True


class TestBoundedFloat:
    @pytest.mark.parametrize("value", [LAT_LOW, LAT_HIGH, -90.0, 90.0, 0, 37.7749])
    def test_inclusive_bounds_accept(self, value: float) -> None:
        assert BoundedFloat(LAT_LOW, LAT_HIGH).validate("latitude", value) == float(value)

    @pytest.mark.parametrize("value", [90.0001, -90.0001, 91.0, math.inf, -math.inf, math.nan])
    def test_outside_bounds_is_out_of_range(self, value: float) -> None:
        with pytest.raises(OutOfRangeError, match="^latitude must be between -90 and 90$") as info:
            BoundedFloat(LAT_LOW, LAT_HIGH).validate("latitude", value)
        assert info.value.kind is FailureKind.OUT_OF_RANGE

    def test_required_check_runs_before_range_check(self) -> None:
        validator = BoundedFloat(-180, 180)
        with pytest.raises(MissingRequiredError):
            validator.validate("longitude", MISSING)
        with pytest.raises(InvalidTypeError):
            validator.validate("longitude", "181")

    def test_fractional_bounds_in_message(self) -> None:
        with pytest.raises(OutOfRangeError, match=r"between 0\.5 and 1\.5"):
            BoundedFloat(0.5, 1.5).validate("ratio", 2)

    def test_describe(self) -> None:
        assert BoundedFloat(-180, 180).describe() == "[-180, 180]"
        assert RequiredFloat().describe() == ""

    @pytest.mark.parametrize(("low", "high"), [(1, 0), (math.nan, 1), (0, math.nan)])
    def test_invalid_bounds_are_rejected(self, low: float, high: float) -> None:
        with pytest.raises(ValueError, match="Invalid bounds"):
            BoundedFloat(low, high)


def test_validators_never_mutate_input() -> None:
    value = ["not", "a", "string"]
    with pytest.raises(InvalidTypeError):
        OptionalString().validate("seat_type", value)
    assert value == ["not", "a", "string"]
