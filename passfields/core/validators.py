"""
Field validators: one small class per semantic field kind.

Every validator implements the same capability, `validate(field, value)`,
which returns the accepted (possibly converted) value or raises a
`RecordValidationError` subclass. `value` is `MISSING` when the key was not
supplied at all; an explicit `None` is treated the same way.
"""

from __future__ import annotations

import abc
import math
from enum import Enum
from numbers import Real
from typing import Any, Optional

from passfields.core.errors import InvalidTypeError, MissingRequiredError, OutOfRangeError


class _Missing:
    """Marker for a key that is absent from the input mapping."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class ValueKind(str, Enum):
    STRING = "string"
    FLOAT = "float"


def _is_absent(value: Any) -> bool:
    return value is MISSING or value is None


def _is_number(value: Any) -> bool:
    # bool subclasses int but is never a meaningful coordinate or measurement
    return isinstance(value, Real) and not isinstance(value, bool)


def _to_float(field: str, value: Any) -> float:
    if not _is_number(value):
        raise InvalidTypeError(field, f"{field} must be a float")
    try:
        return float(value)
    except OverflowError:
        raise InvalidTypeError(field, f"{field} must be a float") from None


def _format_bound(bound: float) -> str:
    return f"{bound:g}"


class FieldValidator(abc.ABC):
    """
    Base class for field validators.

    Subclasses set `value_kind` and `required` and implement `validate`.
    """

    value_kind: ValueKind
    required: bool = False

    @abc.abstractmethod
    def validate(self, field: str, value: Any) -> Any:  # pragma: no cover - interface only
        """Return the accepted value (None when absent) or raise."""
        raise NotImplementedError

    def describe(self) -> str:
        """Short constraint summary used by the CLI listing."""
        return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class OptionalString(FieldValidator):
    """Any string, including the empty string, or nothing at all."""

    value_kind = ValueKind.STRING

    def validate(self, field: str, value: Any) -> Optional[str]:
        if _is_absent(value):
            return None
        if not isinstance(value, str):
            raise InvalidTypeError(field, f"{field} must be a string if provided")
        return value


class OptionalFloat(FieldValidator):
    """A real number if provided; integers are widened to float."""

    value_kind = ValueKind.FLOAT

    def validate(self, field: str, value: Any) -> Optional[float]:
        if _is_absent(value):
            return None
        return _to_float(field, value)


class RequiredFloat(FieldValidator):
    """A real number that must be present."""

    value_kind = ValueKind.FLOAT
    required = True

    def validate(self, field: str, value: Any) -> float:
        if _is_absent(value):
            raise MissingRequiredError(field, f"{field} is required")
        return _to_float(field, value)


class BoundedFloat(RequiredFloat):
    """
    A required real number within the inclusive range [low, high].

    NaN never satisfies the range check and is reported as out of range.
    """

    def __init__(self, low: float, high: float) -> None:
        if math.isnan(low) or math.isnan(high) or low > high:
            raise ValueError(f"Invalid bounds [{low}, {high}]")
        self.low = float(low)
        self.high = float(high)

    def validate(self, field: str, value: Any) -> float:
        number = super().validate(field, value)
        if not self.low <= number <= self.high:
            raise OutOfRangeError(
                field,
                f"{field} must be between {_format_bound(self.low)} and {_format_bound(self.high)}",
            )
        return number

    def describe(self) -> str:
        return f"[{_format_bound(self.low)}, {_format_bound(self.high)}]"

    def __repr__(self) -> str:
        return f"BoundedFloat(low={self.low!r}, high={self.high!r})"


__all__ = [
    "MISSING",
    "ValueKind",
    "FieldValidator",
    "OptionalString",
    "OptionalFloat",
    "RequiredFloat",
    "BoundedFloat",
]
