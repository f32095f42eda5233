"""
Failure taxonomy for record construction and serialization.

Validators raise exactly one of the `RecordValidationError` subclasses; the
builder lets it propagate untouched so callers always see the first offending
field and nothing else.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional


class FailureKind(str, Enum):
    """Reason a field was rejected."""

    MISSING_REQUIRED = "missing_required"
    INVALID_TYPE = "invalid_type"
    OUT_OF_RANGE = "out_of_range"


class RecordValidationError(ValueError):
    """
    A single field failed its contract.

    Attributes
    ----------
    kind : FailureKind
        Classification of the failure.
    field : str
        Declaration-style name of the offending field.
    message : str
        Human-readable description; also the exception's string form.
    """

    kind: ClassVar[FailureKind]

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(field={self.field!r}, message={self.message!r})"


class MissingRequiredError(RecordValidationError):
    kind = FailureKind.MISSING_REQUIRED


class InvalidTypeError(RecordValidationError):
    kind = FailureKind.INVALID_TYPE


class OutOfRangeError(RecordValidationError):
    kind = FailureKind.OUT_OF_RANGE


class RecordSerializationError(ValueError):
    """Raised when a record holds a value that has no JSON representation."""

    def __init__(self, field: Optional[str], message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class UnknownRecordKindError(KeyError):
    """Raised when a record kind name or model is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


__all__ = [
    "FailureKind",
    "RecordValidationError",
    "MissingRequiredError",
    "InvalidTypeError",
    "OutOfRangeError",
    "RecordSerializationError",
    "UnknownRecordKindError",
]
