"""
Core package for passfields.

Re-exports the validation, construction and serialization pipeline so
downstream code can import from `passfields.core` directly.
"""

from passfields.core.builder import build, build_by_name
from passfields.core.errors import (
    FailureKind,
    InvalidTypeError,
    MissingRequiredError,
    OutOfRangeError,
    RecordSerializationError,
    RecordValidationError,
    UnknownRecordKindError,
)
from passfields.core.fields import FieldSpec, RecordKind
from passfields.core.keys import camelize_key
from passfields.core.normalizer import trim_string_values
from passfields.core.registry import (
    available_record_kinds,
    record_kind_for,
    register_record_kind,
    resolve_record_kind,
    unregister_record_kind,
)
from passfields.core.serializer import encode, serialize
from passfields.core.validators import (
    MISSING,
    BoundedFloat,
    FieldValidator,
    OptionalFloat,
    OptionalString,
    RequiredFloat,
    ValueKind,
)

__all__ = [
    # Pipeline
    "build",
    "build_by_name",
    "serialize",
    "encode",
    "trim_string_values",
    "camelize_key",
    # Declarations
    "FieldSpec",
    "RecordKind",
    "register_record_kind",
    "unregister_record_kind",
    "available_record_kinds",
    "resolve_record_kind",
    "record_kind_for",
    # Validators
    "MISSING",
    "ValueKind",
    "FieldValidator",
    "OptionalString",
    "OptionalFloat",
    "RequiredFloat",
    "BoundedFloat",
    # Errors
    "FailureKind",
    "RecordValidationError",
    "MissingRequiredError",
    "InvalidTypeError",
    "OutOfRangeError",
    "RecordSerializationError",
    "UnknownRecordKindError",
]
