"""
passfields - strictly-typed pass records built from loosely-typed input.

This package turns plain key-value mappings into immutable records and back
into canonical JSON-ready mappings:

- Whitespace normalization of string input
- Per-field validators (optional string, optional/required/bounded float)
- Fail-fast record construction in declaration order
- camelCase key canonicalization
- Selective serialization that omits absent fields

Bundled record kinds (`seat`, `location`) are registered on import.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from passfields.config import Settings, get_settings
from passfields.core import (
    BoundedFloat,
    FailureKind,
    FieldSpec,
    InvalidTypeError,
    MissingRequiredError,
    OptionalFloat,
    OptionalString,
    OutOfRangeError,
    RecordKind,
    RecordSerializationError,
    RecordValidationError,
    RequiredFloat,
    UnknownRecordKindError,
    available_record_kinds,
    build,
    build_by_name,
    camelize_key,
    encode,
    register_record_kind,
    resolve_record_kind,
    serialize,
    trim_string_values,
)
from passfields.domain import LOCATION, SEAT, Location, Seat
from passfields.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
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
    "OptionalString",
    "OptionalFloat",
    "RequiredFloat",
    "BoundedFloat",
    "register_record_kind",
    "resolve_record_kind",
    "available_record_kinds",
    # Errors
    "FailureKind",
    "RecordValidationError",
    "MissingRequiredError",
    "InvalidTypeError",
    "OutOfRangeError",
    "RecordSerializationError",
    "UnknownRecordKindError",
    # Records
    "Seat",
    "Location",
    "SEAT",
    "LOCATION",
    # Logging
    "configure_logging",
    "get_logger",
]
