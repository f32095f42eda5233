"""
Record builder: normalize, validate field by field, then construct.

Usage:
    from passfields.core.builder import build
    from passfields.domain import LOCATION

    location = build(LOCATION, {"latitude": 37.7749, "longitude": -122.4194})

Validation is strictly fail-fast. Fields are checked in declaration order and
the first `RecordValidationError` propagates to the caller unchanged; later
fields are never looked at and no record is created.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel

from passfields.core.errors import RecordValidationError
from passfields.core.fields import FieldSpec, RecordKind
from passfields.core.normalizer import trim_string_values
from passfields.core.registry import resolve_record_kind
from passfields.core.validators import MISSING
from passfields.utils.logging import get_logger

log = get_logger(__name__)


def _lookup(attrs: Mapping[Any, Any], spec: FieldSpec) -> Any:
    # Canonical keys are accepted too, so serialized output can be rebuilt.
    if spec.name in attrs:
        return attrs[spec.name]
    return attrs.get(spec.canonical_key, MISSING)


def _validate_fields(kind: RecordKind, attrs: Mapping[Any, Any]) -> Dict[str, Any]:
    validated: Dict[str, Any] = {}
    for spec in kind.fields:
        validated[spec.name] = spec.validator.validate(spec.name, _lookup(attrs, spec))
    return validated


def build(kind: RecordKind, attrs: Optional[Mapping[Any, Any]] = None) -> BaseModel:
    """
    Build an immutable record of `kind` from a loosely-typed mapping.

    Parameters
    ----------
    kind : RecordKind
        Declared record shape.
    attrs : Mapping | None
        Raw input. String values are trimmed before validation; keys that are
        not declared fields (in snake_case or camelCase form) are ignored.

    Returns
    -------
    BaseModel
        Instance of `kind.model` with every declared field set; absent
        optional fields are None.

    Raises
    ------
    RecordValidationError
        For the first field, in declaration order, that fails its contract.
    """
    normalized = trim_string_values(attrs)
    try:
        validated = _validate_fields(kind, normalized)
    except RecordValidationError as exc:
        log.debug(
            f"[BUILD FAILED] {kind.name}",
            extra={
                "record_kind": kind.name,
                "field": exc.field,
                "failure": exc.kind.value,
            },
        )
        raise

    record = kind.model(**validated)
    log.debug(
        f"[BUILD OK] {kind.name}",
        extra={
            "record_kind": kind.name,
            "fields_set": [name for name, value in validated.items() if value is not None],
        },
    )
    return record


def build_by_name(kind_name: str, attrs: Optional[Mapping[Any, Any]] = None) -> BaseModel:
    """Resolve a registered record kind by name and build it."""
    return build(resolve_record_kind(kind_name), attrs)


__all__ = ["build", "build_by_name"]
