"""
Selective serialization of built records.

`serialize` emits one camelCase key per field that holds a value, in
declaration order; absent optional fields are omitted entirely rather than
written as null. `encode` hands that mapping to the standard JSON encoder.
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, Optional

from pydantic import BaseModel

from passfields.core.errors import RecordSerializationError
from passfields.core.fields import RecordKind
from passfields.core.registry import record_kind_for


def _json_value(field: str, value: Any) -> Any:
    if isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise RecordSerializationError(field, f"{field} has no JSON representation: {value!r}")
        return value
    raise RecordSerializationError(
        field, f"{field} has unsupported type {type(value).__name__} for serialization"
    )


def serialize(record: BaseModel, kind: Optional[RecordKind] = None) -> Dict[str, Any]:
    """
    Produce the canonical output mapping for `record`.

    Parameters
    ----------
    record : BaseModel
        A record built by `passfields.core.builder.build`.
    kind : RecordKind | None
        Declared shape; looked up from the record's model when omitted.

    Raises
    ------
    RecordSerializationError
        If a present value cannot be represented in JSON (e.g. NaN).
    """
    resolved = kind or record_kind_for(record)
    output: Dict[str, Any] = {}
    for spec in resolved.fields:
        value = getattr(record, spec.name)
        if value is None:
            continue
        output[spec.canonical_key] = _json_value(spec.name, value)
    return output


def encode(record: BaseModel, kind: Optional[RecordKind] = None, indent: Optional[int] = None) -> str:
    """
    Serialize `record` and render it as JSON text.

    Compact separators are used unless `indent` is given.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        serialize(record, kind),
        indent=indent,
        separators=separators,
        ensure_ascii=False,
        allow_nan=False,
    )


__all__ = ["serialize", "encode"]
