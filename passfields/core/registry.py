"""
Registry of record kinds, addressable by name or by model class.
"""

from __future__ import annotations

from typing import Any, Dict, List, Type

from pydantic import BaseModel

from passfields.core.errors import UnknownRecordKindError
from passfields.core.fields import RecordKind

_KINDS_BY_NAME: Dict[str, RecordKind] = {}
_KINDS_BY_MODEL: Dict[Type[BaseModel], RecordKind] = {}


def register_record_kind(kind: RecordKind) -> RecordKind:
    """
    Register `kind` and return it, so declarations can be written inline.

    Re-registering the identical kind is a no-op; a different kind under an
    already-used name or model raises ValueError.
    """
    existing = _KINDS_BY_NAME.get(kind.name) or _KINDS_BY_MODEL.get(kind.model)
    if existing is not None:
        if existing is kind:
            return kind
        raise ValueError(f"Record kind '{kind.name}' ({kind.model.__name__}) is already registered")
    _KINDS_BY_NAME[kind.name] = kind
    _KINDS_BY_MODEL[kind.model] = kind
    return kind


def unregister_record_kind(kind: RecordKind) -> None:
    """Remove `kind`; entries now held by a different kind are left alone."""
    if _KINDS_BY_NAME.get(kind.name) is kind:
        del _KINDS_BY_NAME[kind.name]
    if _KINDS_BY_MODEL.get(kind.model) is kind:
        del _KINDS_BY_MODEL[kind.model]


def available_record_kinds() -> List[str]:
    """List registered record kind names."""
    return sorted(_KINDS_BY_NAME)


def resolve_record_kind(name: str) -> RecordKind:
    if name not in _KINDS_BY_NAME:
        raise UnknownRecordKindError(
            f"Unknown record kind '{name}'. Available: {', '.join(available_record_kinds())}"
        )
    return _KINDS_BY_NAME[name]


def record_kind_for(record_or_model: Any) -> RecordKind:
    """Find the kind declared for a record instance or its model class."""
    model = record_or_model if isinstance(record_or_model, type) else type(record_or_model)
    kind = _KINDS_BY_MODEL.get(model)
    if kind is None:
        raise UnknownRecordKindError(f"No record kind registered for {model.__name__}")
    return kind


__all__ = [
    "register_record_kind",
    "unregister_record_kind",
    "available_record_kinds",
    "resolve_record_kind",
    "record_kind_for",
]
