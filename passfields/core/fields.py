"""
Declarative field specifications.

A `RecordKind` ties a frozen pydantic model to the ordered list of fields the
builder validates and the serializer emits. Both consumers walk the same
tuple, so validation order and output order are the declaration order.
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from typing import Any, Tuple, Type, Union, get_args, get_origin

from pydantic import BaseModel

from passfields.core.keys import camelize_key
from passfields.core.validators import FieldValidator, ValueKind

_VALUE_TYPES = {
    ValueKind.STRING: str,
    ValueKind.FLOAT: float,
}


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


@dataclass(frozen=True)
class FieldSpec:
    """
    One declared field of a record kind.

    Attributes
    ----------
    name : str
        Declaration-style (snake_case) field name; matches the model attribute.
    validator : FieldValidator
        Contract the raw value must satisfy.
    """

    name: str
    validator: FieldValidator

    @property
    def kind(self) -> ValueKind:
        return self.validator.value_kind

    @property
    def required(self) -> bool:
        return self.validator.required

    @property
    def canonical_key(self) -> str:
        return camelize_key(self.name)


@dataclass(frozen=True)
class RecordKind:
    """
    A named record shape with a fixed field order.

    Raises
    ------
    ValueError
        If field names repeat, do not match the model's declared fields in
        the same order, or a validator's value kind disagrees with the
        model field's type.
    """

    name: str
    model: Type[BaseModel]
    fields: Tuple[FieldSpec, ...]

    def __post_init__(self) -> None:
        # Accept any iterable of specs but store an immutable tuple.
        object.__setattr__(self, "fields", tuple(self.fields))

        names = self.field_names()
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Record kind '{self.name}' declares duplicate fields: {', '.join(duplicates)}")

        model_names = tuple(self.model.model_fields)
        if names != model_names:
            raise ValueError(
                f"Record kind '{self.name}' fields {list(names)} do not match "
                f"{self.model.__name__} fields {list(model_names)}"
            )

        for spec in self.fields:
            annotation = _unwrap_optional(self.model.model_fields[spec.name].annotation)
            if annotation is not _VALUE_TYPES[spec.kind]:
                raise ValueError(
                    f"Record kind '{self.name}' field '{spec.name}' is declared as {spec.kind.value} "
                    f"but {self.model.__name__}.{spec.name} is annotated {annotation!r}"
                )

    def field_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)


__all__ = ["FieldSpec", "RecordKind"]
