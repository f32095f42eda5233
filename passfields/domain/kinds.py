"""
Record kind declarations for the bundled models.

Field order here is validation order and output order.
"""
from __future__ import annotations

from passfields.core.fields import FieldSpec, RecordKind
from passfields.core.registry import register_record_kind
from passfields.core.validators import BoundedFloat, OptionalFloat, OptionalString
from passfields.domain.models import Location, Seat

SEAT = register_record_kind(
    RecordKind(
        name="seat",
        model=Seat,
        fields=(
            FieldSpec("seat_type", OptionalString()),
            FieldSpec("seat_description", OptionalString()),
            FieldSpec("seat_identifier", OptionalString()),
        ),
    )
)

LOCATION = register_record_kind(
    RecordKind(
        name="location",
        model=Location,
        fields=(
            FieldSpec("altitude", OptionalFloat()),
            FieldSpec("latitude", BoundedFloat(-90, 90)),
            FieldSpec("longitude", BoundedFloat(-180, 180)),
        ),
    )
)


__all__ = ["SEAT", "LOCATION"]
