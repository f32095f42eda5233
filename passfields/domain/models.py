"""
Record models for pass semantic data.

These are plain immutable value objects. They are meant to be created through
`passfields.core.builder.build` with the matching record kind from
`passfields.domain.kinds`, which applies trimming and the fail-fast field
contracts before the model is instantiated.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

_RECORD_CONFIG = {
    "frozen": True,
    "strict": True,
    "extra": "forbid",
}


class Seat(BaseModel):
    """
    Identification of a seat for a transit journey or an event.
    """

    seat_type: Optional[str] = Field(None, description="Type of seat, such as 'Reserved seating'.")
    seat_description: Optional[str] = Field(None, description="Description of the seat, such as 'A flat bed seat'.")
    seat_identifier: Optional[str] = Field(
        None, description="Unique identifier for the seat, such as 'Aisle 12, Row 3, Seat 5'."
    )

    model_config = _RECORD_CONFIG


class Location(BaseModel):
    """
    A location the system uses to show a relevant pass.
    """

    altitude: Optional[float] = Field(None, description="Altitude of the location, in meters.")
    latitude: float = Field(..., description="Latitude in degrees, between -90 and 90.")
    longitude: float = Field(..., description="Longitude in degrees, between -180 and 180.")

    model_config = _RECORD_CONFIG


__all__ = ["Seat", "Location"]
