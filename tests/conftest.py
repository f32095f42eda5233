"""
Pytest configuration for passfields.

Provides fixtures for:
- Settings isolation from the developer's environment / .env
- A throwaway record kind registered only for the duration of a test
- Canonical valid inputs for the bundled record kinds
"""

from __future__ import annotations

from typing import Any, Dict, Generator, Optional

import pytest
from pydantic import BaseModel

from passfields.config import get_settings
from passfields.core.fields import FieldSpec, RecordKind
from passfields.core.registry import register_record_kind, unregister_record_kind
from passfields.core.validators import BoundedFloat, OptionalString, RequiredFloat


class Reading(BaseModel):
    label: Optional[str] = None
    value: float
    ratio: float
    note: Optional[str] = None

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Pin logging/output settings and reset the settings cache around each test.
    """
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_JSON", "false")
    monkeypatch.delenv("OUTPUT_INDENT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def reading_kind() -> Generator[RecordKind, None, None]:
    """
    A registered four-field kind mixing optional and required fields.

    Declaration order: label, value, ratio (bounded [0, 1]), note.
    """
    kind = register_record_kind(
        RecordKind(
            name="reading",
            model=Reading,
            fields=(
                FieldSpec("label", OptionalString()),
                FieldSpec("value", RequiredFloat()),
                FieldSpec("ratio", BoundedFloat(0, 1)),
                FieldSpec("note", OptionalString()),
            ),
        )
    )
    try:
        yield kind
    finally:
        unregister_record_kind(kind)


@pytest.fixture()
def location_attrs() -> Dict[str, Any]:
    return {"latitude": 37.7749, "longitude": -122.4194}


@pytest.fixture()
def seat_attrs() -> Dict[str, Any]:
    return {
        "seat_type": "Reserved seating",
        "seat_description": "A push back seat",
        "seat_identifier": "Aisle 12, Row 3, Seat 5",
    }
