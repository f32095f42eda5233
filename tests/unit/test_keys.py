from __future__ import annotations

import pytest

from passfields.core.keys import camelize_key


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("seat_type", "seatType"),
        ("seat_description", "seatDescription"),
        ("seat_identifier", "seatIdentifier"),
        ("latitude", "latitude"),
        ("relevant_date_time", "relevantDateTime"),
        ("Seat_Type", "seatType"),
        ("seat-type", "seatType"),
        ("_leading__double_", "leadingDouble"),
        ("", ""),
    ],
)
def test_camelize_key(name: str, expected: str) -> None:
    assert camelize_key(name) == expected


def test_camelize_key_is_deterministic() -> None:
    assert camelize_key("seat_type") == camelize_key("seat_type")
