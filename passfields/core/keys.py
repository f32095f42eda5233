"""
Canonical (presentation) key form for declaration-style field names.
"""

from __future__ import annotations

import re
from functools import lru_cache

_SEPARATORS = re.compile(r"[_\-]+")


@lru_cache(maxsize=256)
def camelize_key(name: str) -> str:
    """
    Convert a snake-separated field name to lower camel case.

    Examples
    --------
    >>> camelize_key("seat_type")
    'seatType'
    >>> camelize_key("latitude")
    'latitude'
    """
    segments = [segment for segment in _SEPARATORS.split(str(name)) if segment]
    if not segments:
        return ""
    head, *tail = segments
    return head.lower() + "".join(segment[0].upper() + segment[1:] for segment in tail)


__all__ = ["camelize_key"]
