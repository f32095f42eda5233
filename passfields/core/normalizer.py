"""
Input normalization applied before any field is validated.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


def trim_string_values(attrs: Optional[Mapping[Any, Any]]) -> Dict[Any, Any]:
    """
    Return a copy of `attrs` with surrounding whitespace stripped from every string value.

    Keys are kept as-is and non-string values pass through unchanged; type
    checking happens later, in the field validators.
    """
    if not attrs:
        return {}
    return {key: value.strip() if isinstance(value, str) else value for key, value in attrs.items()}


__all__ = ["trim_string_values"]
