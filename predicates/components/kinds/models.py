"""
Kinds component models.
"""

from __future__ import annotations

from enum import Enum


class ValueKind(str, Enum):
    """Closed classification of a dynamically typed value."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    OTHER = "other"


PRIMITIVE_KINDS: frozenset[ValueKind] = frozenset(
    {ValueKind.STRING, ValueKind.NUMBER, ValueKind.BOOLEAN, ValueKind.NULL}
)
