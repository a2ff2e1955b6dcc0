"""
Kinds component - runtime classification of dynamic values.

Invariants:
- I1: classify() maps every value to exactly one ValueKind
- I2: bool is BOOLEAN, never NUMBER
- I3: text and byte strings are never SEQUENCE
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence, Sized
from typing import Any

from .models import PRIMITIVE_KINDS, ValueKind

_TEXT_TYPES = (str, bytes, bytearray)


def classify(value: Any) -> ValueKind:
    if value is None:
        return ValueKind.NULL

    # bool subclasses int, check it first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN

    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER

    if isinstance(value, str):
        return ValueKind.STRING

    if isinstance(value, Mapping):
        return ValueKind.MAPPING

    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return ValueKind.SEQUENCE

    return ValueKind.OTHER


def is_array(value: Any) -> bool:
    return classify(value) is ValueKind.SEQUENCE


def is_object(value: Any) -> bool:
    return classify(value) is ValueKind.MAPPING


def is_primitive(value: Any) -> bool:
    """None stands in for both undefined and null; ints cover big integers."""
    return classify(value) in PRIMITIVE_KINDS


def is_empty(value: Any) -> bool:
    """
    True for a zero-length sequence or mapping, or an object with no own
    attributes. Scalars carry no own attributes and are therefore empty.
    Strings always carry a length and are never empty.
    """
    if is_array(value) or is_object(value):
        return len(value) == 0

    if isinstance(value, str):
        return False

    if isinstance(value, Sized):
        return len(value) == 0

    attrs = getattr(value, "__dict__", None)
    if attrs is not None:
        return len(attrs) == 0

    return True


def _is_falsy_sentinel(value: Any) -> bool:
    """Type-exact match against "", 0, False, NaN and None."""
    if value is None or value is False:
        return True

    kind = type(value)
    if kind is str:
        return value == ""
    if kind is int:
        return value == 0
    if kind is float:
        if math.isnan(value):
            return True
        # -0.0 is a distinct value
        return value == 0.0 and math.copysign(1.0, value) > 0
    return False


def is_false(value: Any) -> bool:
    """
    False for the falsy sentinels, otherwise whether the value is empty.

    The result is inverted relative to the name: is_false(0) is False and
    is_false([]) is True.
    """
    if _is_falsy_sentinel(value):
        return False

    return is_empty(value)


def is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
