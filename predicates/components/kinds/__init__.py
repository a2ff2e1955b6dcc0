"""
Kinds component - type checks over dynamically typed values.

Classifies values into a closed set of kinds and answers emptiness,
falsiness and leap-year questions.
"""

from .component import (
    classify,
    is_array,
    is_empty,
    is_false,
    is_leap,
    is_object,
    is_primitive,
)
from .models import PRIMITIVE_KINDS, ValueKind

__all__ = [
    # Entry points
    "classify",
    "is_array",
    "is_empty",
    "is_false",
    "is_leap",
    "is_object",
    "is_primitive",
    # Models
    "PRIMITIVE_KINDS",
    "ValueKind",
]
