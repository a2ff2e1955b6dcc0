"""
Formats component - string format validators.

Patterns come from the active predicate rules and are compiled once per
rules object. All pattern checks are full matches.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from predicates.components.kinds import is_array, is_object
from predicates.rules import PredicateRules, get_rules

from .models import FormatPatterns, build_patterns

logger = logging.getLogger(__name__)

_compiled: tuple[PredicateRules, FormatPatterns] | None = None


def _patterns() -> FormatPatterns:
    global _compiled
    rules = get_rules()
    if _compiled is None or _compiled[0] is not rules:
        _compiled = (rules, build_patterns(rules))
    return _compiled[1]


def is_email(value: str) -> bool:
    return _patterns().email.fullmatch(value) is not None


def is_cellphone(value: str) -> bool:
    return _patterns().cellphone.fullmatch(value) is not None


def is_html(value: str) -> bool:
    """Heuristic: one well-formed tag pair or a self-closing tag, not a parser."""
    return _patterns().html.fullmatch(value) is not None


def is_chinese(value: str) -> bool:
    return _patterns().chinese.fullmatch(value) is not None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def is_json(value: str) -> bool:
    """True if value parses as strict JSON whose root is an object or array."""
    try:
        # Numbers parse as floats; digit count is unbounded
        result = json.loads(value, parse_int=float, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("is_json: not JSON: %s", e)
        return False

    return is_array(result) or is_object(result)


def is_upper_cased(value: str) -> bool:
    return value == value.upper()


def is_lower_cased(value: str) -> bool:
    return value == value.lower()
