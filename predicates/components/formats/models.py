"""
Formats component models.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from predicates.rules.models import PredicateRules


@dataclass(frozen=True)
class FormatPatterns:
    """Compiled patterns for the string format predicates. All use fullmatch."""

    email: re.Pattern[str]
    cellphone: re.Pattern[str]
    chinese: re.Pattern[str]
    html: re.Pattern[str]


def build_patterns(rules: PredicateRules) -> FormatPatterns:
    """Pure: compile the format patterns described by rules."""
    email = rules.email
    email_pattern = rf"({email.local_part})@({email.domain})\.({email.tld})"

    phone = rules.cellphone
    remaining = phone.length - len(phone.prefix) - 1
    cellphone_pattern = (
        rf"{re.escape(phone.prefix)}[{''.join(phone.second_digits)}][0-9]{{{remaining}}}"
    )

    chinese = rules.chinese
    chinese_pattern = rf"[{re.escape(chinese.range_start)}-{re.escape(chinese.range_end)}]+"

    # A single tag pair on one line, or a self-closing tag with whitespace before "/>"
    html_pattern = (
        rf"<({rules.html.tag_name})([^<]*)(?:>([^\n\r\u2028\u2029]*)</\1>|\s+/>)"
    )

    return FormatPatterns(
        email=re.compile(email_pattern, re.ASCII),
        cellphone=re.compile(cellphone_pattern, re.ASCII),
        chinese=re.compile(chinese_pattern),
        html=re.compile(html_pattern),
    )
