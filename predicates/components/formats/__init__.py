"""
Formats component - validators for email, cellphone, HTML, Chinese text,
JSON and letter case.
"""

from .component import (
    is_cellphone,
    is_chinese,
    is_email,
    is_html,
    is_json,
    is_lower_cased,
    is_upper_cased,
)
from .models import FormatPatterns, build_patterns

__all__ = [
    # Entry points
    "is_cellphone",
    "is_chinese",
    "is_email",
    "is_html",
    "is_json",
    "is_lower_cased",
    "is_upper_cased",
    # Models
    "FormatPatterns",
    "build_patterns",
]
