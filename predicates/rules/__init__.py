"""
Predicate rules - tunable patterns for the format predicates.
"""

from .loader import (
    DEFAULT_RULES_PATH,
    RULES_PATH_ENV,
    RulesValidationError,
    get_rules,
    init_rules,
    load_and_validate_rules,
    load_rules_file,
    reset_rules,
    use_rules,
    validate_rules,
)
from .models import (
    CellphoneRules,
    ChineseRules,
    EmailRules,
    HtmlRules,
    PredicateRules,
)

__all__ = [
    "DEFAULT_RULES_PATH",
    "RULES_PATH_ENV",
    "RulesValidationError",
    "get_rules",
    "init_rules",
    "load_and_validate_rules",
    "load_rules_file",
    "reset_rules",
    "use_rules",
    "validate_rules",
    # Models
    "CellphoneRules",
    "ChineseRules",
    "EmailRules",
    "HtmlRules",
    "PredicateRules",
]
