"""
predicates - standalone boolean predicates.

Type checks, format validators and environment detectors, re-exported
as one flat set of functions.
"""

from predicates.components.environment import (
    DetectPlatformInput,
    HostPlatformAdapter,
    PlatformInfoPort,
    PlatformReport,
    PlatformSnapshot,
    StaticPlatformAdapter,
    UserAgentAdapter,
    is_browser,
    is_iphone,
    is_mac,
    is_weixin,
    is_windows,
)
from predicates.components.formats import (
    is_cellphone,
    is_chinese,
    is_email,
    is_html,
    is_json,
    is_lower_cased,
    is_upper_cased,
)
from predicates.components.kinds import (
    ValueKind,
    classify,
    is_array,
    is_empty,
    is_false,
    is_leap,
    is_object,
    is_primitive,
)
from predicates.rules import (
    PredicateRules,
    RulesValidationError,
    get_rules,
    init_rules,
    reset_rules,
)

__version__ = "0.1.0"

__all__ = [
    # Kinds
    "ValueKind",
    "classify",
    "is_array",
    "is_empty",
    "is_false",
    "is_leap",
    "is_object",
    "is_primitive",
    # Formats
    "is_cellphone",
    "is_chinese",
    "is_email",
    "is_html",
    "is_json",
    "is_lower_cased",
    "is_upper_cased",
    # Environment
    "is_browser",
    "is_iphone",
    "is_mac",
    "is_weixin",
    "is_windows",
    "DetectPlatformInput",
    "PlatformInfoPort",
    "PlatformReport",
    "PlatformSnapshot",
    "HostPlatformAdapter",
    "StaticPlatformAdapter",
    "UserAgentAdapter",
    # Rules
    "PredicateRules",
    "RulesValidationError",
    "get_rules",
    "init_rules",
    "reset_rules",
]
