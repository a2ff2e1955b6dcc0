"""
Rules loader for the format predicates.

Rules are optional: when no rules file is present the built-in defaults
apply. A rules file that exists but is malformed fails fast.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from predicates.rules.models import PredicateRules

logger = logging.getLogger(__name__)

# Default rules file path (relative to project root)
DEFAULT_RULES_PATH = "predicates_rules.yaml"

RULES_PATH_ENV = "PREDICATES_RULES_PATH"


class RulesValidationError(Exception):
    """Raised when the rules file fails YAML parsing or schema validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Rules validation failed: {'; '.join(errors)}")


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def load_rules_file(rules_path: Path | str | None = None) -> dict[str, Any]:
    """
    Load the rules YAML from disk.

    Args:
        rules_path: Path to rules file. If None, the PREDICATES_RULES_PATH
            environment variable is checked, then the project root default.

    Returns:
        Parsed rules dictionary. Empty if no explicit path was given and the
        default file does not exist.

    Raises:
        FileNotFoundError: If an explicitly requested rules file is missing.
        RulesValidationError: If the file is not valid YAML.
    """
    explicit = rules_path is not None
    if rules_path is None:
        env_path = os.environ.get(RULES_PATH_ENV)
        if env_path:
            rules_path = Path(env_path)
            explicit = True
        else:
            rules_path = _find_project_root() / DEFAULT_RULES_PATH

    rules_path = Path(rules_path)

    if not rules_path.exists():
        if explicit:
            raise FileNotFoundError(f"Rules file not found: {rules_path}")
        logger.debug("No rules file at %s, using defaults", rules_path)
        return {}

    with open(rules_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RulesValidationError([f"Invalid YAML syntax: {e}"]) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RulesValidationError(["Rules file must contain a mapping at the top level"])

    logger.info("Loaded predicate rules from %s", rules_path)
    result: dict[str, Any] = data
    return result


def validate_rules(rules: dict[str, Any]) -> PredicateRules:
    """
    Validate a rules dictionary.

    Raises:
        RulesValidationError: With one message per pydantic error.
    """
    try:
        return PredicateRules.model_validate(rules)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise RulesValidationError(errors) from e


def load_and_validate_rules(rules_path: Path | str | None = None) -> PredicateRules:
    rules = load_rules_file(rules_path)
    return validate_rules(rules)


# Module-level cache of the active rules
_loaded_rules: PredicateRules | None = None


def get_rules() -> PredicateRules:
    """
    Get the active rules.

    Falls back to the default rules file (or built-in defaults) when
    init_rules() has not been called.
    """
    global _loaded_rules
    if _loaded_rules is None:
        _loaded_rules = load_and_validate_rules()
    return _loaded_rules


def init_rules(rules_path: Path | str | None = None) -> PredicateRules:
    """
    Load, validate and activate rules. Call once at startup.

    Raises:
        FileNotFoundError: If an explicit rules file is missing.
        RulesValidationError: If rules are invalid.
    """
    global _loaded_rules
    _loaded_rules = load_and_validate_rules(rules_path)
    return _loaded_rules


def use_rules(rules: PredicateRules) -> None:
    """Activate an already-built rules object."""
    global _loaded_rules
    _loaded_rules = rules


def reset_rules() -> None:
    """Reset the cache (for testing)."""
    global _loaded_rules
    _loaded_rules = None
