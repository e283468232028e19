"""Lint rules and the engine that runs them."""

from sheetlint.rules.base import Rule, validate_options
from sheetlint.rules.engine import RuleEngine
from sheetlint.rules.registry import RuleRegistry, get_rule, list_rules, register_rule

__all__ = [
  "Rule",
  "RuleEngine",
  "RuleRegistry",
  "get_rule",
  "list_rules",
  "register_rule",
  "validate_options",
]
