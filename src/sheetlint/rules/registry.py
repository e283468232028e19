"""Rule registration and discovery."""

from typing import Any, Callable

from sheetlint.models import RuleMeta
from sheetlint.rules.base import Rule

RuleFactory = Callable[[Any, dict[str, Any] | None], Rule]

_rules: dict[str, tuple[RuleFactory, RuleMeta]] = {}


def register_rule(rule_name: str, factory: RuleFactory, meta: RuleMeta) -> None:
  """Register a rule factory.

  Args:
    rule_name: Unique identifier for the rule (e.g., 'function-space-after').
    factory: Callable taking primary and secondary options, returning a Rule.
    meta: The rule's static metadata.
  """
  _rules[rule_name] = (factory, meta)


def get_rule(
  rule_name: str,
  primary: Any,
  secondary_options: dict[str, Any] | None = None,
) -> Rule:
  """Build a configured instance of a registered rule."""
  if rule_name not in _rules:
    raise KeyError(f"Unknown rule: {rule_name}")
  factory, _ = _rules[rule_name]
  return factory(primary, secondary_options)


def get_rule_meta(rule_name: str) -> RuleMeta | None:
  """Get a registered rule's metadata."""
  entry = _rules.get(rule_name)
  return entry[1] if entry else None


def list_rules() -> list[str]:
  """List all registered rule names."""
  return list(_rules.keys())


class RuleRegistry:
  """Registry for lazy rule loading."""

  @staticmethod
  def load_all() -> None:
    """Load all rule modules to trigger registration.

    Call this before using get_rule() to ensure all rules are registered.
    """
    from sheetlint.rules import function_space_after  # noqa: F401
