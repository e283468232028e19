"""Severity resolution for candidate violations."""

from typing import TYPE_CHECKING, Any, Sequence

from sheetlint.models import Computed, Severity, Static

if TYPE_CHECKING:
  from sheetlint.result import LintResult


def _coerce(value: Any) -> Severity | None:
  if isinstance(value, Severity):
    return value
  if isinstance(value, str):
    try:
      return Severity(value)
    except ValueError:
      return None
  return None


def resolve_severity(
  rule_name: str,
  override: Static | Computed | None,
  message_args: Sequence[Any],
  result: "LintResult",
) -> Severity:
  """Compute the effective severity of a problem.

  An override on the problem wins; a computed override that yields
  nothing usable falls back to the configured default. Without an
  override the rule's configured severity is used, then the default.
  Reads configuration only.
  """
  default = result.config.default_severity

  if override is None:
    return result.rule_severities.get(rule_name, default)

  return _coerce(override.resolve(*message_args)) or default
