"""Lint configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sheetlint.models import Severity


class RuleSettings(BaseModel):
  """Configuration for a single enabled rule."""

  model_config = ConfigDict(use_enum_values=False)

  primary: Any = True
  severity: Severity | None = None
  disable_fix: bool = False
  message: str | None = None
  url: str | None = None
  options: dict[str, Any] = Field(default_factory=dict)


class LintConfig(BaseModel):
  """Effective configuration view read by the reporting core."""

  model_config = ConfigDict(use_enum_values=False)

  default_severity: Severity = Severity.ERROR
  quiet: bool = False
  fix: bool = False
  ignore_disables: bool = False
  rules: dict[str, RuleSettings] = Field(default_factory=dict)

  def rule(self, rule_name: str) -> RuleSettings | None:
    return self.rules.get(rule_name)
