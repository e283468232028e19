"""Configuration file loading."""

from pathlib import Path
from typing import Any

import yaml

from sheetlint.config.settings import LintConfig, RuleSettings
from sheetlint.errors import ConfigError
from sheetlint.models import Severity

# Keys of the secondary options object handled by the core rather than the rule
_CORE_OPTION_KEYS = {
  "severity": "severity",
  "disableFix": "disable_fix",
  "message": "message",
  "url": "url",
}

_TOP_LEVEL_KEYS = {
  "defaultSeverity": "default_severity",
  "quiet": "quiet",
  "fix": "fix",
  "ignoreDisables": "ignore_disables",
}


def load_config(path: Path) -> LintConfig:
  """Load configuration from a YAML file."""
  if not path.exists():
    raise FileNotFoundError(f"Config file not found: {path}")

  with open(path) as f:
    data = yaml.safe_load(f) or {}

  if not isinstance(data, dict):
    raise ConfigError(f"Config file must contain a mapping: {path}")

  return _parse_config(data)


def _parse_config(data: dict) -> LintConfig:
  """Parse config dict into LintConfig."""
  values: dict[str, Any] = {}

  for key, field_name in _TOP_LEVEL_KEYS.items():
    if key in data:
      values[field_name] = data[key]

  if "default_severity" in values:
    values["default_severity"] = _parse_severity(values["default_severity"])

  rules: dict[str, RuleSettings] = {}
  for rule_name, entry in (data.get("rules") or {}).items():
    settings = _parse_rule_entry(rule_name, entry)
    if settings is not None:
      rules[rule_name] = settings
  values["rules"] = rules

  return LintConfig(**values)


def _parse_rule_entry(rule_name: str, entry: Any) -> RuleSettings | None:
  """Parse ``primary`` or ``[primary, {secondary}]`` into RuleSettings.

  A null entry turns the rule off.
  """
  if entry is None:
    return None

  if not isinstance(entry, list):
    return RuleSettings(primary=entry)

  if len(entry) == 0 or len(entry) > 2:
    raise ConfigError(f'Invalid config for rule "{rule_name}": {entry!r}')

  primary = entry[0]
  if primary is None:
    return None

  secondary = entry[1] if len(entry) == 2 else {}
  if not isinstance(secondary, dict):
    raise ConfigError(
      f'Secondary options for rule "{rule_name}" must be a mapping'
    )

  values: dict[str, Any] = {"primary": primary, "options": {}}
  for key, value in secondary.items():
    if key in _CORE_OPTION_KEYS:
      values[_CORE_OPTION_KEYS[key]] = value
    else:
      values["options"][key] = value

  if values.get("severity") is not None:
    values["severity"] = _parse_severity(values["severity"])

  return RuleSettings(**values)


def _parse_severity(value: Any) -> Severity:
  try:
    return Severity(value)
  except ValueError:
    raise ConfigError(f"Unknown severity: {value!r}") from None
