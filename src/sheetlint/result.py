"""Per-document result state shared by every rule in a pass."""

from dataclasses import dataclass, field
from typing import Callable, Mapping

from sheetlint.config.settings import LintConfig
from sheetlint.models import (
  Diagnostic,
  FixOutcome,
  RuleMeta,
  Severity,
  SuppressionHit,
)
from sheetlint.report.suppression import SuppressionTable


@dataclass
class LintResult:
  """Mutable state for one document's lint pass.

  One instance is created per document before any rule runs and is
  never shared with another document. ``has_error`` and ``has_warning``
  only ever go from False to True; use ``latch`` to set them.
  """

  config: LintConfig = field(default_factory=LintConfig)
  disabled_ranges: SuppressionTable = field(default_factory=dict)
  rule_metadata: Mapping[str, RuleMeta] = field(default_factory=dict)
  rule_severities: Mapping[str, Severity] = field(default_factory=dict)
  custom_messages: Mapping[str, str | Callable[..., str]] = field(default_factory=dict)
  custom_urls: Mapping[str, str] = field(default_factory=dict)

  diagnostics: list[Diagnostic] = field(default_factory=list)
  suppression_hits: list[SuppressionHit] = field(default_factory=list)
  fix_outcomes: dict[str, list[FixOutcome]] = field(default_factory=dict)
  invalid_options: list[str] = field(default_factory=list)
  rule_errors: dict[str, str] = field(default_factory=dict)

  _has_error: bool = field(default=False, init=False, repr=False)
  _has_warning: bool = field(default=False, init=False, repr=False)

  @classmethod
  def from_config(
    cls,
    config: LintConfig,
    disabled_ranges: SuppressionTable | None = None,
    rule_metadata: Mapping[str, RuleMeta] | None = None,
  ) -> "LintResult":
    """Build result state with per-rule views derived from config."""
    severities = {}
    messages = {}
    urls = {}
    for rule_name, settings in config.rules.items():
      if settings.severity is not None:
        severities[rule_name] = settings.severity
      if settings.message is not None:
        messages[rule_name] = settings.message
      if settings.url is not None:
        urls[rule_name] = settings.url

    return cls(
      config=config,
      disabled_ranges=disabled_ranges or {},
      rule_metadata=rule_metadata or {},
      rule_severities=severities,
      custom_messages=messages,
      custom_urls=urls,
    )

  @property
  def has_error(self) -> bool:
    return self._has_error

  @property
  def has_warning(self) -> bool:
    return self._has_warning

  def latch(self, severity: Severity) -> None:
    """Record that a diagnostic of this severity was emitted."""
    if severity == Severity.ERROR:
      self._has_error = True
    elif severity == Severity.WARNING:
      self._has_warning = True

  def fixers_for(self, rule_name: str) -> list[FixOutcome]:
    """Get the fix outcome list for a rule, creating it if absent."""
    return self.fix_outcomes.setdefault(rule_name, [])

  def warn(self, diagnostic: Diagnostic) -> None:
    """Commit a finished diagnostic."""
    self.diagnostics.append(diagnostic)

  def fix_counts(self, rule_name: str) -> tuple[int, int]:
    """Return (applied, declined) fix counts for a rule."""
    outcomes = self.fix_outcomes.get(rule_name, [])
    applied = sum(1 for o in outcomes if o.fixed)
    return applied, len(outcomes) - applied

  def overlapping_fixes(self) -> list[tuple[str, str]]:
    """Find pairs of rules whose applied fixes touched overlapping ranges.

    Fixes are never rejected during a pass; callers use this to decide
    whether the document needs another pass.
    """
    applied = [
      (rule_name, outcome.range)
      for rule_name, outcomes in self.fix_outcomes.items()
      for outcome in outcomes
      if outcome.fixed and outcome.range is not None
    ]

    conflicts: list[tuple[str, str]] = []
    for i, (rule_a, range_a) in enumerate(applied):
      for rule_b, range_b in applied[i + 1:]:
        if rule_a == rule_b or not range_a.overlaps(range_b):
          continue
        pair = (rule_a, rule_b)
        if pair not in conflicts:
          conflicts.append(pair)
    return conflicts

  def summary(self) -> str:
    """Generate a human-readable summary of the pass."""
    if not self.diagnostics:
      return "No problems found."

    by_severity: dict[str, int] = {}
    for diagnostic in self.diagnostics:
      sev = diagnostic.severity.value
      by_severity[sev] = by_severity.get(sev, 0) + 1

    parts = []
    for sev_enum in Severity:
      sev = sev_enum.value
      if sev in by_severity:
        parts.append(f"{by_severity[sev]} {sev}{'s' if by_severity[sev] != 1 else ''}")

    count = len(self.diagnostics)
    summary = f"Found {count} problem{'s' if count != 1 else ''}"
    if parts:
      summary += f": {', '.join(parts)}"
    summary += "."

    if self.suppression_hits:
      summary += f" ({len(self.suppression_hits)} suppressed)"

    return summary
