"""Tests for per-document result state."""

from sheetlint.config.settings import LintConfig, RuleSettings
from sheetlint.models import (
  Diagnostic,
  EditRange,
  FixOutcome,
  Position,
  Severity,
  SuppressionHit,
)
from sheetlint.result import LintResult


def _range(start_line: int, end_line: int) -> EditRange:
  return EditRange(
    start=Position(line=start_line, column=1),
    end=Position(line=end_line, column=10),
  )


class TestFromConfig:
  def test_derives_rule_views(self) -> None:
    config = LintConfig(rules={
      "a": RuleSettings(severity=Severity.WARNING, message="Custom", url="https://a"),
      "b": RuleSettings(),
    })

    result = LintResult.from_config(config)

    assert result.rule_severities == {"a": Severity.WARNING}
    assert result.custom_messages == {"a": "Custom"}
    assert result.custom_urls == {"a": "https://a"}
    assert result.disabled_ranges == {}


class TestLatches:
  def test_start_unset(self) -> None:
    result = LintResult()

    assert not result.has_error
    assert not result.has_warning

  def test_latch_is_monotonic(self) -> None:
    result = LintResult()

    result.latch(Severity.WARNING)
    result.latch(Severity.ERROR)
    result.latch(Severity.WARNING)

    assert result.has_error
    assert result.has_warning


class TestFixBookkeeping:
  def test_fixers_for_creates_once(self) -> None:
    result = LintResult()

    fixers = result.fixers_for("a")
    fixers.append(FixOutcome(fixed=False))

    assert result.fixers_for("a") is fixers
    assert result.fix_outcomes == {"a": [FixOutcome(fixed=False)]}

  def test_fix_counts(self) -> None:
    result = LintResult()
    result.fixers_for("a").extend([
      FixOutcome(fixed=True),
      FixOutcome(fixed=False),
      FixOutcome(fixed=True),
    ])

    assert result.fix_counts("a") == (2, 1)
    assert result.fix_counts("b") == (0, 0)

  def test_overlapping_fixes(self) -> None:
    result = LintResult()
    result.fixers_for("a").append(FixOutcome(fixed=True, range=_range(1, 3)))
    result.fixers_for("a").append(FixOutcome(fixed=True, range=_range(2, 2)))
    result.fixers_for("b").append(FixOutcome(fixed=True, range=_range(3, 4)))
    result.fixers_for("c").append(FixOutcome(fixed=True, range=_range(8, 9)))
    result.fixers_for("d").append(FixOutcome(fixed=False))

    assert result.overlapping_fixes() == [("a", "b")]


class TestSummary:
  def test_no_problems(self) -> None:
    assert LintResult().summary() == "No problems found."

  def test_counts_by_severity(self) -> None:
    result = LintResult()
    for severity in (Severity.ERROR, Severity.WARNING, Severity.WARNING):
      result.warn(Diagnostic(rule="a", severity=severity, text="x", line=1, column=1))
    result.suppression_hits.append(SuppressionHit(rule="a", line=2))

    assert result.summary() == "Found 3 problems: 1 error, 2 warnings. (1 suppressed)"
