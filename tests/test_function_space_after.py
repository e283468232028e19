"""Tests for the function-space-after rule."""

import pytest
from sheetlint.config.settings import LintConfig, RuleSettings
from sheetlint.document import Declaration, Root
from sheetlint.models import Position, Severity
from sheetlint.report import SuppressionRange
from sheetlint.result import LintResult
from sheetlint.rules.function_space_after import (
  FunctionSpaceAfterRule,
  messages,
  meta,
  rule_name,
)

EXPECTED = 'Expected single space after ")" (function-space-after)'
REJECTED = 'Unexpected whitespace after ")" (function-space-after)'


def _lint(expectation: str, *values: str, **config_values) -> LintResult:
  config = LintConfig(
    rules={rule_name: RuleSettings(primary=expectation)},
    **config_values,
  )
  result = LintResult.from_config(config, rule_metadata={rule_name: meta})
  root = Root(nodes=[
    Declaration(prop="transform", value=value, source=Position(line=i, column=1))
    for i, value in enumerate(values, start=1)
  ])
  FunctionSpaceAfterRule(expectation).check(root, result)
  return result


class TestMetadata:
  def test_properties(self) -> None:
    rule = FunctionSpaceAfterRule("always")

    assert rule.name == "function-space-after"
    assert not rule.meta.fixable
    assert messages["expected"] == EXPECTED
    assert messages["rejected"] == REJECTED


class TestAlways:
  def test_missing_space(self) -> None:
    result = _lint("always", "translate(10px)scale(2)")

    assert len(result.diagnostics) == 1
    diagnostic = result.diagnostics[0]
    assert diagnostic.text == EXPECTED
    assert diagnostic.severity == Severity.ERROR
    # "transform: " is 11 characters, the delimiter is at value index 14
    assert diagnostic.index == 25
    assert (diagnostic.line, diagnostic.column) == (1, 26)

  @pytest.mark.parametrize("value", [
    "translate(10px) scale(2)",
    "rgba(0,0,0,.5)",
    "a(b(c))",
    "a(1), b(2)",
    "rotate(45deg) ",
  ])
  def test_accepted(self, value: str) -> None:
    assert _lint("always", value).diagnostics == []

  @pytest.mark.parametrize("value", [
    "translate(10px)  scale(2)",
    "translate(10px)\tscale(2)",
    "translate(10px) \nscale(2)",
    "a(1);",
  ])
  def test_rejected(self, value: str) -> None:
    result = _lint("always", value)

    assert [d.text for d in result.diagnostics] == [EXPECTED]

  def test_ignores_delimiters_in_strings_and_comments(self) -> None:
    result = _lint("always", 'url(")x") /* a)b */ scale(2)')

    assert result.diagnostics == []


class TestNever:
  def test_trailing_space(self) -> None:
    result = _lint("never", "rotate(45deg) ")

    assert [d.text for d in result.diagnostics] == [REJECTED]

  def test_space_between_functions(self) -> None:
    result = _lint("never", "translate(10px) scale(2)")

    assert [d.text for d in result.diagnostics] == [REJECTED]

  @pytest.mark.parametrize("value", [
    "translate(10px)scale(2)",
    "rgba(0,0,0,.5)",
    "a(1),b(2)",
  ])
  def test_accepted(self, value: str) -> None:
    assert _lint("never", value).diagnostics == []


class TestReporting:
  def test_reports_each_declaration_line(self) -> None:
    result = _lint("always", "a(1)b", "ok", "c(2)d")

    assert [d.line for d in result.diagnostics] == [1, 3]

  def test_respects_suppression(self) -> None:
    config = LintConfig(rules={rule_name: RuleSettings(primary="always")})
    result = LintResult.from_config(
      config,
      disabled_ranges={rule_name: [SuppressionRange(start=1, end=1)]},
      rule_metadata={rule_name: meta},
    )
    root = Root(nodes=[Declaration(prop="transform", value="a(1)b")])

    FunctionSpaceAfterRule("always").check(root, result)

    assert result.diagnostics == []
    assert len(result.suppression_hits) == 1

  def test_secondary_options_do_not_change_checks(self) -> None:
    config = LintConfig(rules={rule_name: RuleSettings(primary="always")})
    result = LintResult.from_config(config, rule_metadata={rule_name: meta})
    root = Root(nodes=[Declaration(prop="transform", value="a(1)b")])

    FunctionSpaceAfterRule("always", {"ignore": ["anything"]}).check(root, result)

    assert [d.text for d in result.diagnostics] == [EXPECTED]

  def test_invalid_option(self) -> None:
    result = _lint("sometimes", "a(1)b")

    assert result.diagnostics == []
    assert result.invalid_options == [
      'Invalid option value "sometimes" for rule "function-space-after"'
    ]
    assert result.has_error

  def test_records_unfixed_outcomes(self) -> None:
    result = _lint("always", "a(1)b(2)c", fix=True)

    assert [o.fixed for o in result.fix_outcomes[rule_name]] == [False, False]
