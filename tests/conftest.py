"""Pytest fixtures."""

from typing import Callable

import pytest
from sheetlint.config.settings import LintConfig, RuleSettings
from sheetlint.document import Declaration, Root
from sheetlint.models import EditRange, Position, RuleMeta
from sheetlint.result import LintResult

RULE = "test-rule"


@pytest.fixture
def make_result() -> Callable[..., LintResult]:
  """Build a LintResult for a single test rule."""

  def _make(
    fixable: bool = True,
    rule_settings: RuleSettings | None = None,
    disabled_ranges: dict | None = None,
    **config_values,
  ) -> LintResult:
    rules = {RULE: rule_settings or RuleSettings(primary=True)}
    config = LintConfig(rules=rules, **config_values)
    return LintResult.from_config(
      config,
      disabled_ranges=disabled_ranges,
      rule_metadata={RULE: RuleMeta(fixable=fixable)},
    )

  return _make


@pytest.fixture
def sample_decl() -> Declaration:
  return Declaration(
    prop="transform",
    value="translate(10px)scale(2)",
    source=Position(line=3, column=5),
  )


@pytest.fixture
def sample_root(sample_decl: Declaration) -> Root:
  return Root(nodes=[sample_decl])


@pytest.fixture
def edit_range() -> EditRange:
  return EditRange(start=Position(line=3, column=5), end=Position(line=3, column=20))
