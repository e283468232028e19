"""Rule engine that runs configured rules over a document."""

import logging

from sheetlint.config.settings import LintConfig
from sheetlint.document import Root
from sheetlint.errors import SheetlintError
from sheetlint.models import RuleMeta
from sheetlint.report.suppression import SuppressionTable
from sheetlint.result import LintResult
from sheetlint.rules.base import Rule
from sheetlint.rules.registry import RuleRegistry, get_rule, get_rule_meta, list_rules

logger = logging.getLogger(__name__)


class RuleEngine:
  """Runs rules one after another against a single document.

  Each call to ``lint`` creates a fresh LintResult, so one engine can be
  reused across documents. A rule whose pass raises a SheetlintError is
  recorded in ``result.rule_errors`` and the remaining rules still run,
  unless the engine is strict.

  Example:
    engine = RuleEngine()
    result = engine.lint(root, config, disabled_ranges)
  """

  def __init__(self, rules: list[Rule] | None = None, strict: bool = False):
    """Initialize the rule engine.

    Args:
      rules: Optional list of configured rules. If None, rules are built
             from the registry for every rule enabled in the config.
      strict: Re-raise errors from rule passes instead of recording them.
    """
    self._rules = rules
    self._strict = strict

  def lint(
    self,
    root: Root,
    config: LintConfig,
    disabled_ranges: SuppressionTable | None = None,
  ) -> LintResult:
    """Run every rule over a document and return its result state."""
    rules, metadata, unknown = self._resolve_rules(config)

    result = LintResult.from_config(
      config,
      disabled_ranges=disabled_ranges,
      rule_metadata=metadata,
    )
    for rule_name in unknown:
      result.invalid_options.append(f'Unknown rule "{rule_name}"')

    for rule in rules:
      try:
        rule.check(root, result)
      except SheetlintError as e:
        if self._strict:
          raise
        logger.warning("Rule %s aborted: %s", rule.name, e)
        result.rule_errors[rule.name] = str(e)

    return result

  def _resolve_rules(
    self,
    config: LintConfig,
  ) -> tuple[list[Rule], dict[str, RuleMeta], list[str]]:
    """Build rules with their metadata, plus configured names not registered."""
    if self._rules is not None:
      return self._rules, {rule.name: rule.meta for rule in self._rules}, []

    RuleRegistry.load_all()
    known = set(list_rules())

    rules: list[Rule] = []
    metadata: dict[str, RuleMeta] = {}
    unknown: list[str] = []
    for rule_name, settings in config.rules.items():
      if rule_name not in known:
        unknown.append(rule_name)
        continue
      rules.append(get_rule(rule_name, settings.primary, settings.options))
      metadata[rule_name] = get_rule_meta(rule_name)
    return rules, metadata, unknown
