"""Decide whether a problem is fixed silently or reported."""

import logging
from typing import TYPE_CHECKING

from sheetlint.errors import MisusedFixCallbackError
from sheetlint.models import FixOutcome, Problem
from sheetlint.report.suppression import is_suppressed

if TYPE_CHECKING:
  from sheetlint.result import LintResult

logger = logging.getLogger(__name__)


def check_fixable(problem: Problem, result: "LintResult") -> None:
  """Raise if a fix callback is passed for a rule not declared fixable."""
  if problem.fix is None:
    return

  meta = result.rule_metadata.get(problem.rule_name)
  if meta is None or not meta.fixable:
    raise MisusedFixCallbackError(problem.rule_name)


def should_fix(rule_name: str, result: "LintResult") -> bool:
  """Check if fixing is enabled globally and not disabled for the rule."""
  if not result.config.fix:
    return False
  settings = result.config.rule(rule_name)
  return not (settings and settings.disable_fix)


def apply_fix(problem: Problem, line: int, result: "LintResult") -> bool:
  """Run the problem's fix callback if allowed and record the decision.

  Every call records exactly one FixOutcome under the rule. Returns True
  when the fix ran, in which case the problem must not be reported.
  """
  fixers = result.fixers_for(problem.rule_name)

  if problem.fix is None:
    fixers.append(FixOutcome(fixed=False))
    return False

  may_fix = should_fix(problem.rule_name, result) and (
    result.config.ignore_disables
    or not is_suppressed(problem.rule_name, line, result.disabled_ranges)
  )

  if not may_fix:
    logger.debug("Fix declined for %s on line %d", problem.rule_name, line)
    fixers.append(FixOutcome(fixed=False))
    return False

  edit_range = problem.fix()
  fixers.append(FixOutcome(fixed=True, range=edit_range))
  logger.debug("Fix applied for %s on line %d", problem.rule_name, line)
  return True
