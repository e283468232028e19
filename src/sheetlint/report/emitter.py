"""Assemble and commit diagnostics."""

import logging
from typing import TYPE_CHECKING

from sheetlint.models import Diagnostic, Problem, Severity, SuppressionHit, as_variant
from sheetlint.report.messages import render
from sheetlint.report.suppression import is_suppressed

if TYPE_CHECKING:
  from sheetlint.result import LintResult

logger = logging.getLogger(__name__)


def emit(
  problem: Problem,
  line: int,
  severity: Severity,
  result: "LintResult",
) -> Diagnostic | None:
  """Report a problem that was not fixed.

  Suppressed problems are recorded as hits even when suppressions are
  ignored, so that unused suppression directives can be found later.
  Returns the committed diagnostic, or None when suppressed.
  """
  rule_name = problem.rule_name

  if is_suppressed(rule_name, line, result.disabled_ranges):
    result.suppression_hits.append(SuppressionHit(rule=rule_name, line=line))
    if not result.config.ignore_disables:
      logger.debug("Suppressed %s on line %d", rule_name, line)
      return None

  result.latch(severity)

  diagnostic = Diagnostic(
    rule=rule_name,
    severity=severity,
    text=_message_for(problem, result),
    word=problem.word or None,
    url=result.custom_urls.get(rule_name),
    node=problem.node,
    **_position_for(problem, line),
  )
  result.warn(diagnostic)
  return diagnostic


def _message_for(problem: Problem, result: "LintResult") -> str:
  custom = result.custom_messages.get(problem.rule_name)
  message = as_variant(custom) if custom is not None else problem.message
  return render(message, problem.message_args)


def _position_for(problem: Problem, line: int) -> dict:
  """Build position fields, preferring start/end over index/end_index."""
  fields: dict = {}

  if problem.index is not None and problem.start is None:
    fields["index"] = problem.index
  if problem.end_index is not None and problem.end is None:
    fields["end_index"] = problem.end_index

  start = problem.start
  end = problem.end
  if problem.node is not None and (start is None or end is None):
    node_start, node_end = problem.node.range_by(problem.index, problem.end_index)
    start = start or node_start
    end = end or node_end

  if start is None:
    fields["line"] = line
    fields["column"] = 1
  else:
    fields["line"] = start.line
    fields["column"] = start.column

  if end is not None:
    fields["end_line"] = end.line
    fields["end_column"] = end.column

  return fields
