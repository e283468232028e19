"""Entry point rules use to report problems."""

import logging
from typing import TYPE_CHECKING

from sheetlint.errors import UnresolvableLineError
from sheetlint.models import Diagnostic, Problem, Severity
from sheetlint.report.autofix import apply_fix, check_fixable
from sheetlint.report.emitter import emit
from sheetlint.report.severity import resolve_severity

if TYPE_CHECKING:
  from sheetlint.result import LintResult

logger = logging.getLogger(__name__)


def resolve_line(problem: Problem) -> int:
  """Find the line a problem pertains to.

  An explicit line wins; otherwise the node locates the problem's offsets.
  """
  line = problem.line
  if line is None and problem.node is not None:
    start, _ = problem.node.range_by(problem.index, problem.end_index)
    line = start.line

  if not line:
    raise UnresolvableLineError(problem.rule_name)
  return line


def report(result: "LintResult", problem: Problem) -> Diagnostic | None:
  """Report a problem against a document's result state.

  The problem is either fixed silently, dropped (quiet mode or a
  suppression range), or committed as a diagnostic, which is returned.
  Malformed problems raise before the result state is touched.
  """
  line = resolve_line(problem)
  check_fixable(problem, result)

  severity = resolve_severity(
    problem.rule_name,
    problem.severity,
    problem.message_args,
    result,
  )

  # In quiet mode, mere warnings are ignored
  if result.config.quiet and severity != Severity.ERROR:
    logger.debug("Quiet mode dropped %s on line %d", problem.rule_name, line)
    return None

  if apply_fix(problem, line, result):
    return None

  return emit(problem, line, severity, result)
