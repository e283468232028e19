"""Problem reporting pipeline."""

from sheetlint.report.messages import printf_like, render, rule_messages
from sheetlint.report.pipeline import report
from sheetlint.report.suppression import (
  RULE_NAME_ALL,
  SuppressionRange,
  SuppressionTable,
  is_suppressed,
)

__all__ = [
  "RULE_NAME_ALL",
  "SuppressionRange",
  "SuppressionTable",
  "is_suppressed",
  "printf_like",
  "render",
  "report",
  "rule_messages",
]
