"""Rule contract."""

from typing import TYPE_CHECKING, Any, Iterable, Protocol

from sheetlint.document import Root
from sheetlint.models import RuleMeta, Severity

if TYPE_CHECKING:
  from sheetlint.result import LintResult


class Rule(Protocol):
  """Protocol for configured lint rules.

  A rule is built from its configuration (a primary option and optional
  secondary options) and then scans one document at a time, reporting
  problems through ``sheetlint.report.report``. Rules hold no state
  between documents.

  Example:
    class MyRule:
      name = "my-rule"
      meta = RuleMeta(url="https://example.com/my-rule")

      def __init__(self, primary, secondary_options=None):
        self._primary = primary

      def check(self, root: Root, result: LintResult) -> None:
        for decl in root.walk_decls():
          ...
  """

  @property
  def name(self) -> str:
    """Rule identifier (e.g., 'function-space-after')."""
    ...

  @property
  def meta(self) -> RuleMeta:
    """Static metadata, notably whether the rule is fixable."""
    ...

  def check(self, root: Root, result: "LintResult") -> None:
    """Scan a document and report problems into result."""
    ...


def validate_options(
  result: "LintResult",
  rule_name: str,
  actual: Any,
  possible: Iterable[Any],
) -> bool:
  """Check a primary option against its allowed values.

  Invalid values are recorded on the result, which counts as an error.
  """
  allowed = list(possible)
  if actual in allowed:
    return True

  result.invalid_options.append(
    f'Invalid option value "{actual}" for rule "{rule_name}"'
  )
  result.latch(Severity.ERROR)
  return False
